"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from decision_engine.domain.models import Decision


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    identity_code: str = Field(..., alias="identityCode", description="Estonian personal identity code")
    loan_amount: int = Field(..., alias="loanAmount", description="Requested loan amount in EUR")
    loan_period: int = Field(..., alias="loanPeriod", description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    approved_amount: Optional[int] = Field(None, alias="approvedAmount")
    approved_period: Optional[int] = Field(None, alias="approvedPeriod")
    error_message: Optional[str] = Field(None, alias="errorMessage")
    monthly_payment: Optional[int] = Field(None, alias="monthlyPayment")

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            approved_amount=decision.approved_amount,
            approved_period=decision.approved_period,
            error_message=decision.error_message,
            monthly_payment=decision.monthly_payment,
        )

    @classmethod
    def from_error(cls, message: str) -> "DecisionResponse":
        return cls(error_message=message)
