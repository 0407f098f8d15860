"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the applicant"""

    identity_code: str
    loan_amount: int  # EUR
    loan_period: int  # months


@dataclass(frozen=True)
class Decision:
    """
    Output of the decision engine.

    Either the approved fields are all set, or only error_message is.
    """

    approved_amount: Optional[int] = None
    approved_period: Optional[int] = None
    error_message: Optional[str] = None
    monthly_payment: Optional[int] = None

    @classmethod
    def rejected(cls, error_message: str) -> "Decision":
        return cls(error_message=error_message)

    @property
    def approved(self) -> bool:
        return self.approved_amount is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the public field names"""
        return {
            "approvedAmount": self.approved_amount,
            "approvedPeriod": self.approved_period,
            "errorMessage": self.error_message,
            "monthlyPayment": self.monthly_payment,
        }


class CreditSegment(Enum):
    """Credit tier derived from the identity code; value is the credit modifier"""

    NO_CREDIT = 0
    SEGMENT_1 = 100
    SEGMENT_2 = 300
    SEGMENT_3 = 1000

    @property
    def credit_modifier(self) -> int:
        return self.value
