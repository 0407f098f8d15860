"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from decision_engine.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_engine.api.dependencies import get_decision_engine, get_request_id
from decision_engine.domain.engine import DecisionEngine
from decision_engine.domain.exceptions import NoValidLoanError
from decision_engine.infrastructure.observability.metrics import record_decision
from decision_engine.infrastructure.observability.logging import log_decision

router = APIRouter()

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = DecisionResponse.from_error(message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the largest loan the applicant qualifies for.

    Responses:
    - 200: approved amount, period and monthly payment
    - 400: request failed validation (identity code, amount or period)
    - 404: no loan can be offered
    - 500: unexpected error
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.calculate_approved_loan(
            request_body.identity_code,
            request_body.loan_amount,
            request_body.loan_period,
        )

    except NoValidLoanError as e:
        record_decision("declined")
        log_decision(request_id, "declined", None, None, (time.time() - start_time) * 1000)
        return _error_response(404, str(e))

    except Exception as e:
        record_decision("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return _error_response(500, UNEXPECTED_ERROR_MESSAGE)

    duration_ms = (time.time() - start_time) * 1000

    if not decision.approved:
        record_decision("invalid")
        logging.warning(f"Invalid loan request: {decision.error_message}", extra={"request_id": request_id})
        return _error_response(400, decision.error_message)

    record_decision("approved", decision.approved_amount)
    log_decision(request_id, "approved", decision.approved_amount, decision.approved_period, duration_ms)

    return DecisionResponse.from_decision(decision)
