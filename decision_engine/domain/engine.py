"""Loan decision engine - core business logic for loan approvals"""

import logging
from datetime import date
from typing import Callable

from decision_engine.config import Settings, settings as default_settings
from decision_engine.domain.exceptions import (
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidLoanRequestError,
    NoValidLoanError,
)
from decision_engine.domain.identity_code import (
    EstonianIdentityCodeValidator,
    IdentityCodeValidator,
    derive_birth_date,
    last_four_digits,
)
from decision_engine.domain.models import CreditSegment, Decision, LoanRequest
from decision_engine.utils.date_utils import full_years_between, months_between

logger = logging.getLogger(__name__)

ADULT_AGE_YEARS = 18

MINOR_APPLICANT_MESSAGE = "The minimum age for applying for a loan is 18."
AGE_LIMIT_EXCEEDED_MESSAGE = "Unfortunately, your age exceeds the maximum set limit for this loan."


def get_credit_segment(identity_code: str) -> CreditSegment:
    """
    Map the last four digits of the identity code to a credit segment.

    Segments:
    - 0000 - 2499: No credit (debt)
    - 2500 - 4999: Segment 1, modifier 100
    - 5000 - 7499: Segment 2, modifier 300
    - 7500 - 9999: Segment 3, modifier 1000
    """
    digits = last_four_digits(identity_code)

    if digits < 2500:
        return CreditSegment.NO_CREDIT
    elif digits < 5000:
        return CreditSegment.SEGMENT_1
    elif digits < 7500:
        return CreditSegment.SEGMENT_2
    else:
        return CreditSegment.SEGMENT_3


def interest_rate_for(credit_modifier: int, config: Settings) -> float:
    """Configured interest rate for a credit modifier, 0.0 for unknown modifiers"""
    rates = {
        CreditSegment.SEGMENT_1.value: config.interest_rate_segment_1,
        CreditSegment.SEGMENT_2.value: config.interest_rate_segment_2,
        CreditSegment.SEGMENT_3.value: config.interest_rate_segment_3,
    }
    return rates.get(credit_modifier, 0.0)


def calculate_monthly_payment(
    loan_amount: int,
    loan_period: int,
    credit_modifier: int,
    config: Settings,
) -> int:
    """
    Monthly payment for the requested amount, including segment interest.

    Example:
        5000 over 12 months at 3% -> 416.67 + 12.50 -> 429
    """
    interest = interest_rate_for(credit_modifier, config)
    before_interest = loan_amount / loan_period
    return int(before_interest + before_interest * interest)


class DecisionEngine:
    """
    Calculates the approved loan amount and period for an applicant.

    The engine only holds read-only collaborators, so a single instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        config: Settings | None = None,
        validator: IdentityCodeValidator | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.config = config or default_settings
        self.validator = validator or EstonianIdentityCodeValidator()
        self.today = today

    def calculate_approved_loan(self, identity_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Main entry point: find the largest loan the applicant qualifies for.

        Validation failures, including an identity code whose birth century
        the rules do not support, are returned as a Decision carrying only an
        error message. Business rule rejections are raised.

        Raises:
            NoValidLoanError: If the applicant is too young, too old for the period,
                in debt, or no period within bounds reaches the minimum amount
        """
        request = LoanRequest(identity_code, loan_amount, loan_period)

        try:
            self.verify_inputs(request)
            birth_date = derive_birth_date(request.identity_code)
        except InvalidLoanRequestError as e:
            logger.debug("Loan request failed validation: %s", e)
            return Decision.rejected(str(e))

        today = self.today()

        if full_years_between(birth_date, today) < ADULT_AGE_YEARS:
            raise NoValidLoanError(MINOR_APPLICANT_MESSAGE)

        if months_between(birth_date, today) + request.loan_period > self.config.max_age_months:
            raise NoValidLoanError(AGE_LIMIT_EXCEEDED_MESSAGE)

        credit_modifier = get_credit_segment(request.identity_code).credit_modifier
        if credit_modifier == 0:
            raise NoValidLoanError()

        period = self.find_approvable_period(credit_modifier, request.loan_period)
        if period > self.config.max_loan_period:
            raise NoValidLoanError()

        approved_amount = min(self.config.max_loan_amount, credit_modifier * period)

        # Payment is only quoted when the requested amount fits the approval
        monthly_payment = 0
        if request.loan_amount <= approved_amount:
            monthly_payment = calculate_monthly_payment(
                request.loan_amount, period, credit_modifier, self.config
            )

        logger.debug(
            "Loan approved: amount=%s period=%s monthly_payment=%s",
            approved_amount,
            period,
            monthly_payment,
        )

        return Decision(
            approved_amount=approved_amount,
            approved_period=period,
            error_message=None,
            monthly_payment=monthly_payment,
        )

    def find_approvable_period(self, credit_modifier: int, loan_period: int) -> int:
        """
        Smallest period, starting at the requested one, whose highest loan
        reaches the minimum amount. Returns max_loan_period + 1 when none does.
        """
        period = loan_period
        ceiling = self.config.max_loan_period + 1

        while credit_modifier * period < self.config.min_loan_amount and period < ceiling:
            period += 1

        return period

    def verify_inputs(self, request: LoanRequest) -> None:
        """
        Check the request against business rules.

        Raises:
            InvalidIdentityCodeError: If the identity code is invalid
            InvalidLoanAmountError: If the amount is outside the configured bounds
            InvalidLoanPeriodError: If the period is outside the configured bounds
        """
        if not self.validator.is_valid(request.identity_code):
            raise InvalidIdentityCodeError()

        if not self.config.min_loan_amount <= request.loan_amount <= self.config.max_loan_amount:
            raise InvalidLoanAmountError()

        if not self.config.min_loan_period <= request.loan_period <= self.config.max_loan_period:
            raise InvalidLoanPeriodError()
