"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    default_message = "Domain error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidLoanRequestError(DomainException):
    """Request inputs failed validation"""

    pass


class InvalidIdentityCodeError(InvalidLoanRequestError):
    """Personal identity code is malformed or fails its checksum"""

    default_message = "Invalid personal ID code!"


class InvalidLoanAmountError(InvalidLoanRequestError):
    """Requested amount is outside the configured bounds"""

    default_message = "Invalid loan amount!"


class InvalidLoanPeriodError(InvalidLoanRequestError):
    """Requested period is outside the configured bounds"""

    default_message = "Invalid loan period!"


class NoValidLoanError(DomainException):
    """No loan can be offered to the applicant"""

    default_message = "No valid loan found!"
