"""Estonian personal identification code (isikukood) handling"""

from datetime import date
from typing import Protocol

from decision_engine.domain.exceptions import InvalidIdentityCodeError

CODE_LENGTH = 11

# First digit -> birth century, per the isikukood scheme (odd = male, even = female)
CENTURIES = {
    "1": 1800,
    "2": 1800,
    "3": 1900,
    "4": 1900,
    "5": 2000,
    "6": 2000,
    "7": 2100,
    "8": 2100,
}

# Centuries the decision rules accept
SUPPORTED_CENTURY_MARKERS = {"3": 1900, "4": 1900, "5": 2000, "6": 2000}

FIRST_STAGE_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_STAGE_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


class IdentityCodeValidator(Protocol):
    """Format/checksum check for a national identity code"""

    def is_valid(self, code: str) -> bool: ...


def calculate_check_digit(code: str) -> int:
    """
    Compute the modulo-11 check digit over the first ten digits.

    Algorithm:
    - Weighted sum with weights 1..9,1; remainder mod 11 is the check digit
    - If the remainder is 10, repeat with weights 3..9,1,2,3
    - If it is 10 again, the check digit is 0
    """
    digits = [int(c) for c in code[:10]]

    remainder = sum(d * w for d, w in zip(digits, FIRST_STAGE_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, SECOND_STAGE_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


def _parse_date(century: int, code: str) -> date:
    year = century + int(code[1:3])
    month = int(code[3:5])
    day = int(code[5:7])
    return date(year, month, day)


class EstonianIdentityCodeValidator:
    """Validates length, digits, century marker, embedded birth date and check digit"""

    def is_valid(self, code: str) -> bool:
        if not isinstance(code, str) or len(code) != CODE_LENGTH or not (code.isascii() and code.isdigit()):
            return False

        century = CENTURIES.get(code[0])
        if century is None:
            return False

        try:
            _parse_date(century, code)
        except ValueError:
            return False

        return calculate_check_digit(code) == int(code[10])


def derive_birth_date(code: str) -> date:
    """
    Read the birth date encoded in digits 1-7 of the identity code.

    Raises:
        InvalidIdentityCodeError: If the century marker is not 3-6 or the date does not exist
    """
    century = SUPPORTED_CENTURY_MARKERS.get(code[:1])
    if century is None:
        raise InvalidIdentityCodeError()

    try:
        return _parse_date(century, code)
    except ValueError as e:
        raise InvalidIdentityCodeError() from e


def last_four_digits(code: str) -> int:
    """Numeric value of the trailing four digits"""
    return int(code[-4:])
