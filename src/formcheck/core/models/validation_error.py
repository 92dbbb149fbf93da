"""
ValidationError enum naming the reason a text check failed.
"""

from enum import Enum


class ValidationError(str, Enum):
    """
    Reason a single text check failed.

    Carries no payload: the bound or character set that caused the failure
    lives in the recipe that ran the check, not in the error.
    """

    IS_EMPTY = "is_empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    MISSING_NUMBER = "missing_number"
    MISSING_LOWERCASE = "missing_lowercase"
    MISSING_UPPERCASE = "missing_uppercase"
    FORBIDDEN_CHARACTER = "forbidden_character"
