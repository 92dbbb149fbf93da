"""
Text validation primitives.

Provides the atomic text checks, the validator interfaces and the fluent
TextValidatorBuilder that directors compose.
"""

from .base_validator import TextValidator, Validator
from .text_checks import (
    CHECK_REGISTRY,
    CheckOutcome,
    CheckSpec,
    check_contains_lowercase,
    check_contains_number,
    check_contains_uppercase,
    check_max_length,
    check_min_length,
    check_no_forbidden_characters,
    check_not_empty,
    get_check,
    run_check,
    text_length,
    validate_check_parameters,
)
from .text_validator import TextValidatorBuilder

__all__ = [
    "Validator",
    "TextValidator",
    "TextValidatorBuilder",
    "CheckOutcome",
    "CheckSpec",
    "CHECK_REGISTRY",
    "get_check",
    "run_check",
    "validate_check_parameters",
    "text_length",
    "check_not_empty",
    "check_min_length",
    "check_max_length",
    "check_contains_number",
    "check_contains_uppercase",
    "check_contains_lowercase",
    "check_no_forbidden_characters",
]
