"""
TextValidatorBuilder - fluent accumulator of validation failures for one string.
"""

from collections.abc import Iterable
from typing import Any

from formcheck.core.models import ValidationError
from formcheck.observability.logger import get_logger
from formcheck.observability.metrics import record_check

from . import text_checks
from .base_validator import TextValidator

logger = get_logger(__name__)


class TextValidatorBuilder(TextValidator):
    """
    Builds a validator for one text value by chaining checks.

    Checks run immediately when chained and append their failure reason to
    the builder's own error list; validate() only reports what has already
    been collected. Create a fresh builder per field per run.

    Usage:
        is_valid, errors = (
            TextValidatorBuilder("abc12345")
            .check_min_length(8)
            .check_contains_uppercase()
            .validate()
        )
    """

    def __init__(self, text: str):
        """
        Initialize builder.

        Args:
            text: The text to validate
        """
        self._text = text
        self._errors: list[ValidationError] = []

    @property
    def text(self) -> str:
        return self._text

    def validate(self) -> tuple[bool, list[ValidationError]]:
        """
        Return the validation result collected so far.

        Returns:
            Tuple of (is_valid, errors); errors is a copy, so callers cannot
            alter the builder's state
        """
        return not self._errors, list(self._errors)

    def check_not_empty(self) -> "TextValidatorBuilder":
        return self._record("not_empty", text_checks.check_not_empty(self._text))

    def check_min_length(self, length: int) -> "TextValidatorBuilder":
        return self._record("min_length", text_checks.check_min_length(self._text, length))

    def check_max_length(self, length: int) -> "TextValidatorBuilder":
        return self._record("max_length", text_checks.check_max_length(self._text, length))

    def check_contains_number(self) -> "TextValidatorBuilder":
        return self._record("contains_number", text_checks.check_contains_number(self._text))

    def check_contains_uppercase(self) -> "TextValidatorBuilder":
        return self._record("contains_uppercase", text_checks.check_contains_uppercase(self._text))

    def check_contains_lowercase(self) -> "TextValidatorBuilder":
        return self._record("contains_lowercase", text_checks.check_contains_lowercase(self._text))

    def check_no_forbidden_characters(self, characters: Iterable[str]) -> "TextValidatorBuilder":
        return self._record(
            "no_forbidden_characters",
            text_checks.check_no_forbidden_characters(self._text, characters),
        )

    def apply(self, check: str, **parameters: Any) -> "TextValidatorBuilder":
        """
        Run a check by its registry name.

        Args:
            check: Registry name (e.g. "min_length")
            **parameters: Parameters for the check (e.g. length=8)

        Raises:
            ValueError: If the check is unknown or parameters don't match
        """
        return self._record(check, text_checks.run_check(check, self._text, **parameters))

    def _record(self, check: str, outcome: text_checks.CheckOutcome) -> "TextValidatorBuilder":
        """Append the failure reason (if any) and return self for chaining."""
        record_check(check, passed=outcome.passed)
        if not outcome.passed:
            self._errors.append(outcome.reason)
            logger.debug(f"Check '{check}' failed: {outcome.reason.value}")
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(errors={[e.value for e in self._errors]})"
