"""
Base validator interfaces.

A Validator produces a finished (is_valid, errors) result. A TextValidator
additionally exposes the chainable text checks that directors compose.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from formcheck.core.models import ValidationError


class Validator(ABC):
    """Anything that can report the outcome of a completed validation."""

    @abstractmethod
    def validate(self) -> tuple[bool, list[ValidationError]]:
        """
        Return the final validation result.

        Returns:
            Tuple of (is_valid, errors) where errors keep the order in
            which the failing checks ran
        """
        pass


class TextValidator(Validator):
    """
    Validator over a single text value with one chainable method per check.

    Every check method returns the validator itself so calls can be chained
    in whatever order a director chooses.
    """

    @abstractmethod
    def check_not_empty(self) -> "TextValidator":
        pass

    @abstractmethod
    def check_min_length(self, length: int) -> "TextValidator":
        pass

    @abstractmethod
    def check_max_length(self, length: int) -> "TextValidator":
        pass

    @abstractmethod
    def check_contains_number(self) -> "TextValidator":
        pass

    @abstractmethod
    def check_contains_uppercase(self) -> "TextValidator":
        pass

    @abstractmethod
    def check_contains_lowercase(self) -> "TextValidator":
        pass

    @abstractmethod
    def check_no_forbidden_characters(self, characters: Iterable[str]) -> "TextValidator":
        """
        Check that the text holds none of the forbidden characters.

        Args:
            characters: Characters that must not appear in the text
        """
        pass
