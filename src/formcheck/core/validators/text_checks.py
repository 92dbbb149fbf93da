"""
Atomic text checks.

Each check inspects a single string and reports whether it passed together
with the ValidationError it maps to. Checks never raise and have no side
effects; accumulating failures is the builder's job.

Lengths are counted in extended grapheme clusters, so "e" followed by a
combining accent, or a flag emoji, is one character. Character-class and
forbidden-character checks look at individual code points.
"""

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

import regex

from formcheck.core.models import ValidationError

_GRAPHEME_PATTERN = regex.compile(r"\X")


class CheckOutcome(NamedTuple):
    """Result of one atomic check."""

    passed: bool
    reason: ValidationError


class CheckSpec(NamedTuple):
    """Registry entry: the check function and the parameters it takes."""

    func: Callable[..., CheckOutcome]
    parameters: tuple[str, ...]


def text_length(text: str) -> int:
    """Number of user-perceived characters (grapheme clusters) in text."""
    return len(_GRAPHEME_PATTERN.findall(text))


def check_not_empty(text: str) -> CheckOutcome:
    return CheckOutcome(text_length(text) > 0, ValidationError.IS_EMPTY)


def check_min_length(text: str, length: int) -> CheckOutcome:
    return CheckOutcome(text_length(text) >= length, ValidationError.TOO_SHORT)


def check_max_length(text: str, length: int) -> CheckOutcome:
    return CheckOutcome(text_length(text) <= length, ValidationError.TOO_LONG)


def check_contains_number(text: str) -> CheckOutcome:
    return CheckOutcome(any(ch.isdecimal() for ch in text), ValidationError.MISSING_NUMBER)


def check_contains_uppercase(text: str) -> CheckOutcome:
    return CheckOutcome(any(ch.isupper() for ch in text), ValidationError.MISSING_UPPERCASE)


def check_contains_lowercase(text: str) -> CheckOutcome:
    return CheckOutcome(any(ch.islower() for ch in text), ValidationError.MISSING_LOWERCASE)


def check_no_forbidden_characters(text: str, characters: Iterable[str]) -> CheckOutcome:
    """
    Check that text contains none of the given characters.

    Args:
        text: The text to inspect
        characters: Forbidden characters, as a string or any iterable of
                    single characters

    Returns:
        CheckOutcome failing with FORBIDDEN_CHARACTER on the first hit
    """
    forbidden = frozenset(characters)
    return CheckOutcome(
        not any(ch in forbidden for ch in text),
        ValidationError.FORBIDDEN_CHARACTER,
    )


CHECK_REGISTRY: dict[str, CheckSpec] = {
    "not_empty": CheckSpec(check_not_empty, ()),
    "min_length": CheckSpec(check_min_length, ("length",)),
    "max_length": CheckSpec(check_max_length, ("length",)),
    "contains_number": CheckSpec(check_contains_number, ()),
    "contains_uppercase": CheckSpec(check_contains_uppercase, ()),
    "contains_lowercase": CheckSpec(check_contains_lowercase, ()),
    "no_forbidden_characters": CheckSpec(check_no_forbidden_characters, ("characters",)),
}


def get_check(name: str) -> CheckSpec:
    """
    Look up a check by registry name.

    Raises:
        ValueError: If no check with that name exists
    """
    spec = CHECK_REGISTRY.get(name)
    if spec is None:
        raise ValueError(f"Unknown check type: {name}")
    return spec


def validate_check_parameters(name: str, parameters: dict[str, Any]) -> None:
    """
    Ensure parameters match what the named check expects.

    Raises:
        ValueError: If the check is unknown or parameters are missing/unexpected
    """
    spec = get_check(name)
    expected = set(spec.parameters)
    given = set(parameters)

    missing = expected - given
    if missing:
        raise ValueError(f"Check '{name}' is missing parameter(s): {', '.join(sorted(missing))}")

    unexpected = given - expected
    if unexpected:
        raise ValueError(f"Check '{name}' got unexpected parameter(s): {', '.join(sorted(unexpected))}")

    if "length" in parameters and (
        isinstance(parameters["length"], bool) or not isinstance(parameters["length"], int)
    ):
        raise ValueError(f"Check '{name}' requires an integer 'length', got {parameters['length']!r}")

    if "characters" in parameters:
        characters = parameters["characters"]
        if isinstance(characters, str):
            return
        if not isinstance(characters, (list, tuple, set, frozenset)) or not all(
            isinstance(ch, str) and len(ch) == 1 for ch in characters
        ):
            raise ValueError(f"Check '{name}' requires 'characters' as a string or list of characters")


def run_check(name: str, text: str, **parameters: Any) -> CheckOutcome:
    """Run the named check against text."""
    validate_check_parameters(name, parameters)
    return get_check(name).func(text, **parameters)
