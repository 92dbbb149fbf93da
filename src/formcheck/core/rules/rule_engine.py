"""
Directors and the registry that names them.

A director is a stateless recipe: a callable that applies a fixed, ordered
sequence of checks to a TextValidatorBuilder and hands back the finished
validator. The registry maps recipe identifiers to directors so that the
form layer can pick a recipe per field by name.
"""

from collections.abc import Callable, Iterable

from formcheck.core.models import RecipeStep, ValidationError
from formcheck.core.validators import TextValidatorBuilder, Validator, validate_check_parameters

Director = Callable[[TextValidatorBuilder], Validator]

USERNAME_MAX_LENGTH = 20
USERNAME_FORBIDDEN_CHARACTERS = "()<>[]{}"
PASSWORD_MIN_LENGTH = 8


def username_director(builder: TextValidatorBuilder) -> Validator:
    """Non-empty, at most 20 characters, no brackets of any kind."""
    return (
        builder
        .check_not_empty()
        .check_max_length(USERNAME_MAX_LENGTH)
        .check_no_forbidden_characters(USERNAME_FORBIDDEN_CHARACTERS)
    )


def password_director(builder: TextValidatorBuilder) -> Validator:
    """At least 8 characters with a lowercase letter, an uppercase letter and a digit."""
    return (
        builder
        .check_min_length(PASSWORD_MIN_LENGTH)
        .check_contains_lowercase()
        .check_contains_uppercase()
        .check_contains_number()
    )


def recipe_director(steps: Iterable[RecipeStep]) -> Director:
    """
    Build a director from configured recipe steps.

    Step parameters are checked up front so a bad recipe fails when it is
    loaded rather than when a form is validated.

    Args:
        steps: Ordered recipe steps

    Returns:
        Director applying the steps in order

    Raises:
        ValueError: If a step names an unknown check or has bad parameters
    """
    steps = list(steps)
    for step in steps:
        validate_check_parameters(step.check, step.params)

    def director(builder: TextValidatorBuilder) -> Validator:
        for step in steps:
            builder.apply(step.check, **step.params)
        return builder

    return director


def validate_text(text: str, director: Director) -> tuple[bool, list[ValidationError]]:
    """
    Run a director against text using a fresh builder.

    Returns:
        Tuple of (is_valid, errors)
    """
    return director(TextValidatorBuilder(text)).validate()


class DirectorRegistry:
    """
    Maps recipe identifiers to directors.

    The built-in "username" and "password" recipes are registered on
    construction; further recipes come from configuration or code.
    """

    BUILTIN_DIRECTORS: dict[str, Director] = {
        "username": username_director,
        "password": password_director,
    }

    def __init__(self, include_builtins: bool = True):
        """
        Initialize the registry.

        Args:
            include_builtins: Whether to pre-register the built-in recipes
        """
        self._directors: dict[str, Director] = {}
        if include_builtins:
            self._directors.update(self.BUILTIN_DIRECTORS)

    def register(self, name: str, director: Director) -> "DirectorRegistry":
        """Register (or replace) a director under name."""
        if not name:
            raise ValueError("Recipe name must be a non-empty string")
        self._directors[name] = director
        return self

    def register_recipe(self, name: str, steps: Iterable[RecipeStep]) -> "DirectorRegistry":
        """Register a director built from configured recipe steps."""
        return self.register(name, recipe_director(steps))

    def register_recipes(self, recipes: dict[str, list[RecipeStep]]) -> "DirectorRegistry":
        for name, steps in recipes.items():
            self.register_recipe(name, steps)
        return self

    def get(self, name: str) -> Director:
        """
        Look up a director by recipe name.

        Raises:
            ValueError: If no recipe with that name is registered
        """
        director = self._directors.get(name)
        if director is None:
            raise ValueError(f"Unknown recipe: {name}")
        return director

    def names(self) -> list[str]:
        return list(self._directors)

    def __contains__(self, name: object) -> bool:
        return name in self._directors

    def __len__(self) -> int:
        return len(self._directors)
