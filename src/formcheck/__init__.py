"""
formcheck - rule-based validation engine for form input.

Atomic text checks are chained on a TextValidatorBuilder, named recipes
(directors) compose them per field type, and DefaultFormValidation folds
per-field issues into a single ProcessResult.
"""

from formcheck.core.models import (
    InputData,
    MandatoryInputData,
    OptionalInputData,
    ProcessResult,
    RecipeStep,
    ValidationError,
)
from formcheck.core.rules import (
    DirectorRegistry,
    FieldPolicy,
    RecipeConfigBuilder,
    RecipeConfigLoader,
    password_director,
    recipe_director,
    username_director,
    validate_text,
)
from formcheck.core.validators import TextValidatorBuilder
from formcheck.pipeline import DefaultFormValidation, FormValidationTemplate

__version__ = "0.1.0"

__all__ = [
    "ValidationError",
    "InputData",
    "MandatoryInputData",
    "OptionalInputData",
    "ProcessResult",
    "RecipeStep",
    "TextValidatorBuilder",
    "DirectorRegistry",
    "FieldPolicy",
    "RecipeConfigBuilder",
    "RecipeConfigLoader",
    "username_director",
    "password_director",
    "recipe_director",
    "validate_text",
    "FormValidationTemplate",
    "DefaultFormValidation",
]
