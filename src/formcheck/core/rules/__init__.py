"""
Directors, recipe configuration and field classification.
"""

from .field_policy import FieldPolicy
from .rule_config import RecipeConfigBuilder, RecipeConfigLoader
from .rule_engine import (
    Director,
    DirectorRegistry,
    password_director,
    recipe_director,
    username_director,
    validate_text,
)

__all__ = [
    "Director",
    "DirectorRegistry",
    "username_director",
    "password_director",
    "recipe_director",
    "validate_text",
    "FieldPolicy",
    "RecipeConfigLoader",
    "RecipeConfigBuilder",
]
