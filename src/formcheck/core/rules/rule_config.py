"""
Rule configuration management.

Loads named check recipes and the field policy from YAML files and provides
a builder for assembling recipes in code.
"""

from pathlib import Path
from typing import Any

import yaml

from formcheck.core.models import RecipeStep
from formcheck.core.validators import validate_check_parameters

from .field_policy import FieldPolicy


class RecipeConfigLoader:
    """
    Loads check recipes and field classification from a YAML file.

    Expected YAML format:
    ```yaml
    recipes:
      nickname:
        - type: not_empty
        - type: max_length
          params:
            length: 12

    fields:
      username:
        recipe: username
      nickname:
        recipe: nickname
      bio:
        mandatory: false
    ```

    Both sections are optional, but a file must contain at least one.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the recipe config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Recipe configuration file not found: {config_path}")
        self._config: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._config is None:
            with open(self.config_path) as f:
                try:
                    config = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

            if not isinstance(config, dict) or not ({"recipes", "fields"} & set(config)):
                raise ValueError("Configuration file must contain a 'recipes' or 'fields' section")
            self._config = config
        return self._config

    def load_recipes(self) -> dict[str, list[RecipeStep]]:
        """
        Load and parse recipes from the YAML file.

        Returns:
            Mapping of recipe name to ordered steps

        Raises:
            ValueError: If a recipe is malformed or uses an unknown check
        """
        recipe_defs = self._load().get("recipes") or {}
        if not isinstance(recipe_defs, dict):
            raise ValueError("'recipes' section must be a mapping of recipe name to steps")

        recipes = {}
        for recipe_name, step_defs in recipe_defs.items():
            if not isinstance(step_defs, list):
                raise ValueError(f"Steps for recipe '{recipe_name}' must be a list")
            recipes[recipe_name] = [self._parse_step(recipe_name, step_def) for step_def in step_defs]

        return recipes

    def load_field_policy(self) -> FieldPolicy:
        """
        Load the field classification from the YAML file.

        Returns:
            FieldPolicy mapping each field to its recipe (or optional)

        Raises:
            ValueError: If a field definition is malformed
        """
        field_defs = self._load().get("fields") or {}
        if not isinstance(field_defs, dict):
            raise ValueError("'fields' section must be a mapping of field id to definition")

        policy = FieldPolicy()
        for field_id, field_def in field_defs.items():
            field_def = field_def or {}
            if not isinstance(field_def, dict):
                raise ValueError(f"Definition for field '{field_id}' must be a mapping")

            mandatory = field_def.get("mandatory", True)
            recipe = field_def.get("recipe")

            if mandatory and not recipe:
                raise ValueError(f"Mandatory field '{field_id}' is missing 'recipe'")
            if not mandatory and recipe:
                raise ValueError(f"Optional field '{field_id}' must not name a recipe")

            if mandatory:
                policy.mandatory(field_id, recipe)
            else:
                policy.optional(field_id)

        return policy

    def _parse_step(self, recipe_name: str, step_def: dict[str, Any]) -> RecipeStep:
        """
        Parse a single recipe step.

        Raises:
            ValueError: If the step is missing 'type' or has bad parameters
        """
        if not isinstance(step_def, dict) or "type" not in step_def:
            raise ValueError(f"Step in recipe '{recipe_name}' is missing 'type'")

        check = step_def["type"]
        params = step_def.get("params", step_def.get("parameters")) or {}
        if not isinstance(params, dict):
            raise ValueError(f"Params for '{check}' in recipe '{recipe_name}' must be a mapping")

        try:
            validate_check_parameters(check, params)
        except ValueError as e:
            raise ValueError(f"Invalid step in recipe '{recipe_name}': {e}")

        return RecipeStep(check=check, params=params)


class RecipeConfigBuilder:
    """
    Programmatically build recipe steps (for testing or dynamic recipes).
    """

    def __init__(self):
        self.steps: list[RecipeStep] = []

    def _add(self, check: str, **params: Any) -> "RecipeConfigBuilder":
        validate_check_parameters(check, params)
        self.steps.append(RecipeStep(check=check, params=params))
        return self

    def add_not_empty(self) -> "RecipeConfigBuilder":
        return self._add("not_empty")

    def add_min_length(self, length: int) -> "RecipeConfigBuilder":
        return self._add("min_length", length=length)

    def add_max_length(self, length: int) -> "RecipeConfigBuilder":
        return self._add("max_length", length=length)

    def add_contains_number(self) -> "RecipeConfigBuilder":
        return self._add("contains_number")

    def add_contains_uppercase(self) -> "RecipeConfigBuilder":
        return self._add("contains_uppercase")

    def add_contains_lowercase(self) -> "RecipeConfigBuilder":
        return self._add("contains_lowercase")

    def add_no_forbidden_characters(self, characters: str) -> "RecipeConfigBuilder":
        return self._add("no_forbidden_characters", characters=characters)

    def build(self) -> list[RecipeStep]:
        """Build and return the recipe steps."""
        return list(self.steps)
