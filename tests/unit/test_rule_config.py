"""
Unit tests for recipe configuration loading and building.
"""

import pytest

from formcheck.core.models import RecipeStep, ValidationError
from formcheck.core.rules import DirectorRegistry, RecipeConfigBuilder, RecipeConfigLoader, validate_text

pytestmark = pytest.mark.unit


class TestRecipeConfigLoader:
    """Tests for RecipeConfigLoader"""

    def test_load_recipes_from_yaml(self, write_yaml):
        path = write_yaml({
            "recipes": {
                "nickname": [
                    {"type": "not_empty"},
                    {"type": "max_length", "params": {"length": 12}},
                ],
                "pin": [
                    {"type": "min_length", "parameters": {"length": 4}},
                    {"type": "contains_number"},
                ],
            }
        })

        recipes = RecipeConfigLoader(path).load_recipes()

        assert list(recipes) == ["nickname", "pin"]
        assert recipes["nickname"] == [
            RecipeStep(check="not_empty"),
            RecipeStep(check="max_length", params={"length": 12}),
        ]
        assert recipes["pin"][0].params == {"length": 4}

    def test_loaded_recipe_matches_builtin(self, write_yaml):
        path = write_yaml({
            "recipes": {
                "username_copy": [
                    {"type": "not_empty"},
                    {"type": "max_length", "params": {"length": 20}},
                    {"type": "no_forbidden_characters", "params": {"characters": "()<>[]{}"}},
                ]
            }
        })
        registry = DirectorRegistry().register_recipes(RecipeConfigLoader(path).load_recipes())

        for text in ["", "a<b>", "a" * 21, "john_doe", "{" * 30]:
            assert validate_text(text, registry.get("username_copy")) == \
                validate_text(text, registry.get("username"))

    def test_load_field_policy(self, write_yaml):
        path = write_yaml({
            "fields": {
                "username": {"recipe": "username"},
                "bio": {"mandatory": False},
            }
        })

        policy = RecipeConfigLoader(path).load_field_policy()

        assert policy.recipe_for("username") == "username"
        assert policy.is_mandatory("bio") is False
        assert "bio" in policy.fields

    def test_recipes_section_optional(self, write_yaml):
        path = write_yaml({"fields": {"bio": {"mandatory": False}}})
        assert RecipeConfigLoader(path).load_recipes() == {}

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            RecipeConfigLoader("/nonexistent/path/recipes.yaml")

    def test_missing_sections(self, write_yaml):
        path = write_yaml({"other": {}})
        with pytest.raises(ValueError) as exc_info:
            RecipeConfigLoader(path).load_recipes()
        assert "recipes" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("recipes: [unclosed")
        with pytest.raises(ValueError):
            RecipeConfigLoader(path).load_recipes()

    def test_steps_must_be_a_list(self, write_yaml):
        path = write_yaml({"recipes": {"nickname": {"type": "not_empty"}}})
        with pytest.raises(ValueError) as exc_info:
            RecipeConfigLoader(path).load_recipes()
        assert "must be a list" in str(exc_info.value)

    def test_step_missing_type(self, write_yaml):
        path = write_yaml({"recipes": {"nickname": [{"params": {"length": 3}}]}})
        with pytest.raises(ValueError) as exc_info:
            RecipeConfigLoader(path).load_recipes()
        assert "missing 'type'" in str(exc_info.value)

    def test_unknown_check(self, write_yaml):
        path = write_yaml({"recipes": {"nickname": [{"type": "is_palindrome"}]}})
        with pytest.raises(ValueError) as exc_info:
            RecipeConfigLoader(path).load_recipes()
        assert "nickname" in str(exc_info.value)

    def test_missing_parameter(self, write_yaml):
        path = write_yaml({"recipes": {"nickname": [{"type": "max_length"}]}})
        with pytest.raises(ValueError):
            RecipeConfigLoader(path).load_recipes()

    def test_mandatory_field_needs_recipe(self, write_yaml):
        path = write_yaml({"fields": {"username": {}}})
        with pytest.raises(ValueError) as exc_info:
            RecipeConfigLoader(path).load_field_policy()
        assert "username" in str(exc_info.value)

    def test_optional_field_with_recipe_rejected(self, write_yaml):
        path = write_yaml({"fields": {"bio": {"mandatory": False, "recipe": "username"}}})
        with pytest.raises(ValueError):
            RecipeConfigLoader(path).load_field_policy()

    def test_example_config_loads(self, example_config_path):
        loader = RecipeConfigLoader(example_config_path)
        assert "nickname" in loader.load_recipes()
        assert loader.load_field_policy().recipe_for("password") == "password"


class TestRecipeConfigBuilder:
    """Tests for RecipeConfigBuilder"""

    def test_build_steps(self):
        steps = RecipeConfigBuilder() \
            .add_not_empty() \
            .add_min_length(2) \
            .add_max_length(5) \
            .add_contains_number() \
            .add_contains_uppercase() \
            .add_contains_lowercase() \
            .add_no_forbidden_characters("@") \
            .build()

        assert [s.check for s in steps] == [
            "not_empty",
            "min_length",
            "max_length",
            "contains_number",
            "contains_uppercase",
            "contains_lowercase",
            "no_forbidden_characters",
        ]
        assert steps[6].params == {"characters": "@"}

    def test_built_recipe_runs(self):
        registry = DirectorRegistry(include_builtins=False)
        registry.register_recipe("code", RecipeConfigBuilder().add_max_length(3).add_contains_number().build())

        assert validate_text("abcd", registry.get("code")) == \
            (False, [ValidationError.TOO_LONG, ValidationError.MISSING_NUMBER])

    def test_invalid_length_rejected(self):
        with pytest.raises(ValueError):
            RecipeConfigBuilder().add_min_length("8")
