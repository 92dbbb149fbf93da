"""
Field classification policy.

Decides, per field id, whether a field is mandatory (and which recipe
validates it) or optional, and builds the matching InputData record.
Mandatory records get their issues computed here, before construction.
"""

from collections.abc import Mapping

from formcheck.core.models import InputData, MandatoryInputData, OptionalInputData
from formcheck.core.validators import TextValidatorBuilder
from formcheck.observability.logger import get_logger

from .rule_engine import DirectorRegistry

logger = get_logger(__name__)


class FieldPolicy:
    """
    Maps field ids to a recipe name (mandatory) or None (optional).

    Fields the policy doesn't know about are treated as optional, unless
    strict mode is requested when collecting.
    """

    def __init__(self, fields: Mapping[str, str | None] | None = None):
        """
        Initialize policy.

        Args:
            fields: Mapping of field id to recipe name, None marking an
                    optional field
        """
        self.fields: dict[str, str | None] = dict(fields or {})

    def mandatory(self, field_id: str, recipe: str) -> "FieldPolicy":
        self.fields[field_id] = recipe
        return self

    def optional(self, field_id: str) -> "FieldPolicy":
        self.fields[field_id] = None
        return self

    def is_mandatory(self, field_id: str) -> bool:
        return self.fields.get(field_id) is not None

    def recipe_for(self, field_id: str) -> str | None:
        return self.fields.get(field_id)

    def check_recipes(self, registry: DirectorRegistry) -> None:
        """
        Ensure every recipe the policy names is registered.

        Raises:
            ValueError: If a field refers to an unknown recipe
        """
        for field_id, recipe in self.fields.items():
            if recipe is not None and recipe not in registry:
                raise ValueError(f"Field '{field_id}' refers to unknown recipe: {recipe}")

    def build(self, field_id: str, value: str, registry: DirectorRegistry) -> InputData:
        """
        Build the InputData record for one field.

        Args:
            field_id: Id of the input field
            value: Raw text entered by the user
            registry: Registry used to resolve the field's recipe

        Returns:
            MandatoryInputData with precomputed issues, or OptionalInputData

        Raises:
            ValueError: If the field's recipe is not registered
        """
        recipe = self.recipe_for(field_id)
        if recipe is None:
            return OptionalInputData(field_id=field_id, input=value)

        director = registry.get(recipe)
        _, issues = director(TextValidatorBuilder(value)).validate()
        if issues:
            logger.debug(
                f"Field '{field_id}' failed recipe '{recipe}'",
                extra={"field_id": field_id, "recipe": recipe, "issues": [i.value for i in issues]},
            )
        return MandatoryInputData(field_id=field_id, input=value, issues=tuple(issues))

    def collect(
        self,
        values: Mapping[str, str],
        registry: DirectorRegistry,
        strict: bool = False,
    ) -> list[InputData]:
        """
        Build records for a whole form.

        Args:
            values: Field id to raw text, in form order
            registry: Registry used to resolve recipes
            strict: Reject fields the policy doesn't list

        Returns:
            Records in the order of values

        Raises:
            ValueError: In strict mode, if a field is not listed in the policy
        """
        records = []
        for field_id, value in values.items():
            if strict and field_id not in self.fields:
                raise ValueError(f"Unknown field: {field_id}")
            records.append(self.build(field_id, value, registry))
        return records

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={self.fields})"
