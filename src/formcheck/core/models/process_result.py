"""
ProcessResult model representing the outcome of one form processing run (ephemeral).
"""

from pydantic import BaseModel, Field, model_validator

from .input_data import InputData
from .validation_error import ValidationError

# (field_id, issues) pair for one invalid mandatory field
InvalidField = tuple[str, tuple[ValidationError, ...]]


class ProcessResult(BaseModel):
    """
    Aggregate outcome of validating every field of a form.

    Attributes:
        is_valid: Whether the whole form is valid
        input_data: Original records (mandatory and optional), unchanged
        invalid_fields: Mandatory fields with issues, in scan order
    """

    is_valid: bool
    input_data: list[InputData] = Field(default_factory=list)
    invalid_fields: list[InvalidField] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_valid_consistency(self) -> "ProcessResult":
        """Validate that is_valid=True exactly when invalid_fields is empty."""
        if self.is_valid != (not self.invalid_fields):
            raise ValueError("is_valid must be True exactly when invalid_fields is empty")
        return self

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "is_valid": False,
                "input_data": [
                    {"kind": "mandatory", "field_id": "username", "input": "", "issues": ["is_empty"]},
                    {"kind": "optional", "field_id": "bio", "input": "hi"},
                ],
                "invalid_fields": [["username", ["is_empty"]]],
            }
        }
