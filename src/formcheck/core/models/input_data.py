"""
InputData models representing a single form field handed over by the form layer.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .validation_error import ValidationError


class OptionalInputData(BaseModel):
    """
    A form field that is carried through processing but never validated.

    Attributes:
        kind: Variant tag ("optional")
        field_id: Id of the input field
        input: Raw text entered by the user
    """

    kind: Literal["optional"] = "optional"
    field_id: str = Field(..., min_length=1)
    input: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "optional",
                "field_id": "bio",
                "input": "Likes long walks",
            }
        }


class MandatoryInputData(BaseModel):
    """
    A form field whose validity contributes to the form result.

    Note: issues are computed by running a recipe over the input before the
    record is built. The record is frozen afterwards and acts as evidence of
    a completed validation.

    Attributes:
        kind: Variant tag ("mandatory")
        field_id: Id of the input field
        input: Raw text entered by the user
        issues: Failures in the order the checks ran
    """

    kind: Literal["mandatory"] = "mandatory"
    field_id: str = Field(..., min_length=1)
    input: str
    issues: tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when no check failed."""
        return not self.issues

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "mandatory",
                "field_id": "password",
                "input": "abc12345",
                "issues": ["missing_uppercase"],
            }
        }


InputData = Annotated[
    Union[MandatoryInputData, OptionalInputData],
    Field(discriminator="kind"),
]
