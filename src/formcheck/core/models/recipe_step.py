"""
RecipeStep model representing one configured check inside a named recipe.
"""

from typing import Any

from pydantic import BaseModel, Field


class RecipeStep(BaseModel):
    """
    One check invocation inside a recipe.

    Attributes:
        check: Registry name of the check ("not_empty", "min_length", ...)
        params: Check-specific params (e.g., {"length": 8})
    """

    check: str = Field(..., min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "check": "max_length",
                "params": {"length": 20},
            }
        }
