"""
Core data models for the form validation engine.

Records and results use Pydantic for runtime validation and immutability.
"""

from .input_data import InputData, MandatoryInputData, OptionalInputData
from .process_result import InvalidField, ProcessResult
from .recipe_step import RecipeStep
from .validation_error import ValidationError

__all__ = [
    "ValidationError",
    "InputData",
    "MandatoryInputData",
    "OptionalInputData",
    "InvalidField",
    "ProcessResult",
    "RecipeStep",
]
