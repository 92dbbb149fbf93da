"""
Form validation pipeline.
"""

from .form_validation import DefaultFormValidation, FormValidationTemplate, MandatoryProcessResult

__all__ = [
    "FormValidationTemplate",
    "DefaultFormValidation",
    "MandatoryProcessResult",
]
