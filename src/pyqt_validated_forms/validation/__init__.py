"""
Validation layer.

Error value objects, field rules, the message catalog and the strategies
that present errors.
"""

from .errors import ValidationError, RequiredFieldValidationError, InvalidInputValidationError
from .messages import DefaultMessageResolver, DEFAULT_MESSAGES
from .rules import (
    ValidationRule,
    PatternValidator,
    LengthValidator,
    RangeValidator,
    PredicateValidator,
    is_empty_value,
)
from .display import (
    ValidationErrorDisplay,
    PerFieldValidationErrorDisplay,
    SummaryValidationErrorDisplay,
)

__all__ = [
    "ValidationError",
    "RequiredFieldValidationError",
    "InvalidInputValidationError",
    "DefaultMessageResolver",
    "DEFAULT_MESSAGES",
    "ValidationRule",
    "PatternValidator",
    "LengthValidator",
    "RangeValidator",
    "PredicateValidator",
    "is_empty_value",
    "ValidationErrorDisplay",
    "PerFieldValidationErrorDisplay",
    "SummaryValidationErrorDisplay",
]
