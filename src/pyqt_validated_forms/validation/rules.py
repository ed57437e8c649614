"""
Field validation rules.

A rule inspects one model value and returns a ValidationError or None.
Built-in rules let empty values through: whether a field may be empty is
decided by its `required` flag, not by its rules. PredicateValidator sees
every value, empty or not.

Example:
    EditTextController(
        "zip_code", "ZIP",
        rules=[PatternValidator(r"\\d{5}"), LengthValidator(max_length=5)],
    )
"""

import logging
import re
from abc import ABC, abstractmethod
from numbers import Number
from typing import Any, Callable, Optional, Pattern, Tuple, Union

from .errors import ValidationError
from .messages import (
    PATTERN_MISMATCH,
    TOO_SHORT,
    TOO_LONG,
    BELOW_MINIMUM,
    ABOVE_MAXIMUM,
    INVALID_VALUE,
)

logger = logging.getLogger(__name__)


def is_empty_value(value: Any) -> bool:
    """None, blank strings and empty collections count as empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class ValidationRule(ABC):
    """Base class for field validation rules."""

    @abstractmethod
    def validate(self, value: Any, field_name: str, field_label: Optional[str]) -> Optional[ValidationError]:
        """
        Check `value`.

        Returns:
            A ValidationError describing the failure, or None when valid.
        """
        pass


class PatternValidator(ValidationRule):
    """The string form of the value must fully match a regular expression."""

    def __init__(self, pattern: Union[str, Pattern], message_key: str = PATTERN_MISMATCH):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.message_key = message_key

    def validate(self, value, field_name, field_label):
        if is_empty_value(value):
            return None
        if self.pattern.fullmatch(str(value)) is None:
            return ValidationError(field_name, field_label, self.message_key, (self.pattern.pattern,))
        return None


class LengthValidator(ValidationRule):
    """Bounds the length of the value (strings and collections)."""

    def __init__(self, min_length: Optional[int] = None, max_length: Optional[int] = None):
        if min_length is None and max_length is None:
            raise ValueError("LengthValidator needs min_length, max_length or both")
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, value, field_name, field_label):
        if is_empty_value(value):
            return None
        length = len(value) if hasattr(value, '__len__') else len(str(value))
        if self.min_length is not None and length < self.min_length:
            return ValidationError(field_name, field_label, TOO_SHORT, (self.min_length,))
        if self.max_length is not None and length > self.max_length:
            return ValidationError(field_name, field_label, TOO_LONG, (self.max_length,))
        return None


class RangeValidator(ValidationRule):
    """Bounds a numeric value, both ends inclusive."""

    def __init__(self, minimum: Optional[Number] = None, maximum: Optional[Number] = None):
        if minimum is None and maximum is None:
            raise ValueError("RangeValidator needs minimum, maximum or both")
        self.minimum = minimum
        self.maximum = maximum

    def validate(self, value, field_name, field_label):
        if is_empty_value(value):
            return None
        if isinstance(value, bool) or not isinstance(value, Number):
            logger.debug(f"RangeValidator on {field_name!r}: non-numeric value {value!r}")
            return ValidationError(field_name, field_label, INVALID_VALUE)
        if self.minimum is not None and value < self.minimum:
            return ValidationError(field_name, field_label, BELOW_MINIMUM, (self.minimum,))
        if self.maximum is not None and value > self.maximum:
            return ValidationError(field_name, field_label, ABOVE_MAXIMUM, (self.maximum,))
        return None


class PredicateValidator(ValidationRule):
    """
    Fails when `predicate(value)` is false.

    The predicate receives every value, including None.
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        message_key: str = INVALID_VALUE,
        args: Tuple[Any, ...] = (),
    ):
        self.predicate = predicate
        self.message_key = message_key
        self.args = tuple(args)

    def validate(self, value, field_name, field_label):
        if self.predicate(value):
            return None
        return ValidationError(field_name, field_label, self.message_key, self.args)
