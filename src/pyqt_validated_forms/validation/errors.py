"""Validation error value objects."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pyqt_validated_forms.protocols.element_protocols import MessageResolver
from .messages import (
    DefaultMessageResolver,
    REQUIRED_FIELD,
    INVALID_INPUT,
    INVALID_VALUE,
)


@dataclass(frozen=True)
class ValidationError:
    """
    One failed constraint on one named field.

    The display text is not stored; it is produced by get_message() from the
    message key so the host decides wording and language.
    """
    field_name: str
    field_label: Optional[str]
    message_key: str = INVALID_VALUE
    args: Tuple[Any, ...] = ()

    @property
    def display_label(self) -> str:
        return self.field_label or self.field_name

    def get_message(self, resolver: Optional[MessageResolver] = None) -> str:
        """Resolve this error into display text."""
        resolver = resolver or DefaultMessageResolver()
        return resolver.resolve(self.message_key, *self.args, label=self.display_label)


@dataclass(frozen=True)
class RequiredFieldValidationError(ValidationError):
    """A required field has no value."""
    message_key: str = REQUIRED_FIELD


@dataclass(frozen=True)
class InvalidInputValidationError(ValidationError):
    """User input could not be converted to the field's type. args[0] is the type name."""
    message_key: str = INVALID_INPUT
