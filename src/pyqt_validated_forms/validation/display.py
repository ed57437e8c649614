"""
Validation error display strategies.

The form hands the aggregated error list to its current strategy. Strategies
must tolerate errors naming fields the form no longer has: display wiring
can race with form reconfiguration, so such errors are logged and skipped.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, List, Optional, Set

from pyqt_validated_forms.protocols.element_protocols import MessageResolver
from .errors import ValidationError
from .messages import DefaultMessageResolver

if TYPE_CHECKING:
    from pyqt_validated_forms.forms.form_controller import FormController

logger = logging.getLogger(__name__)


class ValidationErrorDisplay(ABC):
    """Strategy that presents validation errors to the user."""

    @abstractmethod
    def show_errors(self, errors: List[ValidationError]) -> None:
        pass

    @abstractmethod
    def reset_errors(self) -> None:
        pass


class PerFieldValidationErrorDisplay(ValidationErrorDisplay):
    """
    Marks each field with its own error.

    When a field has several errors, the first one in the list is shown.
    Fields without errors are left as they are; call reset_errors() first
    to clear stale marks.
    """

    def __init__(self, controller: 'FormController', message_resolver: Optional[MessageResolver] = None):
        self._controller = controller
        self._message_resolver = message_resolver

    @property
    def message_resolver(self) -> MessageResolver:
        return self._message_resolver or self._controller.message_resolver

    def reset_errors(self) -> None:
        for section in self._controller.get_sections():
            section.set_error(None)
            for element in section.get_elements():
                element.set_error(None)

    def show_errors(self, errors: List[ValidationError]) -> None:
        resolver = self.message_resolver
        marked: Set[str] = set()
        for error in errors:
            if error.field_name in marked:
                continue
            element = self._controller.get_element(error.field_name)
            if element is None:
                logger.warning(f"Validation error for unknown field {error.field_name!r} skipped")
                continue
            element.set_error(error.get_message(resolver))
            marked.add(error.field_name)


class SummaryValidationErrorDisplay(ValidationErrorDisplay):
    """
    Hands every resolved message to a host callable, e.g. a banner or dialog.

    reset_errors() hands over an empty list.
    """

    def __init__(
        self,
        sink: Callable[[List[str]], None],
        message_resolver: Optional[MessageResolver] = None,
    ):
        self._sink = sink
        self._message_resolver = message_resolver or DefaultMessageResolver()

    def show_errors(self, errors: List[ValidationError]) -> None:
        self._sink([error.get_message(self._message_resolver) for error in errors])

    def reset_errors(self) -> None:
        self._sink([])
