"""
Base class of every node in the controller tree.

An element knows its model key, the model it is bound to, its current error
message and, once rendered, the view handle its ViewFactory returned.
Elements never render themselves; they push display state into the view.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pyqt_validated_forms.model.form_model import FormModel
from pyqt_validated_forms.protocols.element_protocols import ElementView, MessageResolver, ViewFactory
from pyqt_validated_forms.validation.messages import DefaultMessageResolver

logger = logging.getLogger(__name__)


class FormElementController(ABC):
    """
    A named element of a form: a field or a section.

    Lifecycle:
        1. created by the form builder
        2. bind(model, resolver) when added to a bound form/section
        3. get_view(factory) when the form is rendered
        4. refresh() whenever the model reports a change for `name`
    """

    def __init__(self, name: str):
        if not name:
            raise ValueError("Form elements need a non-empty name")
        self.name = name
        self._model: Optional[FormModel] = None
        self._message_resolver: Optional[MessageResolver] = None
        self._view: Optional[ElementView] = None
        self._error: Optional[str] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    # ========== MODEL BINDING ==========

    def bind(self, model: FormModel, message_resolver: Optional[MessageResolver] = None) -> None:
        """Attach this element to the form's model."""
        self._model = model
        if message_resolver is not None:
            self._message_resolver = message_resolver

    def get_model(self) -> Optional[FormModel]:
        return self._model

    @property
    def message_resolver(self) -> MessageResolver:
        if self._message_resolver is None:
            self._message_resolver = DefaultMessageResolver()
        return self._message_resolver

    # ========== VIEW ==========

    @property
    def view(self) -> Optional[ElementView]:
        return self._view

    def get_view(self, factory: ViewFactory) -> ElementView:
        """Return the rendered handle, creating it through `factory` on first use."""
        if self._view is None:
            self._view = factory.create_view(self)
            logger.debug(f"Created view {type(self._view).__name__} for {self!r}")
            self.refresh()
            if self._error is not None:
                self._view.show_error(self._error)
        return self._view

    def discard_view(self) -> None:
        """Forget the rendered handle; the next get_view() creates a new one."""
        self._view = None

    @abstractmethod
    def refresh(self) -> None:
        """Re-read the model and update display state. Must not write the model."""
        pass

    # ========== ERROR STATE ==========

    def set_error(self, message: Optional[str]) -> None:
        """Set the visible error message; None clears it."""
        self._error = message
        if self._view is not None:
            self._view.show_error(message)

    def get_error(self) -> Optional[str]:
        return self._error
