"""Section controller: an ordered, named group of form elements."""

import logging
from typing import List, Optional

from pyqt_validated_forms.forms.ui_utils import format_param_name
from pyqt_validated_forms.model.form_model import FormModel
from pyqt_validated_forms.protocols.element_protocols import MessageResolver
from .element import FormElementController

logger = logging.getLogger(__name__)


class FormSectionController(FormElementController):
    """
    Ordered container of field controllers.

    Insertion order is display order. get_elements() returns the live list,
    not a copy: do not add or remove elements while iterating it.
    """

    def __init__(self, name: str, title: Optional[str] = None):
        super().__init__(name)
        self.title = title if title is not None else format_param_name(name)
        self._elements: List[FormElementController] = []

    def bind(self, model: FormModel, message_resolver: Optional[MessageResolver] = None) -> None:
        super().bind(model, message_resolver)
        for element in self._elements:
            element.bind(model, message_resolver)

    def add_element(self, element: FormElementController, position: Optional[int] = None) -> FormElementController:
        """Add `element` at `position` (default: end). Returns the element."""
        if position is None:
            position = len(self._elements)
        self._elements.insert(position, element)
        if self._model is not None:
            element.bind(self._model, self._message_resolver)
        return element

    def remove_element(self, name: str) -> Optional[FormElementController]:
        element = self.get_element(name)
        if element is not None:
            self._elements.remove(element)
        return element

    def get_element(self, name: str) -> Optional[FormElementController]:
        """Return the first element named `name`, or None."""
        for element in self._elements:
            if element.name == name:
                return element
        return None

    def get_elements(self) -> List[FormElementController]:
        return self._elements

    def refresh(self) -> None:
        if self._view is not None:
            self._view.refresh_from(self)
        for element in self._elements:
            element.refresh()
