"""
Form controller: owns the section tree, the model and the error display.

Typical use:

    form = FormController(person)                 # any object, dict or FormModel
    contact = FormSectionController("contact")
    contact.add_element(EditTextController("email", required=True,
                                           rules=[PatternValidator(EMAIL_RE)]))
    form.add_section(contact)

    form.recreate_views(container, view_factory)  # render (optional)
    if not form.is_valid_input():
        form.show_validation_errors()

The form holds a single subscription on its model. Every change event is
routed through FieldChangeDispatcher to the element with the same name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from pyqt_validated_forms.controllers.element import FormElementController
from pyqt_validated_forms.controllers.section import FormSectionController
from pyqt_validated_forms.model.backing_models import MappingFormModel, ObjectFormModel
from pyqt_validated_forms.model.form_model import ChangeSubscription, FieldChangeEvent, FormModel
from pyqt_validated_forms.protocols.element_protocols import (
    MessageResolver,
    Validatable,
    ViewContainer,
    ViewFactory,
)
from pyqt_validated_forms.services.field_change_dispatcher import FieldChangeDispatcher
from pyqt_validated_forms.validation.display import (
    PerFieldValidationErrorDisplay,
    ValidationErrorDisplay,
)
from pyqt_validated_forms.validation.errors import ValidationError
from pyqt_validated_forms.validation.messages import DefaultMessageResolver

logger = logging.getLogger(__name__)


def create_form_model(model_obj: Any) -> FormModel:
    """
    Pick the FormModel for a backing object.

    A FormModel is used as-is, a Mapping gets MappingFormModel, anything
    else gets ObjectFormModel.
    """
    if isinstance(model_obj, FormModel):
        return model_obj
    if isinstance(model_obj, Mapping):
        return MappingFormModel(model_obj)
    return ObjectFormModel(model_obj)


class FormController:
    """
    Orchestrates a form.

    Not thread-safe: use from the UI thread only.
    """

    def __init__(
        self,
        model_obj: Any,
        message_resolver: Optional[MessageResolver] = None,
        view_factory: Optional[ViewFactory] = None,
    ):
        self._sections: List[FormSectionController] = []
        self._model = create_form_model(model_obj)
        self._message_resolver = message_resolver or DefaultMessageResolver()
        self._view_factory = view_factory
        self._subscription: Optional[ChangeSubscription] = None
        self._validation_error_display: ValidationErrorDisplay = PerFieldValidationErrorDisplay(self)
        self._register_model_listener()

    # ========== MODEL ==========

    def get_model(self) -> FormModel:
        return self._model

    def get_model_object(self) -> Any:
        return self._model.get_backing_model_object()

    @property
    def message_resolver(self) -> MessageResolver:
        return self._message_resolver

    @property
    def subscription(self) -> Optional[ChangeSubscription]:
        return self._subscription

    def _register_model_listener(self) -> None:
        # Revoke first: exactly one subscription per form, however often views are rebuilt
        if self._subscription is not None:
            self._subscription.unsubscribe()
        self._subscription = self._model.subscribe(self._on_model_changed)

    def _on_model_changed(self, event: FieldChangeEvent) -> None:
        FieldChangeDispatcher.instance().dispatch(self, event)

    def close(self) -> None:
        """Stop listening to the model."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    # ========== SECTIONS & ELEMENTS ==========

    def get_sections(self) -> List[FormSectionController]:
        return self._sections

    def get_section(self, name: str) -> Optional[FormSectionController]:
        for section in self._sections:
            if section.name == name:
                return section
        return None

    def add_section(self, section: FormSectionController, position: Optional[int] = None) -> FormSectionController:
        """Add `section` at `position` (default: end) and bind it to the model."""
        if position is None:
            position = len(self._sections)
        self._sections.insert(position, section)
        section.bind(self._model, self._message_resolver)
        return section

    def get_element(self, name: str) -> Optional[FormElementController]:
        """
        Return the first element named `name`, scanning sections then fields
        in declaration order, or None.
        """
        for section in self._sections:
            element = section.get_element(name)
            if element is not None:
                return element
        return None

    def get_number_of_elements(self) -> int:
        """Total number of elements, not counting sections."""
        return sum(len(section.get_elements()) for section in self._sections)

    def refresh_elements(self) -> None:
        """Refresh every element from the current model values."""
        for section in self._sections:
            section.refresh()

    # ========== VALIDATION ==========

    def validate_input(self) -> List[ValidationError]:
        """
        Validate every field.

        Returns:
            Errors ordered by section, then field, then rule declaration.
        """
        logger.debug("Running validate_input")
        errors: List[ValidationError] = []
        for section in self._sections:
            for element in section.get_elements():
                if isinstance(element, Validatable):
                    errors.extend(element.validate_input())
        return errors

    def is_valid_input(self) -> bool:
        return not self.validate_input()

    def show_validation_errors(self) -> None:
        self._validation_error_display.show_errors(self.validate_input())

    def reset_validation_errors(self) -> None:
        self._validation_error_display.reset_errors()

    def set_validation_errors_display_method(self, method: ValidationErrorDisplay) -> None:
        self._validation_error_display = method

    def get_validation_errors_display_method(self) -> ValidationErrorDisplay:
        return self._validation_error_display

    # ========== VIEWS ==========

    def recreate_views(self, container: ViewContainer, view_factory: Optional[ViewFactory] = None) -> None:
        """
        Render every section and element into `container`, in order.

        Call after all elements have been added. Existing views are dropped
        and created anew.
        """
        factory = view_factory or self._view_factory
        if factory is None:
            raise ValueError("recreate_views needs a ViewFactory")
        self._view_factory = factory

        container.clear()
        for section in self._sections:
            section.bind(self._model, self._message_resolver)
            section.discard_view()
            for element in section.get_elements():
                element.discard_view()

            container.add_view(section.get_view(factory))
            for element in section.get_elements():
                container.add_view(element.get_view(factory))

        # Views are set up; listen to the model so they follow changes
        self._register_model_listener()
