"""
Labeled field controller: one model field, its rules and its display state.

Validation order for a field:
    1. required check (empty value)      -> RequiredFieldValidationError
       with short-circuit enabled, nothing else is reported for the field
    2. pending input coercion failure    -> InvalidInputValidationError
    3. rules, in declaration order       -> whatever each rule returns

Short-circuiting the required check is a policy, not a bug: a blank field
would otherwise also fail every format rule. Hosts that want every violation
turn it off per field or through FormsConfig.short_circuit_required.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Type

from pyqt_validated_forms.core.exceptions import CoercionError
from pyqt_validated_forms.forms.ui_utils import format_param_name
from pyqt_validated_forms.protocols.element_protocols import Validatable
from pyqt_validated_forms.protocols.form_config import get_forms_config
from pyqt_validated_forms.services.coercion_service import CoercionService, type_display_name
from pyqt_validated_forms.validation.errors import (
    ValidationError,
    RequiredFieldValidationError,
    InvalidInputValidationError,
)
from pyqt_validated_forms.validation.rules import ValidationRule, is_empty_value
from .element import FormElementController

logger = logging.getLogger(__name__)


class LabeledFieldController(FormElementController, Validatable):
    """
    Base class for input fields with a label, a required flag and rules.

    Subclasses override to_display_value() and coerce_input() to adapt
    between the model's value and what their widget shows.
    """

    def __init__(
        self,
        name: str,
        label: Optional[str] = None,
        required: bool = False,
        rules: Optional[Iterable[ValidationRule]] = None,
        short_circuit_required: Optional[bool] = None,
    ):
        super().__init__(name)
        self.label = label if label is not None else format_param_name(name)
        self.required = required
        self._rules: List[ValidationRule] = list(rules or [])
        self._short_circuit_required = short_circuit_required
        self._display_value: Any = None
        self._pending_input_error: Optional[ValidationError] = None

    # ========== RULES ==========

    @property
    def rules(self) -> List[ValidationRule]:
        return self._rules

    def add_rule(self, rule: ValidationRule) -> 'LabeledFieldController':
        self._rules.append(rule)
        return self

    @property
    def short_circuit_required(self) -> bool:
        if self._short_circuit_required is None:
            return get_forms_config().short_circuit_required
        return self._short_circuit_required

    # ========== MODEL ACCESS ==========

    def get_model_value(self) -> Any:
        if self._model is None:
            logger.warning(f"{self!r} read before being bound to a model")
            return None
        return self._model.get_value(self.name)

    def set_model_value(self, value: Any) -> None:
        if self._model is None:
            logger.warning(f"{self!r} written before being bound to a model; value dropped")
            return
        self._model.set_value(self.name, value)

    def get_model_type(self) -> Optional[Type]:
        if self._model is None:
            return None
        return self._model.get_backing_model_class(self.name)

    # ========== VALIDATION ==========

    def validate_input(self) -> List[ValidationError]:
        value = self.get_model_value()
        errors: List[ValidationError] = []

        if self.required and is_empty_value(value):
            errors.append(RequiredFieldValidationError(self.name, self.label))
            if self.short_circuit_required:
                return errors

        if self._pending_input_error is not None:
            errors.append(self._pending_input_error)

        for rule in self._rules:
            error = rule.validate(value, self.name, self.label)
            if error is not None:
                errors.append(error)

        return errors

    def set_needs_validation(self) -> None:
        """Validate this field alone and show its first error, or clear it."""
        errors = self.validate_input()
        self.set_error(errors[0].get_message(self.message_resolver) if errors else None)

    @property
    def pending_input_error(self) -> Optional[ValidationError]:
        return self._pending_input_error

    # ========== DISPLAY STATE ==========

    @property
    def display_value(self) -> Any:
        return self._display_value

    def to_display_value(self, value: Any) -> Any:
        """Convert a model value into what the widget shows."""
        return value

    def coerce_input(self, raw: Any, target_type: Optional[Type]) -> Any:
        """Convert widget input into a model value. Raise CoercionError on failure."""
        return CoercionService.coerce(raw, target_type)

    def refresh(self) -> None:
        self._pending_input_error = None
        self._display_value = self.to_display_value(self.get_model_value())
        if self._view is not None:
            self._view.refresh_from(self)

    def on_user_input(self, raw: Any) -> bool:
        """
        Handle a value entered in the widget.

        Returns:
            True if the value was written to the model, False if it could not
            be converted (the failure is kept for validate_input()).
        """
        target_type = self.get_model_type()
        try:
            value = self.coerce_input(raw, target_type)
        except CoercionError as e:
            self.reject_input(e, target_type)
            return False

        self._pending_input_error = None
        self.set_model_value(value)
        return True

    def reject_input(self, error: CoercionError, target_type: Optional[Type]) -> None:
        """Keep an input failure for validate_input() without touching the model."""
        logger.debug(f"{self!r}: {error}")
        self._pending_input_error = InvalidInputValidationError(
            self.name, self.label, args=(type_display_name(target_type),)
        )
