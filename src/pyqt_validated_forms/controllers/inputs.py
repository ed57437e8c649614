"""Concrete input field controllers."""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Type, Union

from pyqt_validated_forms.core.exceptions import CoercionError
from pyqt_validated_forms.services.coercion_service import CoercionService
from pyqt_validated_forms.validation.rules import ValidationRule
from .field import LabeledFieldController

logger = logging.getLogger(__name__)


class EditTextController(LabeledFieldController):
    """
    Free text input.

    The model field may be any scalar type: text is converted to the field's
    declared type (int, float, Decimal, bool, Enum, str) on input and back to
    text for display.
    """

    def __init__(
        self,
        name: str,
        label: Optional[str] = None,
        required: bool = False,
        rules: Optional[Iterable[ValidationRule]] = None,
        placeholder: Optional[str] = None,
        multi_line: bool = False,
        **kwargs,
    ):
        super().__init__(name, label, required, rules, **kwargs)
        self.placeholder = placeholder
        self.multi_line = multi_line

    def to_display_value(self, value: Any) -> str:
        return CoercionService.to_display(value)


class CheckBoxController(LabeledFieldController):
    """Boolean input. A None model value displays unchecked."""

    def to_display_value(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            return CoercionService.coerce(value, bool)
        except CoercionError:
            logger.warning(f"{self!r}: model value {value!r} is not boolean; shown unchecked")
            return False

    def coerce_input(self, raw: Any, target_type: Optional[Type]) -> Any:
        return CoercionService.coerce(raw, target_type or bool)


Option = Union[Any, Tuple[str, Any]]


class SelectionController(LabeledFieldController):
    """
    Pick one value from a fixed list.

    Options are (label, value) pairs or bare values (labelled with str(value)).
    display_value is the index of the selected option, -1 when the model
    value is not one of the options.
    """

    def __init__(
        self,
        name: str,
        label: Optional[str] = None,
        options: Sequence[Option] = (),
        required: bool = False,
        rules: Optional[Iterable[ValidationRule]] = None,
        prompt: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(name, label, required, rules, **kwargs)
        self._options: List[Tuple[str, Any]] = [
            option if isinstance(option, tuple) and len(option) == 2 else (str(option), option)
            for option in options
        ]
        self.prompt = prompt

    @property
    def options(self) -> List[Tuple[str, Any]]:
        return self._options

    @property
    def option_labels(self) -> List[str]:
        return [text for text, _ in self._options]

    @property
    def option_values(self) -> List[Any]:
        return [value for _, value in self._options]

    def index_of(self, value: Any) -> int:
        for index, option_value in enumerate(self.option_values):
            if option_value == value:
                return index
        return -1

    def to_display_value(self, value: Any) -> int:
        index = self.index_of(value)
        if index < 0 and value is not None:
            logger.debug(f"{self!r}: model value {value!r} is not an option")
        return index

    def coerce_input(self, raw: Any, target_type: Optional[Type]) -> Any:
        if raw is None:
            return None
        if self.index_of(raw) < 0:
            raise CoercionError(raw, target_type or object)
        return raw

    def select_index(self, index: int) -> bool:
        """
        Select the option at `index`; -1 clears the selection.

        An index past the last option is rejected like unconvertible input.
        """
        if index < 0:
            return self.on_user_input(None)
        if index >= len(self._options):
            self.reject_input(CoercionError(index, int), self.get_model_type())
            return False
        return self.on_user_input(self.option_values[index])
