"""
PyQt6 views for form elements.

Each view renders one controller: a label, an input widget and an error
line. User input is handed to the controller, which writes the model; the
model change comes back through refresh_from(). Values pushed from the
controller are written with signals blocked so they are not re-submitted
as input.
"""

import logging
from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_validated_forms.controllers import (
    CheckBoxController,
    EditTextController,
    FormElementController,
    FormSectionController,
    ImageController,
    LabeledFieldController,
    SelectionController,
)
from pyqt_validated_forms.forms.ui_utils import format_field_label
from pyqt_validated_forms.protocols.element_protocols import ElementView
from pyqt_validated_forms.protocols.widget_protocols import ChangeSignalEmitter, PlaceholderCapable
from pyqt_validated_forms.services.signal_service import SignalService
from pyqt_validated_forms.theming import FormColorScheme
from .adapters import (
    CheckBoxAdapter,
    ComboBoxAdapter,
    LineEditAdapter,
    PlainTextEditAdapter,
    PyQtWidgetMeta,
)

logger = logging.getLogger(__name__)


class SectionHeaderView(QWidget, ElementView, metaclass=PyQtWidgetMeta):
    """Title row of a section."""

    def __init__(self, controller: FormSectionController, color_scheme: Optional[FormColorScheme] = None, parent=None):
        super().__init__(parent)
        self.view_id: Optional[int] = None
        color_scheme = color_scheme or FormColorScheme.from_config()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 2)
        self.title_label = QLabel(controller.title)
        self.title_label.setStyleSheet(color_scheme.section_style())
        layout.addWidget(self.title_label)

    def refresh_from(self, controller: FormElementController) -> None:
        self.title_label.setText(controller.title)

    def show_error(self, message: Optional[str]) -> None:
        # Sections carry no visible error state
        pass


class LabeledFieldView(QWidget, ElementView, metaclass=PyQtWidgetMeta):
    """
    Label, input widget and error line for a LabeledFieldController.

    Subclasses implement create_input() and, when the widget value is not
    the controller's input format, handle_input().
    """

    def __init__(self, controller: LabeledFieldController, color_scheme: Optional[FormColorScheme] = None, parent=None):
        super().__init__(parent)
        self.view_id: Optional[int] = None
        self._controller = controller
        self._updating_from_input = False
        color_scheme = color_scheme or FormColorScheme.from_config()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 2, 0, 2)
        layout.setSpacing(2)

        self.label = QLabel(format_field_label(controller.label, controller.required))
        self.label.setStyleSheet(color_scheme.label_style())
        layout.addWidget(self.label)

        self.input_widget = self.create_input(controller)
        if self.input_widget is not None:
            layout.addWidget(self.input_widget)
            if isinstance(self.input_widget, ChangeSignalEmitter):
                self.input_widget.connect_change_signal(self._on_input)

        self.error_label = QLabel()
        self.error_label.setStyleSheet(color_scheme.error_style())
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

    @property
    def controller(self) -> LabeledFieldController:
        return self._controller

    def create_input(self, controller: LabeledFieldController) -> Optional[QWidget]:
        raise NotImplementedError(f"{type(self).__name__} must implement create_input()")

    def handle_input(self, value: Any) -> None:
        self._controller.on_user_input(value)

    def _on_input(self, value: Any) -> None:
        # The model write triggers refresh_from(); don't overwrite what the user is typing
        self._updating_from_input = True
        try:
            self.handle_input(value)
        finally:
            self._updating_from_input = False

    def refresh_from(self, controller: FormElementController) -> None:
        if self._updating_from_input or self.input_widget is None:
            return
        SignalService.update_widget_value(self.input_widget, controller.display_value)

    def show_error(self, message: Optional[str]) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(message is not None)

    @property
    def error_text(self) -> Optional[str]:
        return self.error_label.text() if not self.error_label.isHidden() else None


class EditTextView(LabeledFieldView):
    """Single or multi-line text input."""

    def create_input(self, controller: EditTextController) -> QWidget:
        widget = PlainTextEditAdapter() if controller.multi_line else LineEditAdapter()
        if controller.placeholder and isinstance(widget, PlaceholderCapable):
            widget.set_placeholder(controller.placeholder)
        return widget


class CheckBoxView(LabeledFieldView):
    """Check box; the label sits above it like every other field."""

    def create_input(self, controller: CheckBoxController) -> QWidget:
        return CheckBoxAdapter()


class SelectionView(LabeledFieldView):
    """Drop-down of the controller's options."""

    def create_input(self, controller: SelectionController) -> QWidget:
        widget = ComboBoxAdapter()
        widget.populate(controller.option_labels)
        if controller.prompt:
            widget.set_placeholder(controller.prompt)
        return widget

    def handle_input(self, value: Any) -> None:
        self._controller.select_index(value)


class ImageView(LabeledFieldView):
    """Thumbnail of the image stored in the model, hidden when there is none."""

    def create_input(self, controller: ImageController) -> QWidget:
        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.image_label.hide()
        return self.image_label

    def refresh_from(self, controller: FormElementController) -> None:
        image = getattr(controller, 'image', None)
        if isinstance(image, QImage) and not image.isNull():
            self.image_label.setPixmap(QPixmap.fromImage(image))
            self.image_label.setToolTip(controller.display_value)
            self.image_label.show()
        else:
            self.image_label.clear()
            self.image_label.hide()

    @property
    def has_image(self) -> bool:
        return not self.image_label.isHidden()
