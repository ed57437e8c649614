"""
Widget adapters that wrap Qt widgets to implement the widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QCheckBox.isChecked() vs QComboBox.currentIndex()
- textChanged vs stateChanged vs currentIndexChanged

All adapters implement consistent interface via ABCs:
- get_value() / set_value() for all widgets
- connect_change_signal() for all widgets
"""

from abc import ABCMeta
from typing import Any, Callable, List

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QCheckBox, QComboBox, QLineEdit, QPlainTextEdit

from pyqt_validated_forms.protocols.widget_protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable, ChangeSignalEmitter
)


# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    Returns the raw text; conversion to the model type is the controller's job.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textChanged.connect(lambda: callback(self.get_value()))


class PlainTextEditAdapter(QPlainTextEdit, ValueGettable, ValueSettable, PlaceholderCapable,
                           ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Adapter for multi-line text input."""

    def get_value(self) -> Any:
        return self.toPlainText()

    def set_value(self, value: Any) -> None:
        self.setPlainText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.textChanged.connect(lambda: callback(self.get_value()))


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.stateChanged.connect(lambda: callback(self.get_value()))


class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox working on option indexes.

    get_value()/set_value() use the index (-1 = no selection); the
    controller maps indexes to model values.
    """

    def populate(self, labels: List[str]) -> None:
        self.clear()
        self.addItems(labels)
        self.setCurrentIndex(-1)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.currentIndex()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        index = value if isinstance(value, int) and 0 <= value < self.count() else -1
        self.setCurrentIndex(index)

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.currentIndexChanged.connect(lambda: callback(self.get_value()))
