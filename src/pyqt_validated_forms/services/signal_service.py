"""
Signal Service.

Blocks widget signals while the form pushes model values into widgets, so a
programmatic update is never echoed back to the model as user input.

Key features:
1. Context manager guarantees signal unblocking
2. Supports single or multiple widgets
"""

from contextlib import contextmanager
from typing import Any, Callable, Optional
import logging

from PyQt6.QtWidgets import QWidget

from pyqt_validated_forms.protocols.widget_protocols import ValueSettable

logger = logging.getLogger(__name__)


class SignalService:
    """
    Signal blocking helpers.

    Examples:
        with SignalService.block_signals(line_edit):
            line_edit.setText("value")

        SignalService.update_widget_value(line_edit, "value")
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Context manager for blocking widget signals."""
        previous = []
        for widget in widgets:
            if widget is not None:
                previous.append((widget, widget.blockSignals(True)))
                logger.debug(f"Blocked signals on {type(widget).__name__}")

        try:
            yield
        finally:
            for widget, was_blocked in previous:
                widget.blockSignals(was_blocked)

    @staticmethod
    def update_widget_value(widget: QWidget, value: Any, setter: Optional[Callable] = None) -> None:
        """Update widget value with signals blocked."""
        with SignalService.block_signals(widget):
            if setter:
                setter(widget, value)
            elif isinstance(widget, ValueSettable):
                widget.set_value(value)
            else:
                raise ValueError(f"Cannot set value on {type(widget).__name__}: not ValueSettable")
