"""
Widget ABC contracts for the rendering layer.

Input widgets implement these so field views can read, write and observe
them without knowing the concrete Qt class.

Design Philosophy:
- Explicit inheritance over duck typing
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class PlaceholderCapable(ABC):
    """ABC for widgets that can display placeholder text."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Hides the differences between textChanged, stateChanged and
    currentIndexChanged.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        Args:
            callback: Function to call when widget value changes.
                     Signature: callback(new_value: Any) -> None
        """
        pass
