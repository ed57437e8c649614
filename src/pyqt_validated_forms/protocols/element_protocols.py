"""
Contracts between the form engine and its collaborators.

Capabilities (ABCs) are implemented explicitly by controllers and views:
- Validatable: an element that produces validation errors
- ElementView: a rendered handle kept current by its controller

Host seams (Protocols) are supplied by the embedding application:
- ViewFactory / ViewContainer: turn controllers into on-screen widgets
- MessageResolver: turn a message key into display text
- ImageLoader: decode and scale images off the UI thread
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pyqt_validated_forms.controllers.element import FormElementController
    from pyqt_validated_forms.validation.errors import ValidationError


class Validatable(ABC):
    """Capability of elements that take part in form validation."""

    @abstractmethod
    def validate_input(self) -> List['ValidationError']:
        """
        Validate the element's current model value.

        Returns:
            Every failed check, in declaration order. Empty when valid.
        """
        pass


class ElementView(ABC):
    """Capability of rendered handles returned by a ViewFactory."""

    @abstractmethod
    def refresh_from(self, controller: 'FormElementController') -> None:
        """Update the rendered state from the controller's display state."""
        pass

    @abstractmethod
    def show_error(self, message: Optional[str]) -> None:
        """Show an error message; None clears it."""
        pass


@runtime_checkable
class ViewFactory(Protocol):
    """Creates the rendered handle for a controller."""

    def create_view(self, controller: 'FormElementController') -> ElementView:
        ...


@runtime_checkable
class ViewContainer(Protocol):
    """Receives element views in display order."""

    def clear(self) -> None:
        ...

    def add_view(self, view: ElementView) -> None:
        ...


@runtime_checkable
class MessageResolver(Protocol):
    """Resolves a message key and its arguments into display text."""

    def resolve(self, key: str, *args: Any, **kwargs: Any) -> str:
        ...


@runtime_checkable
class ImageLoader(Protocol):
    """
    Loads a scaled image for display.

    Exactly one of the callbacks is invoked, on the UI thread.
    """

    def load(
        self,
        path: str,
        width: int,
        height: int,
        on_loaded: Callable[[Any], None],
        on_failed: Callable[[Exception], None],
    ) -> None:
        ...
