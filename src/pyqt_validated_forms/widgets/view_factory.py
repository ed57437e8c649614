"""
PyQt6 view factory.

Maps controller types to view types. Lookup walks the controller's MRO, so
a subclass of EditTextController renders as an EditTextView unless a more
specific view is registered. Every created view gets a fresh id from the
view id allocator, used as part of its Qt object name.
"""

import logging
from typing import Dict, Optional, Type

from PyQt6.QtWidgets import QWidget

from pyqt_validated_forms.controllers import (
    CheckBoxController,
    EditTextController,
    FormElementController,
    FormSectionController,
    ImageController,
    SelectionController,
)
from pyqt_validated_forms.core.exceptions import ViewNotRegisteredError
from pyqt_validated_forms.core.view_ids import ViewIdAllocator, get_default_allocator
from pyqt_validated_forms.forms.ui_utils import format_view_object_name
from pyqt_validated_forms.protocols.element_protocols import ElementView, ImageLoader
from pyqt_validated_forms.theming import FormColorScheme
from .field_views import CheckBoxView, EditTextView, ImageView, SectionHeaderView, SelectionView
from .image_loader import QtImageLoader

logger = logging.getLogger(__name__)

DEFAULT_VIEW_TYPES: Dict[Type[FormElementController], Type[QWidget]] = {
    FormSectionController: SectionHeaderView,
    EditTextController: EditTextView,
    CheckBoxController: CheckBoxView,
    SelectionController: SelectionView,
    ImageController: ImageView,
}


class QtViewFactory:
    """
    ViewFactory producing PyQt6 widgets.

    Example:
        factory = QtViewFactory()
        factory.register_view(RatingController, RatingView)
        form.recreate_views(FormView(), factory)
    """

    def __init__(
        self,
        allocator: Optional[ViewIdAllocator] = None,
        color_scheme: Optional[FormColorScheme] = None,
        image_loader: Optional[ImageLoader] = None,
    ):
        self._allocator = allocator or get_default_allocator()
        self._color_scheme = color_scheme
        self._image_loader = image_loader
        self._view_types: Dict[Type[FormElementController], Type[QWidget]] = dict(DEFAULT_VIEW_TYPES)

    def register_view(self, controller_type: Type[FormElementController], view_type: Type[QWidget]) -> None:
        if controller_type in self._view_types:
            logger.warning(
                f"View for {controller_type.__name__} already registered to "
                f"{self._view_types[controller_type].__name__}. Overwriting with {view_type.__name__}."
            )
        self._view_types[controller_type] = view_type

    def view_type_for(self, controller: FormElementController) -> Type[QWidget]:
        for klass in type(controller).__mro__:
            if klass in self._view_types:
                return self._view_types[klass]
        raise ViewNotRegisteredError(
            f"No view registered for {type(controller).__name__}. "
            f"Registered: {[t.__name__ for t in self._view_types]}"
        )

    def create_view(self, controller: FormElementController) -> ElementView:
        view_type = self.view_type_for(controller)

        if isinstance(controller, ImageController) and controller.image_loader is None:
            if self._image_loader is None:
                self._image_loader = QtImageLoader()
            controller.image_loader = self._image_loader

        color_scheme = self._color_scheme or FormColorScheme.from_config()
        view = view_type(controller, color_scheme=color_scheme)
        view.view_id = self._allocator.next_id()
        view.setObjectName(format_view_object_name(controller.name, view.view_id))
        logger.debug(f"Created {view_type.__name__} #{view.view_id} for {controller!r}")
        return view
