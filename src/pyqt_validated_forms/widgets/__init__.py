"""
PyQt6 rendering layer.

Views for each controller type, the factory that creates them, the form
container and the background image loader.
"""

from .adapters import (
    PyQtWidgetMeta,
    LineEditAdapter,
    PlainTextEditAdapter,
    CheckBoxAdapter,
    ComboBoxAdapter,
)
from .field_views import (
    SectionHeaderView,
    LabeledFieldView,
    EditTextView,
    CheckBoxView,
    SelectionView,
    ImageView,
)
from .form_view import FormView
from .image_loader import QtImageLoader, load_scaled_image
from .view_factory import QtViewFactory, DEFAULT_VIEW_TYPES

__all__ = [
    "PyQtWidgetMeta",
    "LineEditAdapter",
    "PlainTextEditAdapter",
    "CheckBoxAdapter",
    "ComboBoxAdapter",
    "SectionHeaderView",
    "LabeledFieldView",
    "EditTextView",
    "CheckBoxView",
    "SelectionView",
    "ImageView",
    "FormView",
    "QtImageLoader",
    "load_scaled_image",
    "QtViewFactory",
    "DEFAULT_VIEW_TYPES",
]
