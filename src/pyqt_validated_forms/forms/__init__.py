"""
Form orchestration.

FormController and the helpers it shares with controllers and views.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_controller import FormController, create_form_model
    from .ui_utils import format_param_name, format_field_label, format_view_object_name

_EXPORTS = {
    "FormController": ("pyqt_validated_forms.forms.form_controller", "FormController"),
    "create_form_model": ("pyqt_validated_forms.forms.form_controller", "create_form_model"),
    "format_param_name": ("pyqt_validated_forms.forms.ui_utils", "format_param_name"),
    "format_field_label": ("pyqt_validated_forms.forms.ui_utils", "format_field_label"),
    "format_view_object_name": ("pyqt_validated_forms.forms.ui_utils", "format_view_object_name"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
