"""
Core utilities.

Exceptions and view id allocation are pure Python. The Qt background task
is loaded lazily so the form engine can be imported without a Qt runtime.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .exceptions import (
    FormError,
    FieldAccessError,
    CoercionError,
    ImageLoadError,
    ViewNotRegisteredError,
)
from .view_ids import (
    MAX_VIEW_ID,
    ViewIdAllocator,
    generate_view_id,
    get_default_allocator,
    set_default_allocator,
)

if TYPE_CHECKING:
    from .background_task import BackgroundTask, BackgroundTaskManager

_LAZY_EXPORTS = {
    "BackgroundTask": ("pyqt_validated_forms.core.background_task", "BackgroundTask"),
    "BackgroundTaskManager": ("pyqt_validated_forms.core.background_task", "BackgroundTaskManager"),
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FormError",
    "FieldAccessError",
    "CoercionError",
    "ImageLoadError",
    "ViewNotRegisteredError",
    "MAX_VIEW_ID",
    "ViewIdAllocator",
    "generate_view_id",
    "get_default_allocator",
    "set_default_allocator",
    *_LAZY_EXPORTS.keys(),
]
