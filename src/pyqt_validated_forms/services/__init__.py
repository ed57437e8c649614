"""
Service layer.

Stateless services shared by controllers and views: type coercion, model
change dispatch and (Qt only, loaded lazily) signal blocking.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .coercion_service import CoercionService
from .field_change_dispatcher import FieldChangeDispatcher

if TYPE_CHECKING:
    from .signal_service import SignalService

_LAZY_EXPORTS = {
    "SignalService": ("pyqt_validated_forms.services.signal_service", "SignalService"),
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
    "CoercionService",
    "FieldChangeDispatcher",
    *_LAZY_EXPORTS.keys(),
]
