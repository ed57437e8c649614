"""
Protocol definitions.

Capability ABCs implemented by controllers and views, host seams supplied by
the embedding application, and the global forms configuration.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    ChangeSignalEmitter,
)
from .element_protocols import (
    Validatable,
    ElementView,
    ViewFactory,
    ViewContainer,
    MessageResolver,
    ImageLoader,
)
from .form_config import FormsConfig, set_forms_config, get_forms_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "ChangeSignalEmitter",
    "Validatable",
    "ElementView",
    "ViewFactory",
    "ViewContainer",
    "MessageResolver",
    "ImageLoader",
    "FormsConfig",
    "set_forms_config",
    "get_forms_config",
]
