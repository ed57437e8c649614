"""
Form model layer.

The read/write/notify facade between controllers and the host's data objects.
"""

from .form_model import FormModel, FieldChangeEvent, ChangeSubscription, ChangeListener
from .backing_models import ObjectFormModel, MappingFormModel

__all__ = [
    "FormModel",
    "FieldChangeEvent",
    "ChangeSubscription",
    "ChangeListener",
    "ObjectFormModel",
    "MappingFormModel",
]
