"""
Controller tree.

FormSectionController groups LabeledFieldController subclasses; every node
derives from FormElementController.
"""

from .element import FormElementController
from .field import LabeledFieldController
from .inputs import EditTextController, CheckBoxController, SelectionController
from .image import ImageController
from .section import FormSectionController

__all__ = [
    "FormElementController",
    "LabeledFieldController",
    "EditTextController",
    "CheckBoxController",
    "SelectionController",
    "ImageController",
    "FormSectionController",
]
