"""
pyqt-validated-forms: declarative, validated forms bound to a data model.

Architecture:
- Model: FormModel facade over the host's data object, with change events
- Validation: error value objects, field rules, message catalog, display strategies
- Controllers: FormController -> FormSectionController -> field controllers
- Widgets: PyQt6 views rendered from controllers (optional, imported explicitly)

The engine (everything but `widgets`, `theming` and the Qt helpers in
`core`/`services`) has no Qt dependency.
"""

__version__ = "0.1.0"

from .model import FormModel, ObjectFormModel, MappingFormModel, FieldChangeEvent, ChangeSubscription
from .validation import (
    ValidationError,
    RequiredFieldValidationError,
    InvalidInputValidationError,
    ValidationRule,
    PatternValidator,
    LengthValidator,
    RangeValidator,
    PredicateValidator,
    ValidationErrorDisplay,
    PerFieldValidationErrorDisplay,
    SummaryValidationErrorDisplay,
    DefaultMessageResolver,
)
from .controllers import (
    FormElementController,
    LabeledFieldController,
    EditTextController,
    CheckBoxController,
    SelectionController,
    ImageController,
    FormSectionController,
)
from .forms.form_controller import FormController
from .core.view_ids import ViewIdAllocator, generate_view_id
from .protocols import FormsConfig, set_forms_config, get_forms_config

__all__ = [
    "__version__",
    "FormModel",
    "ObjectFormModel",
    "MappingFormModel",
    "FieldChangeEvent",
    "ChangeSubscription",
    "ValidationError",
    "RequiredFieldValidationError",
    "InvalidInputValidationError",
    "ValidationRule",
    "PatternValidator",
    "LengthValidator",
    "RangeValidator",
    "PredicateValidator",
    "ValidationErrorDisplay",
    "PerFieldValidationErrorDisplay",
    "SummaryValidationErrorDisplay",
    "DefaultMessageResolver",
    "FormElementController",
    "LabeledFieldController",
    "EditTextController",
    "CheckBoxController",
    "SelectionController",
    "ImageController",
    "FormSectionController",
    "FormController",
    "ViewIdAllocator",
    "generate_view_id",
    "FormsConfig",
    "set_forms_config",
    "get_forms_config",
]
