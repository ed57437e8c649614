"""Tests for field and section controllers."""

from decimal import Decimal
from enum import Enum
from typing import Optional

import pytest

from pyqt_validated_forms.controllers import (
    CheckBoxController,
    EditTextController,
    FormSectionController,
    SelectionController,
)
from pyqt_validated_forms.core.exceptions import CoercionError
from pyqt_validated_forms.model import MappingFormModel, ObjectFormModel
from pyqt_validated_forms.protocols import FormsConfig, Validatable, set_forms_config
from pyqt_validated_forms.services import CoercionService
from pyqt_validated_forms.validation import (
    InvalidInputValidationError,
    LengthValidator,
    PatternValidator,
    PredicateValidator,
    RequiredFieldValidationError,
)


def bound(controller, model):
    controller.bind(model)
    return controller


# ========== LABELED FIELD ==========

def test_label_defaults_from_name():
    assert EditTextController("first_name").label == "First Name"
    assert EditTextController("first_name", "Given name").label == "Given name"


def test_field_is_validatable():
    assert isinstance(EditTextController("x"), Validatable)
    assert not isinstance(FormSectionController("s"), Validatable)


def test_valid_field_has_no_errors(person):
    person.email = "ada@example.com"
    field = bound(EditTextController("email", required=True, rules=[PatternValidator(r".+@.+")]),
                  ObjectFormModel(person))
    assert field.validate_input() == []


def test_required_short_circuits_other_rules(person):
    """An empty required field reports only the required error."""
    always_fails = PredicateValidator(lambda v: False)
    field = bound(EditTextController("email", "Email", required=True,
                                     rules=[always_fails, LengthValidator(min_length=3), always_fails]),
                  ObjectFormModel(person))

    assert field.validate_input() == [RequiredFieldValidationError("email", "Email")]


def test_blank_string_counts_as_empty(person):
    person.name = "   "
    field = bound(EditTextController("name", required=True), ObjectFormModel(person))
    assert [e.message_key for e in field.validate_input()] == ["required_field"]


def test_required_without_short_circuit_reports_everything(person):
    """With the policy turned off, rules run after the required check."""
    always_fails = PredicateValidator(lambda v: False)
    field = bound(EditTextController("email", required=True, rules=[always_fails],
                                     short_circuit_required=False),
                  ObjectFormModel(person))

    assert [e.message_key for e in field.validate_input()] == ["required_field", "invalid_value"]


def test_short_circuit_policy_from_config(person):
    set_forms_config(FormsConfig(short_circuit_required=False))
    field = bound(EditTextController("email", required=True, rules=[PredicateValidator(lambda v: False)]),
                  ObjectFormModel(person))
    assert len(field.validate_input()) == 2


def test_all_rule_failures_reported_in_order(person):
    person.name = "x1"
    field = bound(EditTextController("name", rules=[
        LengthValidator(min_length=3),
        PatternValidator(r"[a-z]+"),
        PredicateValidator(lambda v: True),
    ]), ObjectFormModel(person))

    assert [e.message_key for e in field.validate_input()] == ["too_short", "pattern_mismatch"]


def test_unbound_field_validates_as_empty():
    field = EditTextController("name", required=True)
    assert [e.message_key for e in field.validate_input()] == ["required_field"]


def test_set_needs_validation_shows_first_error(person):
    field = bound(EditTextController("name", "Name", required=True), ObjectFormModel(person))
    field.set_needs_validation()
    assert field.get_error() == "Name is required"

    person.name = "Ada"
    field.set_needs_validation()
    assert field.get_error() is None


def test_set_error_and_clear():
    field = EditTextController("name")
    field.set_error("Bad")
    assert field.get_error() == "Bad"
    field.set_error(None)
    assert field.get_error() is None


def test_refresh_is_idempotent_and_does_not_write(person):
    person.age = 36
    model = ObjectFormModel(person)
    events = []
    model.subscribe(events.append)
    field = bound(EditTextController("age"), model)

    field.refresh()
    field.refresh()

    assert field.display_value == "36"
    assert person.age == 36
    assert events == []


# ========== INPUT & COERCION ==========

def test_text_input_coerced_to_model_type(person):
    model = ObjectFormModel(person)
    field = bound(EditTextController("age"), model)

    assert field.on_user_input("42") is True
    assert person.age == 42

    assert field.on_user_input("  ") is True
    assert person.age is None


def test_coercion_failure_becomes_validation_error(person):
    """Unconvertible input keeps the model value and is reported on validation."""
    person.age = 30
    field = bound(EditTextController("age", "Age"), ObjectFormModel(person))

    assert field.on_user_input("thirty") is False
    assert person.age == 30
    assert field.validate_input() == [InvalidInputValidationError("age", "Age", args=("whole number",))]
    assert field.validate_input()[0].get_message() == "Age must be a valid whole number"

    field.on_user_input("31")
    assert field.validate_input() == []


def test_refresh_clears_pending_input_error(person):
    field = bound(EditTextController("height"), ObjectFormModel(person))
    field.on_user_input("tall")
    assert field.pending_input_error is not None

    field.refresh()
    assert field.pending_input_error is None


def test_required_error_precedes_input_error(person):
    field = bound(EditTextController("age", required=True), ObjectFormModel(person))
    field.on_user_input("x")
    assert [e.message_key for e in field.validate_input()] == ["required_field"]


class Color(Enum):
    RED = "r"
    BLUE = "b"


@pytest.mark.parametrize("value, target, expected", [
    ("42", int, 42),
    ("42", Optional[int], 42),
    (3.0, int, 3),
    ("2.5", float, 2.5),
    ("1.10", Decimal, Decimal("1.10")),
    ("yes", bool, True),
    ("0", bool, False),
    ("RED", Color, Color.RED),
    ("b", Color, Color.BLUE),
    (7, str, "7"),
    ("", Optional[int], None),
    ("", str, ""),
    ("as-is", None, "as-is"),
])
def test_coercion_service(value, target, expected):
    assert CoercionService.coerce(value, target) == expected


@pytest.mark.parametrize("value, target", [
    ("abc", int),
    (2.5, int),
    (True, int),
    ("maybe", bool),
    ("1,5", float),
    ("x", Decimal),
    ("GREEN", Color),
])
def test_coercion_service_failures(value, target):
    with pytest.raises(CoercionError):
        CoercionService.coerce(value, target)


def test_display_of_enum_and_none():
    assert CoercionService.to_display(Color.RED) == "RED"
    assert CoercionService.to_display(None) == ""


def test_checkbox_controller(person):
    field = bound(CheckBoxController("subscribed"), ObjectFormModel(person))
    field.refresh()
    assert field.display_value is False

    field.on_user_input(True)
    assert person.subscribed is True


def test_checkbox_on_untyped_mapping():
    model = MappingFormModel({})
    field = bound(CheckBoxController("agree"), model)
    field.on_user_input("yes")
    assert model.get_value("agree") is True


def test_selection_controller():
    model = MappingFormModel({"size": "m"})
    field = bound(SelectionController("size", options=[("Small", "s"), ("Medium", "m"), "l"]), model)

    field.refresh()
    assert field.display_value == 1
    assert field.option_labels == ["Small", "Medium", "l"]

    field.select_index(2)
    assert model.get_value("size") == "l"

    field.select_index(-1)
    assert model.get_value("size") is None


def test_selection_rejects_unknown_value():
    model = MappingFormModel({"size": "s"})
    field = bound(SelectionController("size", "Size", options=["s", "m"]), model)

    assert field.on_user_input("xl") is False
    assert model.get_value("size") == "s"
    assert [e.message_key for e in field.validate_input()] == ["invalid_input"]


def test_selection_index_out_of_range_is_rejected():
    """An index past the options keeps the model and reports invalid input."""
    model = MappingFormModel({"size": "s"})
    field = bound(SelectionController("size", "Size", options=["s", "m"]), model)

    assert field.select_index(2) is False
    assert field.select_index(99) is False
    assert model.get_value("size") == "s"
    assert [e.message_key for e in field.validate_input()] == ["invalid_input"]

    assert field.select_index(1) is True
    assert model.get_value("size") == "m"
    assert field.validate_input() == []


def test_selection_unknown_model_value_displays_no_selection():
    field = bound(SelectionController("size", options=["s"]), MappingFormModel({"size": "xxl"}))
    field.refresh()
    assert field.display_value == -1


# ========== SECTION ==========

def test_section_get_element_first_match_in_order():
    section = FormSectionController("main")
    first = section.add_element(EditTextController("dup"))
    section.add_element(EditTextController("other"))
    section.add_element(EditTextController("dup"))

    assert section.get_element("dup") is first
    assert section.get_element("missing") is None


def test_section_add_element_at_position():
    section = FormSectionController("main")
    section.add_element(EditTextController("b"))
    section.add_element(EditTextController("a"), position=0)
    assert [e.name for e in section.get_elements()] == ["a", "b"]


def test_section_elements_is_live_list():
    section = FormSectionController("main")
    elements = section.get_elements()
    section.add_element(EditTextController("a"))
    assert len(elements) == 1


def test_section_binds_late_elements(person):
    model = ObjectFormModel(person)
    section = FormSectionController("main")
    section.bind(model)
    field = section.add_element(EditTextController("name"))
    assert field.get_model() is model


def test_section_title_defaults_from_name():
    assert FormSectionController("contact_details").title == "Contact Details"


def test_section_remove_element():
    section = FormSectionController("main")
    section.add_element(EditTextController("a"))
    removed = section.remove_element("a")
    assert removed.name == "a"
    assert section.get_elements() == []
    assert section.remove_element("a") is None


def test_element_requires_name():
    with pytest.raises(ValueError):
        EditTextController("")
