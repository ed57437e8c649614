"""
UI utilities for pyqt-validated-forms.

Simple formatting helpers used by controllers and views.
"""


def format_param_name(name: str) -> str:
    """Convert snake_case to Title Case: 'param_name' -> 'Param Name'"""
    return name.replace('_', ' ').strip().title()


def format_field_label(label: str, required: bool = False) -> str:
    """Create field label: 'Param Name' -> 'Param Name:' ('Param Name *:' when required)"""
    marker = " *" if required else ""
    return f"{label}{marker}:"


def format_view_object_name(name: str, view_id: int) -> str:
    """Generate Qt object name: 'first_name', 7 -> 'first_name_7'"""
    return f"{name}_{view_id}"
