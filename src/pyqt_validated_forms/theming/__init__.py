"""
Theming for rendered forms.
"""

from .color_scheme import FormColorScheme

__all__ = [
    "FormColorScheme",
]
