"""
Color scheme for rendered forms.

Semantic colors for labels, section titles and error text. Defaults come
from FormsConfig so applications can restyle forms without subclassing.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from PyQt6.QtGui import QColor

from pyqt_validated_forms.protocols.form_config import get_forms_config

logger = logging.getLogger(__name__)


@dataclass
class FormColorScheme:
    """Semantic colors used by the form views."""

    label_color: Tuple[int, int, int] = (204, 204, 204)    # #cccccc - Field labels
    section_color: Tuple[int, int, int] = (0, 170, 255)    # #00aaff - Section titles
    error_color: Tuple[int, int, int] = (220, 53, 69)      # #dc3545 - Validation errors

    @classmethod
    def from_config(cls) -> 'FormColorScheme':
        """Build a scheme from the current FormsConfig."""
        config = get_forms_config()
        return cls(
            label_color=config.label_color,
            section_color=config.section_color,
            error_color=config.error_color,
        )

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """Convert an RGB tuple to a '#rrggbb' string for stylesheets."""
        r, g, b = color_tuple[:3]
        return f"#{r:02x}{g:02x}{b:02x}"

    def label_style(self) -> str:
        return f"color: {self.to_hex(self.label_color)};"

    def section_style(self) -> str:
        return f"color: {self.to_hex(self.section_color)}; font-weight: bold;"

    def error_style(self) -> str:
        return f"color: {self.to_hex(self.error_color)};"
