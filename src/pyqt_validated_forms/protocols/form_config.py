"""Base configuration class for the form engine.

Provides hooks for applications to customize validation and rendering behavior.
"""

from typing import Dict, Optional, Tuple
from dataclasses import dataclass, field


@dataclass
class FormsConfig:
    """Configuration for form validation and rendering.

    Applications can subclass this to provide custom configuration.

    Attributes:
        short_circuit_required: Skip a field's remaining checks once its required check fails
        default_image_size: Edge length in pixels of image field thumbnails
        debug_dispatch: Verbose logging of model change dispatch
        message_overrides: Message templates merged over the default catalog
        error_color: RGB color of field error text
        label_color: RGB color of field labels
        section_color: RGB color of section titles
    """

    short_circuit_required: bool = True
    default_image_size: int = 200
    debug_dispatch: bool = False
    message_overrides: Dict[str, str] = field(default_factory=dict)
    error_color: Tuple[int, int, int] = (220, 53, 69)
    label_color: Tuple[int, int, int] = (204, 204, 204)
    section_color: Tuple[int, int, int] = (0, 170, 255)


# Global config instance (set by application)
_forms_config: Optional[FormsConfig] = None


def set_forms_config(config: Optional[FormsConfig]) -> None:
    """Set the global forms configuration.

    Args:
        config: FormsConfig instance, or None to restore defaults
    """
    global _forms_config
    _forms_config = config


def get_forms_config() -> FormsConfig:
    """Get the current forms configuration.

    Returns:
        Current FormsConfig or default if not set
    """
    if _forms_config is None:
        return FormsConfig()
    return _forms_config
