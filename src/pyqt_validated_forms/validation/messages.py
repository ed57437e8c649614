"""
Validation message catalog and the default resolver.

Templates are str.format strings. The field label is always available as
{label}; rule arguments are positional.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pyqt_validated_forms.protocols.form_config import get_forms_config

logger = logging.getLogger(__name__)

REQUIRED_FIELD = "required_field"
INVALID_INPUT = "invalid_input"
PATTERN_MISMATCH = "pattern_mismatch"
TOO_SHORT = "too_short"
TOO_LONG = "too_long"
BELOW_MINIMUM = "below_minimum"
ABOVE_MAXIMUM = "above_maximum"
INVALID_VALUE = "invalid_value"

DEFAULT_MESSAGES: Dict[str, str] = {
    REQUIRED_FIELD: "{label} is required",
    INVALID_INPUT: "{label} must be a valid {0}",
    PATTERN_MISMATCH: "{label} has an invalid format",
    TOO_SHORT: "{label} must be at least {0} characters",
    TOO_LONG: "{label} must be at most {0} characters",
    BELOW_MINIMUM: "{label} must be at least {0}",
    ABOVE_MAXIMUM: "{label} must be at most {0}",
    INVALID_VALUE: "{label} is invalid",
}


class DefaultMessageResolver:
    """
    Resolves message keys against DEFAULT_MESSAGES.

    Overrides from FormsConfig.message_overrides and from the constructor are
    merged on top, constructor last. An unknown key resolves to the key itself.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages = dict(DEFAULT_MESSAGES)
        self._messages.update(get_forms_config().message_overrides)
        if messages:
            self._messages.update(messages)

    def resolve(self, key: str, *args: Any, **kwargs: Any) -> str:
        template = self._messages.get(key)
        if template is None:
            logger.warning(f"No message template for key {key!r}")
            return key
        try:
            return template.format(*args, **kwargs)
        except (IndexError, KeyError) as e:
            logger.warning(f"Message template {key!r} does not match its arguments: {e}")
            return template
