"""
Field Change Dispatcher.

Routes model change events to the field controller that displays the field.
A form registers exactly one listener on its model; that listener hands every
event here.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pyqt_validated_forms.model.form_model import FieldChangeEvent
from pyqt_validated_forms.protocols.form_config import get_forms_config

if TYPE_CHECKING:
    from pyqt_validated_forms.forms.form_controller import FormController

logger = logging.getLogger(__name__)


class FieldChangeDispatcher:
    """Singleton dispatcher for model changes. Stateless."""

    _instance = None

    @classmethod
    def instance(cls) -> 'FieldChangeDispatcher':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def dispatch(self, form: 'FormController', event: FieldChangeEvent) -> bool:
        """
        Refresh the element showing `event.field_name`.

        The model may hold fields this form does not show; such events are
        logged and ignored.

        Returns:
            True if an element was refreshed.
        """
        verbose = get_forms_config().debug_dispatch
        if verbose:
            logger.info(f"DISPATCH: {event.field_name} = {repr(event.new_value)[:50]} (was {repr(event.old_value)[:50]})")

        element = form.get_element(event.field_name)
        if element is None:
            logger.debug(f"Model change for {event.field_name!r} has no element on this form; ignored")
            return False

        element.refresh()
        if verbose:
            logger.info(f"  Refreshed {type(element).__name__} {element.name!r}")
        return True
