"""
Form model: read/write/notify facade over a backing data object.

Every successful write emits exactly one FieldChangeEvent. That event is the
only invalidation signal in the system: views never poll the model.

Listeners are held through explicit subscription handles. A listener can be
subscribed at most once per model; subscribing it again revokes the earlier
handle first, so a form rebuilt against the same model never receives
duplicate refreshes.

Dispatch is synchronous. A listener must not write the field it is being
notified about; there is no reentrancy guard.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from pyqt_validated_forms.core.exceptions import FieldAccessError

logger = logging.getLogger(__name__)

ChangeListener = Callable[['FieldChangeEvent'], None]


@dataclass(frozen=True)
class FieldChangeEvent:
    """Immutable event representing a field change."""
    field_name: str      # Model key that changed
    old_value: Any       # Value before the write
    new_value: Any       # Value after the write


class ChangeSubscription:
    """
    Handle for one listener registration on a FormModel.

    Revoke with unsubscribe(), or use as a context manager for scoped
    subscription:

        with model.subscribe(on_change):
            model.set_value('name', 'Ada')
    """

    def __init__(self, model: 'FormModel', listener: ChangeListener):
        self._model = model
        self._listener = listener
        self._active = True

    @property
    def listener(self) -> ChangeListener:
        return self._listener

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Revoke this subscription. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._model._remove_subscription(self)

    def __enter__(self) -> 'ChangeSubscription':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()

    def __repr__(self) -> str:
        state = "active" if self._active else "revoked"
        return f"<ChangeSubscription {self._listener!r} ({state})>"


class FormModel(ABC):
    """
    Generic key-based store over one backing object.

    Subclasses supply the backing access:
        _get_backing_value(name)         -> raise FieldAccessError if absent
        _set_backing_value(name, value)  -> raise FieldAccessError if absent
        get_backing_model_class(name)    -> declared type or None
        get_backing_model_object()       -> the wrapped object
    """

    def __init__(self):
        self._subscriptions: List[ChangeSubscription] = []

    # ========== BACKING ACCESS (implemented by subclasses) ==========

    @abstractmethod
    def _get_backing_value(self, name: str) -> Any:
        pass

    @abstractmethod
    def _set_backing_value(self, name: str, value: Any) -> None:
        pass

    @abstractmethod
    def get_backing_model_class(self, name: str) -> Optional[type]:
        """Return the declared type of field `name`, or None if it has none."""
        pass

    @abstractmethod
    def get_backing_model_object(self) -> Any:
        """Return the object this model reads and writes."""
        pass

    # ========== PUBLIC READ/WRITE ==========

    def get_value(self, name: str) -> Any:
        """
        Read the current value of field `name`.

        Returns None (and logs) when the backing object has no such field.
        """
        try:
            return self._get_backing_value(name)
        except FieldAccessError as e:
            logger.warning(f"get_value({name!r}) on {type(self).__name__}: {e}")
            return None

    def set_value(self, name: str, value: Any) -> None:
        """
        Write `value` to field `name` and notify listeners once.

        A write to a missing field is logged and ignored; no event is emitted.
        """
        try:
            old_value = self._get_backing_value(name)
        except FieldAccessError:
            old_value = None

        try:
            self._set_backing_value(name, value)
        except FieldAccessError as e:
            logger.warning(f"set_value({name!r}) on {type(self).__name__} ignored: {e}")
            return

        self._fire_change(FieldChangeEvent(name, old_value, value))

    # ========== SUBSCRIPTIONS ==========

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, listener: ChangeListener) -> ChangeSubscription:
        """
        Register `listener` for change events.

        A listener already subscribed is unsubscribed first; its old handle
        becomes inactive.
        """
        self.unsubscribe(listener)
        subscription = ChangeSubscription(self, listener)
        self._subscriptions.append(subscription)
        logger.debug(f"Subscribed {listener!r} to {type(self).__name__} ({self.listener_count} active)")
        return subscription

    def unsubscribe(self, listener: ChangeListener) -> bool:
        """Revoke the subscription of `listener`. Returns True if one was active."""
        for subscription in list(self._subscriptions):
            if subscription.listener == listener:
                subscription.unsubscribe()
                return True
        return False

    def is_subscribed(self, listener: ChangeListener) -> bool:
        return any(s.listener == listener for s in self._subscriptions)

    def _remove_subscription(self, subscription: ChangeSubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"Unsubscribed {subscription.listener!r} ({self.listener_count} active)")

    def _fire_change(self, event: FieldChangeEvent) -> None:
        # Snapshot: listeners may unsubscribe while being notified
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.listener(event)
