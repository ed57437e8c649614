"""
Default FormModel implementations.

ObjectFormModel reads and writes public attributes of an arbitrary object
(dataclasses, plain classes, slotted classes). MappingFormModel works on a
dict-like store. Both raise FieldAccessError internally; FormModel turns
that into a logged None read or a no-op write.
"""

import dataclasses
import logging
import typing
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Optional

from pyqt_validated_forms.core.exceptions import FieldAccessError
from .form_model import FormModel

logger = logging.getLogger(__name__)


def _declared_types(cls: type) -> Dict[str, Any]:
    """Resolve annotations of `cls`, falling back to raw annotations on bad forward refs."""
    try:
        return typing.get_type_hints(cls)
    except Exception as e:
        logger.debug(f"Could not resolve type hints of {cls.__name__}: {e}")
        hints: Dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(getattr(klass, '__annotations__', {}))
        return hints


class ObjectFormModel(FormModel):
    """
    FormModel over the public attributes of an object.

    A field is accessible when its name does not start with an underscore and
    the object either has the attribute or declares it (dataclass field or
    class annotation). Methods are not fields.
    """

    def __init__(self, model_object: Any):
        super().__init__()
        if model_object is None:
            raise TypeError("ObjectFormModel requires a backing object, got None")
        self._model_object = model_object
        self._declared = _declared_types(type(model_object))

    def get_backing_model_object(self) -> Any:
        return self._model_object

    def _is_declared(self, name: str) -> bool:
        if name in self._declared:
            return True
        if dataclasses.is_dataclass(self._model_object):
            return any(f.name == name for f in dataclasses.fields(self._model_object))
        return False

    def _check_accessible(self, name: str) -> None:
        if not name or name.startswith('_'):
            raise FieldAccessError(name, "not a public field")
        if self._is_declared(name):
            return
        try:
            present = hasattr(self._model_object, name)
        except Exception as e:
            # Properties may raise anything, not only AttributeError
            raise FieldAccessError(name, f"lookup raised {type(e).__name__}: {e}") from e
        if not present:
            raise FieldAccessError(name, f"{type(self._model_object).__name__} has no such field")
        if callable(getattr(type(self._model_object), name, None)):
            raise FieldAccessError(name, "is a method")

    def _get_backing_value(self, name: str) -> Any:
        self._check_accessible(name)
        try:
            return getattr(self._model_object, name)
        except AttributeError as e:
            # Declared but never assigned (annotation without default)
            if self._is_declared(name):
                return None
            raise FieldAccessError(name, "attribute lookup failed") from e
        except Exception as e:
            raise FieldAccessError(name, f"lookup raised {type(e).__name__}: {e}") from e

    def _set_backing_value(self, name: str, value: Any) -> None:
        self._check_accessible(name)
        try:
            setattr(self._model_object, name, value)
        except Exception as e:
            # Frozen dataclasses, read-only or validating property setters
            raise FieldAccessError(name, f"not writable ({type(e).__name__}: {e})") from e

    def get_backing_model_class(self, name: str) -> Optional[type]:
        try:
            self._check_accessible(name)
        except FieldAccessError as e:
            logger.warning(f"get_backing_model_class({name!r}): {e}")
            return None

        if name in self._declared:
            return self._declared[name]

        try:
            value = self._get_backing_value(name)
        except FieldAccessError as e:
            logger.warning(f"get_backing_model_class({name!r}): {e}")
            return None
        if value is None:
            logger.debug(f"Field {name!r} has no declared type and no value; type unknown")
            return None
        return type(value)


class MappingFormModel(FormModel):
    """
    FormModel over a dict-like store keyed by field name.

    Reading a missing key is an access failure (logged, None). Writing a
    missing key adds it. Field types come from `field_types` when given,
    otherwise from the runtime type of the stored value.
    """

    def __init__(self, data: Optional[Mapping] = None, field_types: Optional[Mapping[str, type]] = None):
        super().__init__()
        self._data = data if data is not None else {}
        self._field_types = dict(field_types or {})

    def get_backing_model_object(self) -> Mapping:
        return self._data

    def _get_backing_value(self, name: str) -> Any:
        try:
            return self._data[name]
        except KeyError:
            raise FieldAccessError(name, "key not present") from None

    def _set_backing_value(self, name: str, value: Any) -> None:
        if not isinstance(self._data, MutableMapping):
            raise FieldAccessError(name, f"{type(self._data).__name__} is read-only")
        self._data[name] = value

    def get_backing_model_class(self, name: str) -> Optional[type]:
        if name in self._field_types:
            return self._field_types[name]
        value = self._data.get(name)
        if value is None:
            logger.warning(f"get_backing_model_class({name!r}): no declared type and no value")
            return None
        return type(value)
