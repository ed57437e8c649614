"""
Type coercion between widget input and model field types.

Widgets hand back loosely typed input (mostly text). CoercionService
converts it to the declared type of the model field, raising CoercionError
when that is impossible. Field controllers turn the error into a
validation error; it never reaches the user as an exception.
"""

import logging
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, Union, get_args, get_origin

from pyqt_validated_forms.core.exceptions import CoercionError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def resolve_optional(param_type: Type) -> Type:
    """Resolve Optional[T] to T."""
    if get_origin(param_type) is Union:
        args = get_args(param_type)
        if len(args) == 2 and type(None) in args:
            return next(arg for arg in args if arg is not type(None))
    return param_type


def is_enum(param_type: Type) -> bool:
    """Check if type is an Enum."""
    return isinstance(param_type, type) and issubclass(param_type, Enum)


def type_display_name(target_type: Optional[Type]) -> str:
    """Human readable name of a field type, used in error messages."""
    target_type = resolve_optional(target_type)
    if target_type in (int,):
        return "whole number"
    if target_type in (float, Decimal):
        return "number"
    if target_type is bool:
        return "yes/no value"
    return getattr(target_type, '__name__', str(target_type)).lower()


class CoercionService:
    """
    Stateless conversions keyed on the target type.

    Examples:
        CoercionService.coerce("42", int)            # 42
        CoercionService.coerce("", Optional[float])  # None
        CoercionService.coerce("abc", int)           # raises CoercionError
    """

    @staticmethod
    def coerce(value: Any, target_type: Optional[Type]) -> Any:
        """Convert `value` to `target_type`. Blank text becomes None."""
        if isinstance(value, str) and value.strip() == "" and target_type is not str:
            return None
        if value is None or target_type is None or target_type is Any:
            return value

        resolved = resolve_optional(target_type)
        if not isinstance(resolved, type):
            # Unions, generics: leave untouched
            logger.debug(f"No coercion for composite type {target_type!r}")
            return value

        if resolved is bool:
            return CoercionService._to_bool(value)
        if isinstance(value, resolved) and not isinstance(value, bool):
            return value
        if is_enum(resolved):
            return CoercionService._to_enum(value, resolved)
        if resolved is int:
            return CoercionService._to_int(value)
        if resolved is float:
            return CoercionService._to_float(value)
        if resolved is Decimal:
            return CoercionService._to_decimal(value)
        if resolved is str:
            return str(value)

        try:
            return resolved(value)
        except (TypeError, ValueError) as e:
            raise CoercionError(value, resolved) from e

    @staticmethod
    def to_display(value: Any) -> str:
        """Text shown in an input for a model value."""
        if value is None:
            return ""
        if isinstance(value, Enum):
            return value.name
        return str(value)

    # ========== PER-TYPE CONVERSIONS ==========

    @staticmethod
    def _to_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
        raise CoercionError(value, bool)

    @staticmethod
    def _to_int(value: Any) -> int:
        if isinstance(value, bool):
            raise CoercionError(value, int)
        if isinstance(value, float):
            if value.is_integer():
                return int(value)
            raise CoercionError(value, int)
        try:
            return int(str(value).strip())
        except ValueError as e:
            raise CoercionError(value, int) from e

    @staticmethod
    def _to_float(value: Any) -> float:
        if isinstance(value, bool):
            raise CoercionError(value, float)
        try:
            return float(str(value).strip()) if isinstance(value, str) else float(value)
        except (TypeError, ValueError) as e:
            raise CoercionError(value, float) from e

    @staticmethod
    def _to_decimal(value: Any) -> Decimal:
        try:
            return Decimal(str(value).strip())
        except InvalidOperation as e:
            raise CoercionError(value, Decimal) from e

    @staticmethod
    def _to_enum(value: Any, enum_type: Type[Enum]) -> Enum:
        if isinstance(value, str):
            name = value.strip()
            if name in enum_type.__members__:
                return enum_type[name]
        try:
            return enum_type(value)
        except ValueError as e:
            raise CoercionError(value, enum_type) from e
