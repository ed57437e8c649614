"""Form engine exceptions."""


class FormError(Exception):
    """Base class for all form engine errors."""


class FieldAccessError(FormError):
    """Raised when a backing object has no accessible field with the requested name."""

    def __init__(self, field_name: str, reason: str = ""):
        self.field_name = field_name
        message = f"No accessible field '{field_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CoercionError(FormError):
    """Raised when an input value cannot be converted to a field's native type."""

    def __init__(self, value, target_type):
        self.value = value
        self.target_type = target_type
        type_name = getattr(target_type, '__name__', str(target_type))
        super().__init__(f"Cannot convert {value!r} to {type_name}")


class ImageLoadError(FormError):
    """Raised by image loaders when an image cannot be decoded."""


class ViewNotRegisteredError(FormError):
    """Raised when no view type is registered for a controller type."""
