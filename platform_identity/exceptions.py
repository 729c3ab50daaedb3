"""
Custom exceptions for platform identity resolution.
"""


class PlatformIdentityError(Exception):
    """Base exception class for all platform identity errors."""
    pass


class InvalidInputError(PlatformIdentityError, ValueError):
    """Raised when a required argument is missing or not a string."""

    def __init__(self, message: str, argument: str = None):
        self.argument = argument

        if argument:
            message = f"Invalid argument '{argument}': {message}"

        super().__init__(message)


class UnsupportedOperationError(PlatformIdentityError):
    """Raised when a non-editable property is written through set()."""

    def __init__(self, message: str, key: str = None):
        self.key = key

        if key:
            message = f"{message} (property: {key})"

        super().__init__(message)


class PropertyParseError(PlatformIdentityError):
    """Raised when a raw property value cannot be converted to its declared type."""

    def __init__(self, message: str, raw_value: str = None):
        self.raw_value = raw_value

        if raw_value is not None:
            message = f"{message}: {raw_value!r}"

        super().__init__(message)


class StoreAccessError(PlatformIdentityError, PermissionError):
    """Raised by a property store that refuses to read or write a key."""

    def __init__(self, message: str, key: str = None):
        self.key = key

        if key:
            message = f"Access to property '{key}' denied: {message}"

        super().__init__(message)


class ConfigurationError(PlatformIdentityError):
    """Raised when configuration is invalid."""
    pass
