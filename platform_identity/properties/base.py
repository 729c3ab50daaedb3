"""
Typed wrapper over a single raw string key of a property store.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..exceptions import InvalidInputError, PropertyParseError, StoreAccessError, UnsupportedOperationError
from .store import PropertyStore, default_store

logger = logging.getLogger(__name__)

T = TypeVar('T')

_NO_DEFAULT = object()


class SystemProperty(ABC, Generic[T]):
    """
    A typed property stored as a raw string in a PropertyStore.

    Subclasses define how a raw string is parsed into a value and how a value
    is written back as a raw string. Parse failures never escape get(): they
    are logged and the property reads as having no value.
    """

    def __init__(self, key: str, editable: bool = False, store: Optional[PropertyStore] = None):
        """
        Args:
            key: Property key, e.g. "os.name"
            editable: Whether set() may change the value (force_set() always may)
            store: Store to read from and write to; the process default store if None
        """
        if not isinstance(key, str) or not key:
            raise InvalidInputError("key should be a non-empty string", argument="key")

        self._key = key
        self._editable = bool(editable)
        self._store = store

    def __str__(self) -> str:
        value = self.get()
        return "None" if value is None else self._to_raw(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, editable={self._editable})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def editable(self) -> bool:
        return self._editable

    @property
    def store(self) -> PropertyStore:
        return self._store if self._store is not None else default_store()

    def has_value(self) -> bool:
        """Return True if the store holds a raw value for this key."""
        return self.get_raw() is not None

    def has_valid_value(self) -> bool:
        """
        Return True if there is no raw value, or if the raw value parses.

        This tells "absent" apart from "present but malformed".
        """
        raw = self.get_raw()
        return raw is None or self._parse_or_none(raw) is not None

    def get_raw(self) -> Optional[str]:
        """Return the unparsed raw value, or None if absent or unreadable."""
        try:
            return self.store.get_raw(self._key)
        except StoreAccessError as e:
            logger.warning(f"Could not retrieve property {self._key}: {e}")
            return None

    def get(self, default=_NO_DEFAULT) -> Optional[T]:
        """
        Return the parsed value of this property.

        Args:
            default: Value returned when the property has no valid value.
                Must not be None when given.

        Returns:
            The parsed value, the default, or None if no default was given
        """
        if default is None:
            raise InvalidInputError("default should not be None", argument="default")

        raw = self.get_raw()
        value = None if raw is None else self._parse_or_none(raw)

        if value is None and default is not _NO_DEFAULT:
            return default
        return value

    def set(self, value: Optional[T]) -> Optional[T]:
        """
        Set the value of this property.

        Args:
            value: New value, or None to remove the raw value

        Returns:
            The previous value

        Raises:
            UnsupportedOperationError: If this property is not editable
        """
        if not self._editable:
            raise UnsupportedOperationError("Cannot set value of uneditable property", key=self._key)

        previous = self.get()
        self._write(None if value is None else self._to_raw(value))
        return previous

    def force_set(self, raw: Optional[str]) -> Optional[str]:
        """
        Set the raw value regardless of editability, without validation.

        Args:
            raw: New raw value, or None to remove it

        Returns:
            The previous raw value
        """
        previous = self.get_raw()
        self._write(raw)
        return previous

    def value_equals(self, value: Optional[T]) -> bool:
        return self.get() == value

    def raw_value_equals(self, raw: Optional[str]) -> bool:
        return self.get_raw() == raw

    def string_equals(self, text: str) -> bool:
        """Compare the string form of the parsed value (not the raw value) with text."""
        return str(self) == text

    def _write(self, raw: Optional[str]) -> None:
        try:
            self.store.set_raw(self._key, raw)
        except StoreAccessError as e:
            logger.warning(f"Could not set property {self._key}: {e}")

    def _parse_or_none(self, raw: str) -> Optional[T]:
        try:
            return self._parse(raw)
        except PropertyParseError as e:
            logger.warning(f"Property {self._key}: {e}")
            return None

    @abstractmethod
    def _parse(self, raw: str) -> T:
        """
        Convert a raw string value to this property's type.

        Raises:
            PropertyParseError: If the raw value is not valid for this type
        """
        pass

    def _to_raw(self, value: T) -> str:
        return str(value)
