"""
Properties whose raw value is a separator-delimited list.
"""

import logging
import os
from abc import abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, TypeVar

from ..exceptions import InvalidInputError, PropertyParseError
from .base import SystemProperty
from .store import PropertyStore
from .types import to_absolute_path

logger = logging.getLogger(__name__)

E = TypeVar('E')


class ListProperty(SystemProperty[List[E]]):
    """
    A property whose raw value holds several elements joined by a separator.

    Splitting keeps empty fields, so joining a list of elements that do not
    contain the separator and splitting it again gives back the same list.
    The one exception is [""], which is stored like the empty list and
    reads back as [].
    Elements that cannot be converted are skipped with a warning.
    """

    def __init__(self, key: str, separator: str, editable: bool = False,
                 store: Optional[PropertyStore] = None):
        super().__init__(key, editable, store)
        if not isinstance(separator, str) or not separator:
            raise InvalidInputError("separator should be a non-empty string", argument="separator")
        self._separator = separator

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, separator={self._separator!r}, editable={self.editable})"

    @property
    def separator(self) -> str:
        return self._separator

    def get_raw_list(self) -> Optional[List[str]]:
        """Return the raw value split on the separator, or None if absent."""
        raw = self.get_raw()
        return None if raw is None else self._split(raw)

    def force_set_array(self, elements: Optional[Iterable[str]]) -> Optional[List[str]]:
        """
        Join raw elements with the separator and force-set the result.

        Args:
            elements: Raw string elements, or None to remove the raw value

        Returns:
            The previous raw list
        """
        previous = self.get_raw_list()
        self.force_set(None if elements is None else self._separator.join(elements))
        return previous

    def _parse(self, raw: str) -> List[E]:
        converted = []
        for element in self._split(raw):
            try:
                converted.append(self._convert_element(element))
            except PropertyParseError as e:
                logger.warning(f"Property {self.key}: skipping element: {e}")
        return converted

    def _split(self, raw: str) -> List[str]:
        # An empty raw value is the empty list
        return raw.split(self._separator) if raw else []

    def _to_raw(self, value: List[E]) -> str:
        return self._separator.join(self._element_to_raw(element) for element in value)

    @abstractmethod
    def _convert_element(self, element: str) -> E:
        """
        Convert one raw element.

        Raises:
            PropertyParseError: If the element should be skipped
        """
        pass

    def _element_to_raw(self, element: E) -> str:
        return str(element)


class StringListProperty(ListProperty[str]):
    """List of plain strings."""

    def _convert_element(self, element: str) -> str:
        return element


class PathListProperty(ListProperty[Path]):
    """List of absolute, normalized paths, separated by os.pathsep by default."""

    def __init__(self, key: str, separator: str = os.pathsep, editable: bool = False,
                 store: Optional[PropertyStore] = None):
        super().__init__(key, separator, editable, store)

    def _convert_element(self, element: str) -> Path:
        return to_absolute_path(element)
