"""
Scalar property types: strings, booleans, integers and filesystem paths.
"""

import logging
import os
import re
from enum import Enum
from pathlib import Path
from typing import Optional

from ..exceptions import InvalidInputError, PropertyParseError
from .base import SystemProperty
from .store import PropertyStore

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class StringProperty(SystemProperty[str]):
    """Property whose value is its raw string."""

    def _parse(self, raw: str) -> str:
        return raw


class BooleanProperty(SystemProperty[bool]):
    """
    Property holding "true" or "false" (any casing).

    Any other raw string reads as False and logs a warning instead of
    reading as having no value.
    """

    def _parse(self, raw: str) -> bool:
        lowered = raw.lower()
        if lowered not in ("true", "false"):
            logger.warning(f"Property {self.key}: not a valid boolean; assuming false: {raw!r}")
        return lowered == "true"

    def _to_raw(self, value: bool) -> str:
        return "true" if value else "false"


class IntProperty(SystemProperty[int]):
    """Base-10 signed 32-bit integer property."""

    MIN_VALUE = -2 ** 31
    MAX_VALUE = 2 ** 31 - 1
    type_name = "integer"

    def _parse(self, raw: str) -> int:
        if not _INTEGER_PATTERN.fullmatch(raw):
            raise PropertyParseError(f"Not a valid {self.type_name}", raw_value=raw)

        value = int(raw)
        if not self.MIN_VALUE <= value <= self.MAX_VALUE:
            raise PropertyParseError(f"Out of range for {self.type_name}", raw_value=raw)
        return value


class LongProperty(IntProperty):
    """Base-10 signed 64-bit integer property."""

    MIN_VALUE = -2 ** 63
    MAX_VALUE = 2 ** 63 - 1
    type_name = "long"


class PathBehavior(Enum):
    """Actions a PathProperty performs each time its value is read."""
    DO_NOTHING = "do_nothing"
    ENSURE_FILE_EXISTS = "ensure_file_exists"
    ENSURE_DIRECTORY_EXISTS = "ensure_directory_exists"


def to_absolute_path(raw: str) -> Path:
    """
    Convert a raw path string to an absolute, normalized Path.

    Symbolic links are not resolved.

    Raises:
        PropertyParseError: If the string is not a valid path
    """
    if "\x00" in raw:
        raise PropertyParseError("Invalid path", raw_value=raw)
    return Path(os.path.normpath(os.path.abspath(raw)))


class PathProperty(SystemProperty[Path]):
    """Filesystem path property, optionally creating the file or directory on read."""

    def __init__(self, key: str, behavior: PathBehavior = PathBehavior.DO_NOTHING,
                 editable: bool = False, store: Optional[PropertyStore] = None):
        super().__init__(key, editable, store)
        if not isinstance(behavior, PathBehavior):
            raise InvalidInputError(f"should be a PathBehavior, got {behavior!r}", argument="behavior")
        self.behavior = behavior

    def __repr__(self) -> str:
        return f"PathProperty(key={self.key!r}, behavior={self.behavior.name}, editable={self.editable})"

    def _parse(self, raw: str) -> Path:
        path = to_absolute_path(raw)

        try:
            if self.behavior is PathBehavior.ENSURE_FILE_EXISTS and not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch(exist_ok=True)
                logger.debug(f"Created file for property {self.key}: {path}")
            elif self.behavior is PathBehavior.ENSURE_DIRECTORY_EXISTS and not path.exists():
                path.mkdir(parents=True, exist_ok=True)
                logger.debug(f"Created directory for property {self.key}: {path}")
        except OSError as e:
            raise PropertyParseError(f"Failed to create ({e})", raw_value=raw) from e

        return path
