"""
Operating system catalog and OS/version name resolution.
"""

import logging
from enum import Enum
from typing import Callable, List, Tuple

from .exceptions import InvalidInputError
from .os_version import MacOSVersion, OSVersion, WindowsVersion

logger = logging.getLogger(__name__)


class OS(Enum):
    """
    Known operating systems.

    Each member carries its display name, the lowercase aliases its raw OS
    name may start with, its known versions, and whether the raw OS name
    (rather than the raw OS version) carries the version number.
    """

    AIX = ("AIX", ())
    ANDROID = ("Android", ("android",))
    FREEBSD = ("FreeBSD", ())
    GNU_LINUX = ("GNU/Linux", ("gnu",))
    HP_UX = ("HP-UX", ())
    IBM_I = ("IBM i", ("os/400", "os/400®"))
    KFREEBSD = ("kFreeBSD", ("gnu/kfreebsd",))
    LINUX = ("Linux", ())
    MACOS = ("macOS", ("mac os x", "macos", "darwin"), MacOSVersion.versions())
    NETBSD = ("NetBSD", ())
    OPENBSD = ("OpenBSD", ())
    SOLARIS = ("Solaris", ("solaris", "sunos"))
    WINDOWS = ("Windows", (), WindowsVersion.versions(), True)
    WINDOWS_CE = ("Windows CE", ())
    Z_OS = ("Z/OS", ())
    UNKNOWN = ("Unknown", ())

    def __init__(self, friendly_name, known_names, versions=(), version_number_in_os_name=False):
        self.friendly_name = friendly_name
        self.known_names = tuple(n.lower() for n in known_names) or (friendly_name.lower(),)
        self.versions = tuple(versions)
        self.version_number_in_os_name = version_number_in_os_name

    def __str__(self) -> str:
        return self.friendly_name

    def is_windows_or_windows_ce(self) -> bool:
        return self in (OS.WINDOWS, OS.WINDOWS_CE)

    @classmethod
    def known_values(cls) -> List['OS']:
        """Return every OS other than UNKNOWN, in catalog order."""
        return [os for os in cls if os is not cls.UNKNOWN]

    def matches_name(self, normalized_name: str) -> bool:
        """Return True if a trimmed, lowercased OS name starts with one of this OS's aliases."""
        return any(normalized_name.startswith(alias) for alias in self.known_names)

    @classmethod
    def from_name(cls, os_name: str) -> 'OS':
        """
        Resolve a raw OS name such as "Windows 10" or "Linux".

        The name matches an OS when it starts with one of that OS's aliases,
        ignoring case and surrounding whitespace. OSes whose aliases extend
        another OS's alias ("windows ce" and "windows", "gnu/kfreebsd" and
        "gnu") are tested first; the rest in catalog order.

        Args:
            os_name: Raw OS name

        Returns:
            The matching OS, or OS.UNKNOWN

        Raises:
            InvalidInputError: If os_name is None or not a string
        """
        if not isinstance(os_name, str):
            raise InvalidInputError("OS name should be a string", argument="os_name")

        name_to_find = os_name.strip().lower()
        if not name_to_find:
            return cls.UNKNOWN

        for os in _MATCH_PRECEDENCE:
            if os.matches_name(name_to_find):
                return os

        for os in cls.known_values():
            if os.matches_name(name_to_find):
                return os

        return cls.UNKNOWN

    def get_version_by_name(self, name: str) -> OSVersion:
        """
        Find the version of this OS with the given full name, e.g. "Windows 10".

        Args:
            name: Full version name; case and surrounding whitespace are ignored

        Returns:
            The matching OSVersion, or OSVersion.unknown()

        Raises:
            InvalidInputError: If name is None or not a string
        """
        if not isinstance(name, str):
            raise InvalidInputError("version name should be a string", argument="name")

        name = name.strip()
        if not name or not self.versions:
            return OSVersion.unknown()

        return self._find_version(name, lambda version: version.full_name)

    def get_version_by_version_number(self, version_number: str) -> OSVersion:
        """
        Find the version of this OS with the given version number.

        An exact (case-insensitive) match is tried first. Failing that, the
        first version whose dot-separated parts agree with the input's on
        every part the shorter of the two has is returned, so "10.15.2"
        matches "10.15" and "10" matches the first "10.x" version.

        Args:
            version_number: Raw version number, e.g. "10.15.2"

        Returns:
            The matching OSVersion, or OSVersion.unknown()

        Raises:
            InvalidInputError: If version_number is None or not a string
        """
        if not isinstance(version_number, str):
            raise InvalidInputError("version number should be a string", argument="version_number")

        version_number = version_number.strip()
        if not version_number or not self.versions:
            return OSVersion.unknown()

        exact = self._find_version(version_number, lambda version: version.version_number)
        if not exact.is_unknown():
            return exact

        parts = version_number.split(".")
        for version in self.versions:
            if _parts_match(parts, version.version_number.split(".")):
                logger.debug(f"Matched {self.friendly_name} version {version_number!r} to {version} by prefix")
                return version

        return OSVersion.unknown()

    def _find_version(self, to_find: str, key: Callable[[OSVersion], str]) -> OSVersion:
        to_find = to_find.lower()
        for version in self.versions:
            if key(version).lower() == to_find:
                return version
        return OSVersion.unknown()


def _parts_match(parts1: List[str], parts2: List[str]) -> bool:
    return all(a.lower() == b.lower() for a, b in zip(parts1, parts2))


# Tested before the catalog order in OS.from_name
_MATCH_PRECEDENCE: Tuple[OS, ...] = (OS.WINDOWS_CE, OS.KFREEBSD)
