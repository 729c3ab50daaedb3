"""
Operating system versions and the known macOS and Windows version catalogs.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple


@total_ordering
@dataclass(frozen=True, eq=False)
class OSVersion:
    """
    A named version of an operating system.

    Versions compare equal only to themselves. Ordering is by full name and
    exists for deterministic iteration, not to express which release is newer.
    """
    full_name: str
    version_number: str

    def __str__(self) -> str:
        return self.full_name

    def __lt__(self, other: 'OSVersion') -> bool:
        if not isinstance(other, OSVersion):
            return NotImplemented
        return self.full_name < other.full_name

    def is_unknown(self) -> bool:
        return self is _UNKNOWN

    @staticmethod
    def unknown() -> 'OSVersion':
        """Return the sentinel for a version that could not be resolved."""
        return _UNKNOWN


_UNKNOWN = OSVersion("Unknown", "Unknown")


def _mac(name: str, version_number: str) -> OSVersion:
    # Apple dropped the "Mac OS X" branding with 10.12 Sierra
    major, _, minor = version_number.partition(".")
    legacy = major == "10" and int(minor) <= 11
    return OSVersion(("Mac OS X " if legacy else "macOS ") + name, version_number)


class MacOSVersion:
    """Known macOS and Mac OS X versions."""

    MOUNTAIN_LION = _mac("Mountain Lion", "10.8")
    MAVERICKS = _mac("Mavericks", "10.9")
    YOSEMITE = _mac("Yosemite", "10.10")
    EL_CAPITAN = _mac("El Capitan", "10.11")
    SIERRA = _mac("Sierra", "10.12")
    HIGH_SIERRA = _mac("High Sierra", "10.13")
    MOJAVE = _mac("Mojave", "10.14")
    CATALINA = _mac("Catalina", "10.15")
    BIG_SUR = _mac("Big Sur", "11")
    MONTEREY = _mac("Monterey", "12")
    VENTURA = _mac("Ventura", "13")
    SONOMA = _mac("Sonoma", "14")
    SEQUOIA = _mac("Sequoia", "15")

    @classmethod
    def versions(cls) -> Tuple[OSVersion, ...]:
        return (
            cls.MOUNTAIN_LION,
            cls.MAVERICKS,
            cls.YOSEMITE,
            cls.EL_CAPITAN,
            cls.SIERRA,
            cls.HIGH_SIERRA,
            cls.MOJAVE,
            cls.CATALINA,
            cls.BIG_SUR,
            cls.MONTEREY,
            cls.VENTURA,
            cls.SONOMA,
            cls.SEQUOIA,
        )


def _windows(version_number: str) -> OSVersion:
    return OSVersion(f"Windows {version_number}", version_number)


class WindowsVersion:
    """Known Windows versions. The version number is what follows "Windows " in the OS name."""

    WINDOWS_VISTA = _windows("Vista")
    WINDOWS_7 = _windows("7")
    # Also covers Server 2008 R2, the server release of Windows 7
    WINDOWS_SERVER_2008 = _windows("Server 2008")
    WINDOWS_8 = _windows("8")
    WINDOWS_8_1 = _windows("8.1")
    WINDOWS_SERVER_2012 = _windows("Server 2012")
    WINDOWS_10 = _windows("10")
    WINDOWS_SERVER_2016 = _windows("Server 2016")
    WINDOWS_SERVER_2019 = _windows("Server 2019")
    WINDOWS_SERVER_2022 = _windows("Server 2022")
    WINDOWS_11 = _windows("11")

    @classmethod
    def versions(cls) -> Tuple[OSVersion, ...]:
        return (
            cls.WINDOWS_VISTA,
            cls.WINDOWS_7,
            cls.WINDOWS_SERVER_2008,
            cls.WINDOWS_8,
            cls.WINDOWS_8_1,
            cls.WINDOWS_SERVER_2012,
            cls.WINDOWS_10,
            cls.WINDOWS_SERVER_2016,
            cls.WINDOWS_SERVER_2019,
            cls.WINDOWS_SERVER_2022,
            cls.WINDOWS_11,
        )
