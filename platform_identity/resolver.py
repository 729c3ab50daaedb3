"""
One-time resolution of the current OS, OS version and interpreter architecture.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

from .architecture import Architecture
from .operating_system import OS
from .os_version import OSVersion
from .properties.catalog import SystemProperties
from .properties.store import PropertyStore

logger = logging.getLogger(__name__)

# sys.platform reported by CPython builds for Android
ANDROID_PLATFORM_MARKER = "android"


@dataclass(frozen=True)
class PlatformIdentity:
    """Resolved identity of the platform the process runs on."""
    os: OS
    os_version: OSVersion
    architecture: Architecture

    @property
    def is_windows_or_windows_ce(self) -> bool:
        return self.os.is_windows_or_windows_ce()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "os": self.os.friendly_name,
            "os_version": None if self.os_version.is_unknown() else self.os_version.full_name,
            "os_version_number": None if self.os_version.is_unknown() else self.os_version.version_number,
            "architecture": self.architecture.friendly_name,
        }


def resolve_os(properties: SystemProperties) -> OS:
    """Resolve the OS from "os.name", promoting Linux to Android on Android builds."""
    os = OS.from_name(properties.os_name.get(""))

    if os is OS.LINUX and properties.sys_platform.string_equals(ANDROID_PLATFORM_MARKER):
        return OS.ANDROID

    return os


def resolve_os_version(os: OS, properties: SystemProperties) -> OSVersion:
    """Resolve the OS version from "os.name" or "os.version", depending on where the OS puts it."""
    if os.version_number_in_os_name:
        return os.get_version_by_name(properties.os_name.get(""))
    return os.get_version_by_version_number(properties.os_version.get(""))


def resolve_architecture(properties: SystemProperties) -> Architecture:
    """Resolve the interpreter architecture from its data model, falling back to "os.arch"."""
    data_model = properties.arch_data_model if properties.arch_data_model.has_value() \
        else properties.vm_bit_mode

    if data_model.value_equals(32):
        return Architecture.THIRTY_TWO_BIT
    if data_model.value_equals(64):
        return Architecture.SIXTY_FOUR_BIT

    return Architecture.from_name(properties.os_arch.get(""))


def resolve_platform(store: Optional[PropertyStore] = None) -> PlatformIdentity:
    """
    Resolve the platform identity from raw properties.

    Args:
        store: Store holding the raw properties; the process default store if None

    Returns:
        Immutable PlatformIdentity
    """
    properties = SystemProperties(store)

    os = resolve_os(properties)
    identity = PlatformIdentity(
        os=os,
        os_version=resolve_os_version(os, properties),
        architecture=resolve_architecture(properties),
    )

    logger.debug(
        f"Resolved platform: os={identity.os.name}, version={identity.os_version}, "
        f"architecture={identity.architecture.name}"
    )
    return identity


@lru_cache(maxsize=None)
def current_platform() -> PlatformIdentity:
    """Return the identity of the running process, resolved on first call and never again."""
    return resolve_platform()
