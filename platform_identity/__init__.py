"""
Platform Identity

Resolves vendor-specific OS name, OS version and CPU architecture strings
into canonical catalog values, on top of a small typed-property layer over
raw string key/value stores.
"""

__version__ = "0.1.0"

from .architecture import Architecture
from .exceptions import (
    ConfigurationError,
    InvalidInputError,
    PlatformIdentityError,
    PropertyParseError,
    StoreAccessError,
    UnsupportedOperationError,
)
from .operating_system import OS
from .os_version import MacOSVersion, OSVersion, WindowsVersion
from .resolver import PlatformIdentity, current_platform, resolve_platform

__all__ = [
    '__version__',

    # Catalogs
    'Architecture',
    'OS',
    'OSVersion',
    'MacOSVersion',
    'WindowsVersion',

    # Resolution
    'PlatformIdentity',
    'resolve_platform',
    'current_platform',

    # Errors
    'PlatformIdentityError',
    'InvalidInputError',
    'UnsupportedOperationError',
    'PropertyParseError',
    'StoreAccessError',
    'ConfigurationError',
]
