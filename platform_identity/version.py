"""
Version information for platform_identity.
"""

from . import __version__


def get_version() -> str:
    """
    Get the current version of platform_identity.

    Returns:
        Version string (e.g., "0.1.0")
    """
    return __version__


def get_full_name_with_version() -> str:
    """Get the tool name with version, e.g. "platform-identity v0.1.0"."""
    return f"platform-identity v{get_version()}"
