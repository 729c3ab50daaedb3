"""
Architecture catalog: 32-bit, 64-bit and unknown bitness classes.
"""

import re
from enum import Enum

from .exceptions import InvalidInputError

_SEARCH_STRIP = re.compile(r'[\s\-_]')


def _search_name(name: str) -> str:
    return _SEARCH_STRIP.sub('', name.lower())


class Architecture(Enum):
    """Bitness class of a CPU architecture, with the architecture names that belong to it."""

    THIRTY_TWO_BIT = ("32-bit", (
        "x86_32", "x86-32", "x86", "i386", "i486", "i586", "i686", "ia32", "x32",
        "sparc", "sparc32",
        "arm", "arm32", "armv6l", "armv7l",
        "ppc", "ppc32", "powerpc",
        "s390",
        "riscv32",
    ))
    SIXTY_FOUR_BIT = ("64-bit", (
        "x86_64", "x86-64", "amd64", "ia32e", "em64t", "x64",
        "ia64", "itanium64",
        "sparcv9", "sparc64",
        "aarch64", "arm64",
        "powerpc64", "ppc64", "ppc64le",
        "s390x",
        "riscv64",
    ))
    UNKNOWN = ("Unknown", ())

    def __init__(self, friendly_name, architecture_names):
        self.friendly_name = friendly_name
        self.architecture_names = frozenset(architecture_names)

        # UNKNOWN has no aliases and must not match its own friendly name
        if architecture_names:
            self.search_names = frozenset(
                [_search_name(friendly_name)] + [_search_name(name) for name in architecture_names]
            )
        else:
            self.search_names = frozenset()

    def __str__(self) -> str:
        return self.friendly_name

    @classmethod
    def from_name(cls, architecture_name: str) -> 'Architecture':
        """
        Resolve an architecture name such as "x86-64" or "32-bit".

        Casing, whitespace, hyphens and underscores are ignored. Matching is
        exact set membership, never prefix or fuzzy matching.

        Args:
            architecture_name: Raw architecture name

        Returns:
            The matching Architecture, or Architecture.UNKNOWN

        Raises:
            InvalidInputError: If architecture_name is None or not a string
        """
        if not isinstance(architecture_name, str):
            raise InvalidInputError("architecture name should be a string", argument="architecture_name")

        search_name = _search_name(architecture_name)
        for architecture in cls:
            if search_name in architecture.search_names:
                return architecture

        return cls.UNKNOWN
