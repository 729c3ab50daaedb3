"""
Raw string key/value stores that typed properties read from and write to.
"""

import locale
import logging
import os
import platform
import re
import struct
import sys
import tempfile
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional

from ..exceptions import StoreAccessError

logger = logging.getLogger(__name__)


class PropertyStore(ABC):
    """Abstract base class for raw property stores."""

    @abstractmethod
    def get_raw(self, key: str) -> Optional[str]:
        """
        Get the raw string value stored under a key.

        Args:
            key: Property key, e.g. "os.name"

        Returns:
            The raw value, or None if the key is absent

        Raises:
            StoreAccessError: If the store refuses to read the key
        """
        pass

    @abstractmethod
    def set_raw(self, key: str, value: Optional[str]) -> Optional[str]:
        """
        Store a raw string value under a key.

        Args:
            key: Property key
            value: New raw value, or None to remove the key

        Returns:
            The previous raw value, or None if the key was absent

        Raises:
            StoreAccessError: If the store refuses to write the key
        """
        pass


class DictPropertyStore(PropertyStore):
    """In-memory property store."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None, read_only_keys: Iterable[str] = ()):
        self._values: Dict[str, str] = dict(initial or {})
        self._read_only_keys = frozenset(read_only_keys)

    def get_raw(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set_raw(self, key: str, value: Optional[str]) -> Optional[str]:
        if key in self._read_only_keys:
            raise StoreAccessError("key is read-only", key=key)

        if value is None:
            return self._values.pop(key, None)

        previous = self._values.get(key)
        self._values[key] = value
        return previous

    def keys(self) -> List[str]:
        """Return the stored keys in sorted order."""
        return sorted(self._values)

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the stored values."""
        return dict(self._values)


class EnvironmentPropertyStore(PropertyStore):
    """Property store backed by process environment variables."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def env_key(self, key: str) -> str:
        """Map a dotted property key to its environment variable name ("os.name" -> "OS_NAME")."""
        return f"{self.prefix}{key.replace('.', '_').replace('-', '_').upper()}"

    def get_raw(self, key: str) -> Optional[str]:
        try:
            return os.environ.get(self.env_key(key))
        except (OSError, ValueError) as e:
            raise StoreAccessError(str(e), key=key) from e

    def set_raw(self, key: str, value: Optional[str]) -> Optional[str]:
        env_key = self.env_key(key)
        try:
            previous = os.environ.get(env_key)
            if value is None:
                os.environ.pop(env_key, None)
            else:
                os.environ[env_key] = value
        except (OSError, ValueError) as e:
            raise StoreAccessError(str(e), key=key) from e
        return previous


class ChainPropertyStore(PropertyStore):
    """Reads from the first store holding a key; writes go to the first store."""

    def __init__(self, stores: Iterable[PropertyStore]):
        self.stores: List[PropertyStore] = list(stores)
        if not self.stores:
            raise ValueError("ChainPropertyStore needs at least one store")

    def get_raw(self, key: str) -> Optional[str]:
        for store in self.stores:
            value = store.get_raw(key)
            if value is not None:
                return value
        return None

    def set_raw(self, key: str, value: Optional[str]) -> Optional[str]:
        previous = self.get_raw(key)
        self.stores[0].set_raw(key, value)
        return previous


class RuntimePropertyStore(DictPropertyStore):
    """
    In-memory store seeded with a snapshot of the running Python interpreter.

    The snapshot is taken once at construction. Overrides replace or add keys,
    and a None override removes a key from the snapshot.
    """

    def __init__(self, overrides: Optional[Mapping[str, Optional[str]]] = None):
        super().__init__(collect_runtime_properties())
        for key, value in (overrides or {}).items():
            self.set_raw(key, value)


_WINDOWS_SERVER_RELEASE = re.compile(r"(\d{4})Server(R2)?", re.IGNORECASE)


def _runtime_os_name() -> str:
    system = platform.system()
    if system == "Windows":
        release = platform.release()
        # Server releases are reported as e.g. "2022Server" or "2012ServerR2"
        server = _WINDOWS_SERVER_RELEASE.fullmatch(release)
        if server:
            year, r2 = server.groups()
            return f"Windows Server {year}" + (" R2" if r2 else "")
        return f"Windows {release}".strip()
    if system == "Darwin":
        return "Mac OS X"
    return system


def _runtime_os_version() -> str:
    system = platform.system()
    if system == "Darwin":
        return platform.mac_ver()[0] or platform.release()
    if system == "Windows":
        return platform.version()
    return platform.release()


def collect_runtime_properties() -> Dict[str, str]:
    """
    Take a snapshot of the interpreter's platform properties.

    Returns:
        Dictionary of property key to raw string value. Keys whose value
        cannot be determined are left out.
    """
    properties = {
        'os.name': _runtime_os_name(),
        'os.version': _runtime_os_version(),
        'os.arch': platform.machine().lower(),
        'arch.data.model': str(struct.calcsize("P") * 8),
        'vm.name': platform.python_implementation(),
        'vm.version': platform.python_version(),
        'sys.platform': sys.platform,
        'python.home': sys.prefix,
        'python.executable': sys.executable,
        'python.path': os.pathsep.join(sys.path),
        'user.home': os.path.expanduser("~"),
        'tmp.dir': tempfile.gettempdir(),
        'path.separator': os.pathsep,
        'file.separator': os.sep,
        'line.separator': os.linesep,
        'file.encoding': locale.getpreferredencoding(False),
        'cpu.endian': sys.byteorder,
    }

    user_name = os.environ.get("USER") or os.environ.get("USERNAME")
    if user_name:
        properties['user.name'] = user_name

    try:
        properties['user.dir'] = os.getcwd()
    except OSError as e:
        logger.warning(f"Could not determine current working directory: {e}")

    return {key: value for key, value in properties.items() if value}


@lru_cache(maxsize=None)
def default_store() -> PropertyStore:
    """Return the process-wide runtime store, created on first use."""
    logger.debug("Creating default runtime property store")
    return RuntimePropertyStore()
