"""
Table of the well-known runtime property keys, bound to a property store.
"""

from typing import Dict, Optional

from .base import SystemProperty
from .lists import PathListProperty, StringListProperty
from .store import PropertyStore
from .types import BooleanProperty, IntProperty, PathBehavior, PathProperty, StringProperty


class SystemProperties:
    """Typed views of the runtime property keys of one store."""

    def __init__(self, store: Optional[PropertyStore] = None):
        self.store = store

        # Operating system
        self.os_name = StringProperty("os.name", store=store)
        self.os_version = StringProperty("os.version", store=store)
        self.os_arch = StringProperty("os.arch", store=store)
        self.sys_platform = StringProperty("sys.platform", store=store)

        # Interpreter
        self.vm_name = StringProperty("vm.name", store=store)
        self.vm_version = StringProperty("vm.version", store=store)
        self.arch_data_model = IntProperty("arch.data.model", store=store)
        self.vm_bit_mode = IntProperty("vm.bit.mode", store=store)
        self.cpu_endian = StringProperty("cpu.endian", store=store)
        self.cpu_isa_list = StringListProperty("cpu.isalist", " ", store=store)
        self.python_home = PathProperty("python.home", store=store)
        self.python_executable = PathProperty("python.executable", store=store)
        self.python_path = PathListProperty("python.path", store=store)

        # User
        self.user_name = StringProperty("user.name", store=store)
        self.user_home = PathProperty("user.home", store=store)
        self.user_dir = PathProperty("user.dir", store=store)

        # Filesystem and text
        self.temp_directory = PathProperty(
            "tmp.dir", PathBehavior.ENSURE_DIRECTORY_EXISTS, editable=True, store=store
        )
        self.path_separator = StringProperty("path.separator", store=store)
        self.file_separator = StringProperty("file.separator", store=store)
        self.line_separator = StringProperty("line.separator", store=store)
        self.file_encoding = StringProperty("file.encoding", store=store)
        self.headless = BooleanProperty("headless", editable=True, store=store)

    def all(self) -> Dict[str, SystemProperty]:
        """Return every property of this table keyed by property key."""
        return {
            value.key: value
            for value in vars(self).values()
            if isinstance(value, SystemProperty)
        }
