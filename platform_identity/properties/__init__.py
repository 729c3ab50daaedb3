"""
Typed properties over raw string key/value stores.
"""

from .base import SystemProperty
from .catalog import SystemProperties
from .lists import ListProperty, PathListProperty, StringListProperty
from .store import (
    ChainPropertyStore,
    DictPropertyStore,
    EnvironmentPropertyStore,
    PropertyStore,
    RuntimePropertyStore,
    default_store,
)
from .types import BooleanProperty, IntProperty, LongProperty, PathBehavior, PathProperty, StringProperty

__all__ = [
    # Stores
    'PropertyStore',
    'DictPropertyStore',
    'EnvironmentPropertyStore',
    'ChainPropertyStore',
    'RuntimePropertyStore',
    'default_store',

    # Property types
    'SystemProperty',
    'StringProperty',
    'BooleanProperty',
    'IntProperty',
    'LongProperty',
    'PathBehavior',
    'PathProperty',
    'ListProperty',
    'StringListProperty',
    'PathListProperty',

    # Key table
    'SystemProperties',
]
