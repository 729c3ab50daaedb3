"""Shared fixtures for the platform_identity test suite."""

import logging

import pytest

from platform_identity.exceptions import StoreAccessError
from platform_identity.properties.store import DictPropertyStore


class DenyingPropertyStore(DictPropertyStore):
    """Store that refuses every read and write."""

    def get_raw(self, key):
        raise StoreAccessError("denied for test", key=key)

    def set_raw(self, key, value):
        raise StoreAccessError("denied for test", key=key)


@pytest.fixture
def store():
    return DictPropertyStore()


@pytest.fixture
def denying_store():
    return DenyingPropertyStore()


@pytest.fixture
def linux_properties():
    """Factory for raw properties of a 64-bit Linux host, with per-test overrides (None removes a key)."""
    def build(**overrides):
        properties = {
            "os.name": "Linux",
            "os.version": "6.1.0-18-amd64",
            "os.arch": "x86_64",
            "arch.data.model": "64",
            "sys.platform": "linux",
        }
        properties.update({key.replace("_", "."): value for key, value in overrides.items()})
        return {key: value for key, value in properties.items() if value is not None}
    return build


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() calls so caplog sees warnings in every test."""
    yield
    package_logger = logging.getLogger("platform_identity")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
