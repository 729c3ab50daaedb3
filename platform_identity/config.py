"""
Configuration management for platform identity resolution.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .logging_config import get_logger
from .properties.store import (
    ChainPropertyStore,
    DictPropertyStore,
    EnvironmentPropertyStore,
    PropertyStore,
    RuntimePropertyStore,
)

logger = get_logger('config')


@dataclass
class StoreConfig:
    """Configuration for the raw property store."""
    include_runtime: bool = True
    environment_prefix: Optional[str] = None  # None disables environment lookups
    overrides: Dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Config object with loaded settings

    Raises:
        ConfigurationError: If configuration file is invalid
    """
    config = Config()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

        if config_data:
            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")
            _update_config_from_dict(config, config_data)
            logger.info(f"Loaded configuration from {config_path}")

    elif config_path:
        logger.warning(f"Configuration file not found: {config_path}")

    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
    return section


def _raw_string(value: Any) -> Optional[str]:
    # YAML turns true/64 into bool/int; properties store them as raw strings
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigurationError(f"Property override values must be scalars, got {type(value).__name__}")


def _update_config_from_dict(config: Config, config_data: Dict[str, Any]) -> None:
    """
    Update configuration object from dictionary data.

    Args:
        config: Config object to update
        config_data: Dictionary with configuration data
    """
    store_data = _section(config_data, 'store')
    if 'include_runtime' in store_data:
        config.store.include_runtime = bool(store_data['include_runtime'])
    if 'environment_prefix' in store_data:
        prefix = store_data['environment_prefix']
        config.store.environment_prefix = None if prefix is None else str(prefix)
    if 'overrides' in store_data:
        overrides = store_data['overrides'] or {}
        if not isinstance(overrides, dict):
            raise ConfigurationError("store.overrides must be a mapping of property key to value")
        config.store.overrides = {
            str(key): _raw_string(value) for key, value in overrides.items()
        }

    logging_data = _section(config_data, 'logging')
    if 'level' in logging_data:
        config.logging.level = str(logging_data['level'])
    if 'log_file' in logging_data:
        config.logging.log_file = logging_data['log_file']
    if 'verbose' in logging_data:
        config.logging.verbose = bool(logging_data['verbose'])


def build_store(config: Config) -> PropertyStore:
    """
    Build the property store described by a configuration.

    Overrides take precedence over environment variables, which take
    precedence over the runtime snapshot. Writes go to the override layer.

    Args:
        config: Loaded configuration

    Returns:
        PropertyStore for typed properties and the platform resolver
    """
    overrides = {key: value for key, value in config.store.overrides.items() if value is not None}
    stores = [DictPropertyStore(overrides)]

    if config.store.environment_prefix is not None:
        stores.append(EnvironmentPropertyStore(config.store.environment_prefix))
    if config.store.include_runtime:
        stores.append(RuntimePropertyStore())

    logger.debug(f"Built property store with {len(stores)} layer(s)")
    return ChainPropertyStore(stores)


def get_default_config_path() -> Optional[str]:
    """
    Get the default configuration file path.

    Returns:
        Path to default config file if it exists, None otherwise
    """
    possible_paths = [
        'platform_identity.yaml',
        'platform_identity.yml',
        os.path.expanduser('~/.platform_identity.yaml'),
        os.path.expanduser('~/.platform_identity.yml'),
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return None
