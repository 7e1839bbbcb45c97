"""Configuration models and loaders for jsonfiles."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import (
    DEFAULT_APP_NAME,
    DEFAULT_DIRECTORY_NAME,
    BundleConfig,
    FacadeConfig,
    JsonFilesConfig,
    LoggingConfig,
    StorageConfig,
)

__all__ = [
    "BundleConfig",
    "ConfigError",
    "DEFAULT_APP_NAME",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DIRECTORY_NAME",
    "FacadeConfig",
    "JsonFilesConfig",
    "LoggingConfig",
    "StorageConfig",
    "dump_example_config",
    "load_config",
]
