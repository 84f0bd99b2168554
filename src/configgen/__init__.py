from .decorator import default_config, is_default_config
from .enums import SerializationFormat
from .exceptions import (
    ConfigDirectoryAlreadyExistsError,
    ConfigDirectoryCreationFailedError,
    ConfigFileAlreadyExistsError,
    ConfiggenError,
    InvalidConfigClassError,
    SerializationFailedError,
    UnsupportedFormatError,
    WritingFailedError,
)
from .initialization import create_config_dir, initialize_config_file
from .registry import (
    BackendRegistry,
    backends,
    default_registry,
    register_backend,
    unregister_backend,
)
from .types import ConfigSpec, DefaultConfig, FieldSerializer

__all__ = [
    "BackendRegistry",
    "ConfigDirectoryAlreadyExistsError",
    "ConfigDirectoryCreationFailedError",
    "ConfigFileAlreadyExistsError",
    "ConfigSpec",
    "ConfiggenError",
    "DefaultConfig",
    "FieldSerializer",
    "InvalidConfigClassError",
    "SerializationFailedError",
    "SerializationFormat",
    "UnsupportedFormatError",
    "WritingFailedError",
    "backends",
    "create_config_dir",
    "default_config",
    "default_registry",
    "initialize_config_file",
    "is_default_config",
    "register_backend",
    "unregister_backend",
]
