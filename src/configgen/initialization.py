import logging
from os import PathLike
from pathlib import Path

from .decorator import is_default_config
from .enums import SerializationFormat
from .exceptions import (
    ConfigDirectoryAlreadyExistsError,
    ConfigDirectoryCreationFailedError,
    ConfigFileAlreadyExistsError,
    InvalidConfigClassError,
    SerializationFailedError,
    WritingFailedError,
)
from .registry import BackendRegistry, backends
from .serialization import to_config_data
from .types import DefaultConfig

logger = logging.getLogger(__name__)


def create_config_dir(dir_to_create: PathLike[str] | str) -> None:
    """Create the configuration directory at ``dir_to_create``.

    Parent directories must already exist.

    Raises:
        ConfigDirectoryAlreadyExistsError: something already exists at the path.
        ConfigDirectoryCreationFailedError: the filesystem refused the creation.
    """

    path = Path(dir_to_create)
    if path.exists():
        logger.debug("Config directory %s already exists", path)
        raise ConfigDirectoryAlreadyExistsError(
            f"Config directory already exists: {path}"
        ) from FileExistsError(path)

    try:
        path.mkdir()
    except FileExistsError as e:
        raise ConfigDirectoryAlreadyExistsError(
            f"Config directory already exists: {path}"
        ) from e
    except OSError as e:
        raise ConfigDirectoryCreationFailedError(
            f"Could not create config directory {path}: {e}"
        ) from e

    logger.debug("Created config directory %s", path)


def initialize_config_file(
    config: DefaultConfig,
    config_file_path: PathLike[str] | str,
    format: SerializationFormat,
    *,
    registry: BackendRegistry | None = None,
) -> None:
    """Serialize ``config`` and write it to a new file at ``config_file_path``.

    Args:
        config: the default configuration to write.
        config_file_path: destination file, which must not exist yet.
        format: serialization format to write the file in.
        registry: backends to pick from, defaults to the global one.

    Raises:
        InvalidConfigClassError: ``config`` provides no ``default()``.
        ConfigFileAlreadyExistsError: something already exists at the path.
        UnsupportedFormatError: no backend is registered for ``format``.
        SerializationFailedError: the backend could not encode ``config``.
        WritingFailedError: creating, writing or flushing the file failed.
    """

    if not is_default_config(config):
        raise InvalidConfigClassError(
            f"{type(config).__name__} does not provide a default() classmethod"
        )

    path = Path(config_file_path)
    if path.exists():
        logger.debug("Config file %s already exists, leaving it untouched", path)
        raise ConfigFileAlreadyExistsError(
            f"File already exists: {path}"
        ) from FileExistsError(path)

    backend = (registry if registry is not None else backends).lookup(format)

    try:
        data = backend.dumps(to_config_data(config))
    except Exception as e:
        raise SerializationFailedError(
            f"Could not serialize {type(config).__name__} as {format.name}: {e}"
        ) from e

    try:
        file = path.open("x", encoding="utf-8")
    except FileExistsError as e:
        raise ConfigFileAlreadyExistsError(f"File already exists: {path}") from e
    except OSError as e:
        raise WritingFailedError(f"Could not create {path}: {e}") from e

    try:
        with file:
            file.write(data)
            file.flush()
    except OSError as e:
        raise WritingFailedError(f"Could not write {path}: {e}") from e

    logger.debug("Wrote default %s configuration to %s", format.name, path)
