from os import PathLike
from pathlib import Path
from typing import Any

from .enums import SerializationFormat
from .registry import BackendRegistry, backends


def read_configuration(config_file_path: PathLike[str] | str) -> str:
    return Path(config_file_path).read_text(encoding="utf-8")


def load_configuration(
    config_file_path: PathLike[str] | str,
    format: SerializationFormat,
    *,
    registry: BackendRegistry | None = None,
) -> dict[str, Any]:
    """Decode a written configuration file with the backend for ``format``."""

    backend = (registry if registry is not None else backends).lookup(format)
    return backend.loads(read_configuration(config_file_path))
