import logging
from importlib.util import find_spec

from .enums import SerializationFormat
from .exceptions import UnsupportedFormatError
from .format.config_format import ConfigFormat
from .format.json_format import JSONFormat
from .format.toml_format import TOMLFormat

logger = logging.getLogger(__name__)


class BackendRegistry(dict[SerializationFormat, ConfigFormat]):
    """Serialization backends available for each format tag."""

    def register(self, format: SerializationFormat, backend: ConfigFormat) -> None:
        if not isinstance(format, SerializationFormat):
            raise TypeError(f"Unknown serialization format: {format!r}")
        logger.debug("Registering %s backend %s", format.name, type(backend).__name__)
        self[format] = backend

    def unregister(self, format: SerializationFormat) -> ConfigFormat | None:
        return self.pop(format, None)

    def lookup(self, format: SerializationFormat) -> ConfigFormat:
        if not isinstance(format, SerializationFormat):
            raise UnsupportedFormatError(f"Unknown serialization format: {format!r}")
        try:
            return self[format]
        except KeyError:
            raise UnsupportedFormatError(
                f"No backend registered for {format.name} "
                "(is the matching extra installed?)"
            ) from None

    def get_all_registered(self) -> list[SerializationFormat]:
        return list(self.keys())

    def is_registered(self, format: SerializationFormat) -> bool:
        return format in self


def default_registry() -> BackendRegistry:
    """Build a registry holding every backend whose library is installed."""

    registry = BackendRegistry()
    registry.register(SerializationFormat.JSON, JSONFormat())
    registry.register(SerializationFormat.TOML, TOMLFormat())

    if find_spec("json5") is not None:
        from .format.json5_format import JSON5Format

        registry.register(SerializationFormat.JSON5, JSON5Format())

    return registry


backends = default_registry()


def register_backend(format: SerializationFormat, backend: ConfigFormat) -> None:
    backends.register(format, backend)


def unregister_backend(format: SerializationFormat) -> ConfigFormat | None:
    return backends.unregister(format)
