from typing import Any


class InvalidConfigClassError(TypeError):
    pass


class ConfiggenError(Exception):
    """Base class for configuration initialization failures.

    Two errors compare equal when they are of the same kind; the wrapped
    cause and the message are ignored.
    """

    default_message = "Configuration initialization failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def source(self) -> BaseException | None:
        return self.__cause__

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ConfiggenError):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class ConfigDirectoryAlreadyExistsError(ConfiggenError):
    default_message = "Configuration directory already exists"


class ConfigDirectoryCreationFailedError(ConfiggenError):
    default_message = "Configuration directory creation failed"


class ConfigFileAlreadyExistsError(ConfiggenError):
    default_message = "Configuration file already exists"


class UnsupportedFormatError(ConfiggenError):
    default_message = "Unhandled serialization format"


class SerializationFailedError(ConfiggenError):
    default_message = "Serialization of the default configuration failed"


class WritingFailedError(ConfiggenError):
    default_message = "Writing failed"
