from enum import Enum


class SerializationFormat(Enum):
    """Output formats a default configuration can be written in."""

    JSON = "json"
    JSON5 = "json5"
    TOML = "toml"
    RON = "ron"

    @property
    def extension(self) -> str:
        return f".{self.value}"
