from typing import Any

import rtoml

from .config_format import ConfigFormat


class TOMLFormat(ConfigFormat):
    """Encode and decode TOML configuration files."""

    extension = ".toml"

    def __init__(self, none_value: str | None = None) -> None:
        """
        Args:
            none_value: TOML has no null, so `None` entries are left out of
                the file by default. A string here writes them as that string
                instead, and reads it back as `None`, which makes real string
                values equal to it unreadable.
        """
        self.none_value = none_value

    def dumps(self, data: dict[str, Any]) -> str:
        return rtoml.dumps(data, pretty=True, none_value=self.none_value)

    def loads(self, text: str) -> dict[str, Any]:
        return rtoml.loads(text, none_value=self.none_value)
