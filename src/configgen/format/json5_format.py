from typing import Any

import json5

from .config_format import ConfigFormat


class JSON5Format(ConfigFormat):
    """Encode and decode JSON5 configuration files."""

    extension = ".json5"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def dumps(self, data: dict[str, Any]) -> str:
        return json5.dumps(data, indent=self.indent, allow_nan=False)

    def loads(self, text: str) -> dict[str, Any]:
        return json5.loads(text)
