from __future__ import annotations

import json
from typing import Any

from .config_format import ConfigFormat


class JSONFormat(ConfigFormat):
    """Encode and decode JSON configuration files."""

    extension = ".json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def dumps(self, data: dict[str, Any]) -> str:
        return json.dumps(data, indent=self.indent, allow_nan=False)

    def loads(self, text: str) -> dict[str, Any]:
        return json.loads(text)
