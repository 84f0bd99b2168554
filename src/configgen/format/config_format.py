from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigFormat(Protocol):
    extension: str

    def dumps(self, data: dict[str, Any]) -> str: ...

    def loads(self, text: str) -> dict[str, Any]: ...
