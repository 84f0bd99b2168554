from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, Self, TypeAlias, runtime_checkable

FieldSerializer: TypeAlias = Callable[[Any], Any]

ConfigData: TypeAlias = dict[str, Any]


@dataclass
class ConfigSpec:
    field_mappings: Mapping[str, str] = field(default_factory=dict)
    field_serializers: Mapping[str, FieldSerializer] = field(default_factory=dict)


@runtime_checkable
class DefaultConfig(Protocol):
    """A configuration type able to build its canonical default instance."""

    @classmethod
    def default(cls) -> Self: ...


@runtime_checkable
class ConfigClass(DefaultConfig, Protocol):
    __config__: ClassVar[ConfigSpec]
