from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import PurePath
from typing import Any

from .types import ConfigData, FieldSerializer

_SCALARS = (str, int, float, bool, type(None))


def to_config_data(value: Any) -> ConfigData:
    """Convert a configuration value into plain data a backend can encode.

    Raises:
        TypeError: the value, or one of its members, has no plain-data form.
    """

    data = _to_plain(value)
    if not isinstance(data, dict):
        raise TypeError(
            f"A configuration must convert to a mapping, got {type(data).__name__}"
        )
    return data


def _to_plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return _to_plain(value.value)
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, PurePath):
        return str(value)
    if is_dataclass(value) and not isinstance(value, type):
        return _dataclass_fields(value)
    if isinstance(value, Mapping):
        return {_key(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_plain(v) for v in value]

    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


def _dataclass_fields(value: Any) -> dict[str, Any]:
    field_mappings: Mapping[str, str] = {}
    field_serializers: Mapping[str, FieldSerializer] = {}
    spec = getattr(type(value), "__config__", None)
    if spec is not None:
        field_mappings = spec.field_mappings
        field_serializers = spec.field_serializers

    class_data: dict[str, Any] = {}
    for field in fields(value):
        key = field_mappings.get(field.name, field.name)
        field_value = getattr(value, field.name)
        if field.name in field_serializers:
            field_value = field_serializers[field.name](field_value)
        class_data[key] = _to_plain(field_value)

    return class_data


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    if not isinstance(key, str):
        raise TypeError(f"Configuration keys must be strings, got {type(key).__name__}")
    return key
