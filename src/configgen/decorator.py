from collections.abc import Callable, Mapping
from dataclasses import is_dataclass
from typing import Any, TypeVar, cast, overload

from .types import ConfigClass, ConfigSpec, DefaultConfig, FieldSerializer

_T = TypeVar("_T")


def _default(cls: type[_T]) -> _T:  # noqa: UP049
    return cls()


def _field_names(cls: type[Any]) -> set[str]:
    names = set(vars(cls).get("__annotations__", {}))
    if is_dataclass(cls):
        names.update(getattr(cls, "__dataclass_fields__"))
    return names


def _apply_config(  # noqa: UP049
    cls: type[_T],
    *,
    field_name_mappings: Mapping[str, str] | None,
    field_serializers: Mapping[str, FieldSerializer] | None,
) -> type[_T]:
    if "default" in _field_names(cls):
        raise ValueError(
            f"{cls.__name__} declares a field named 'default', which would hide "
            "the default() classmethod; map another attribute name to the "
            "'default' key with field_name_mappings instead"
        )

    cast(type[ConfigClass], cls).__config__ = ConfigSpec(
        field_mappings=field_name_mappings or {},
        field_serializers=field_serializers or {},
    )

    if not callable(getattr(cls, "default", None)):
        setattr(cls, "default", classmethod(_default))

    return cls


@overload
def default_config(cls: type[_T]) -> type[_T]: ...  # noqa: UP049


@overload
def default_config(  # noqa: UP049
    *,
    field_name_mappings: Mapping[str, str] | None = None,
    field_serializers: Mapping[str, FieldSerializer] | None = None,
) -> Callable[[type[_T]], type[_T]]: ...


def default_config(  # noqa: UP049
    cls: type[_T] | None = None,
    *,
    field_name_mappings: Mapping[str, str] | None = None,
    field_serializers: Mapping[str, FieldSerializer] | None = None,
) -> type[_T] | Callable[[type[_T]], type[_T]]:
    """Mark a class as a default configuration.

    The class gets a ``default()`` classmethod returning ``cls()`` unless it
    already defines one.

    Args:
        field_name_mappings: attribute name -> key written to the file.
        field_serializers: attribute name -> callable converting its value.

    Raises:
        ValueError: the class declares a field named ``default``.
    """

    if cls is not None:
        return _apply_config(
            cls,
            field_name_mappings=field_name_mappings,
            field_serializers=field_serializers,
        )

    def decorator(inner_cls: type[_T]) -> type[_T]:
        return _apply_config(
            inner_cls,
            field_name_mappings=field_name_mappings,
            field_serializers=field_serializers,
        )

    return decorator


def is_default_config(obj: Any) -> bool:
    default = getattr(obj, "default", None)
    return isinstance(obj, DefaultConfig) and callable(default)
