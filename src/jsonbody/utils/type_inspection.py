"""Helpers for inspecting type annotations."""

import types
from typing import Any, Union, get_args, get_origin

NONE_TYPE = type(None)


def raw_class(tp: Any) -> type | None:
    """Return the runtime class behind an annotation.

    ``list[int]`` gives ``list``, ``Mapping[str, int]`` gives
    ``collections.abc.Mapping`` and plain classes are returned as-is.
    Annotations without a class (``Any``, unions, type variables)
    give None.
    """
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp
    if is_union(tp):
        return None
    origin = get_origin(tp)
    if isinstance(origin, type):
        return origin
    return None


def is_union(tp: Any) -> bool:
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def strip_optional(tp: Any) -> Any:
    """Drop ``None`` from ``X | None``; other annotations pass through."""
    if not is_union(tp):
        return tp
    args = [arg for arg in get_args(tp) if arg is not NONE_TYPE]
    if len(args) == 1:
        return args[0]
    return Union[tuple(args)]


def type_name(tp: Any) -> str:
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__qualname__
    return repr(tp)
