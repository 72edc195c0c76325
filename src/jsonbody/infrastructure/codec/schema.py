"""Pydantic core schema generation for JsonCodec.

Pydantic does the validating and serializing. CodecSchema is attached
to every type the codec handles as ``Annotated[tp, CodecSchema]`` and
rewrites the generated core schema so that the codec settings (naming
policy, exclusion strategies, type adapters and date pattern) apply at
every nesting level, not only at the top.
"""

import math
import threading
from collections import abc
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import partial
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    Literal,
    Union,
    get_args,
    get_origin,
    is_typeddict,
)

from pydantic import BaseModel, GetCoreSchemaHandler, PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationUnexpectedValue, core_schema

from jsonbody.infrastructure.codec.binding import ClassBinding
from jsonbody.infrastructure.codec.naming import translate_name
from jsonbody.utils.type_inspection import NONE_TYPE, is_union

if TYPE_CHECKING:
    from jsonbody.infrastructure.codec.codec import JsonCodec

_RAW_BUFFERS = (bytes, bytearray, memoryview)

# Unparameterized containers get Any items so that every element is
# dispatched on its runtime type.
_BARE_CONTAINERS: dict[Any, Any] = {
    list: list[Any],
    dict: dict[Any, Any],
    tuple: tuple[Any, ...],
    set: set[Any],
    frozenset: frozenset[Any],
}

# Serialized as-is when found behind Any.
_PLAIN_SCALARS = (str, int, bool)


def _plain_serializer(function: Any, **kwargs: Any) -> core_schema.SerSchema:
    return core_schema.plain_serializer_function_ser_schema(function, info_arg=False, **kwargs)


def _identity(value: Any) -> Any:
    return value


def _to_none(value: Any) -> None:
    return None


def _reject_bool(data: Any) -> Any:
    if isinstance(data, bool):
        raise ValueError("Expected a number, got a boolean")
    return data


def _read_bool(data: Any) -> Any:
    if isinstance(data, str) and data.lower() in ("true", "false"):
        return data.lower() == "true"
    if not isinstance(data, bool):
        raise ValueError(f"Expected a boolean, got {type(data).__name__}")
    return data


def _finite_float(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{value} is not a valid JSON number")
    return value


def _decimal_number(value: Decimal) -> int | float:
    if not value.is_finite():
        raise ValueError(f"{value} is not a valid JSON number")
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _enum_by_name(cls: type[Enum], data: Any) -> Any:
    """Accept member names where the member values do not match."""
    if isinstance(data, str) and data in cls.__members__:
        try:
            cls(data)
        except ValueError:
            return cls[data]
    return data


def _parse_date(pattern: str, as_date: bool, data: Any) -> Any:
    if not isinstance(data, str):
        return data
    try:
        parsed = datetime.strptime(data, pattern)
    except ValueError:
        # Not in the pattern: left to the ISO-8601 parser.
        return data
    return parsed.date() if as_date else parsed


def _format_date(pattern: str, value: date) -> str:
    return value.strftime(pattern)


def _drop_null_values(value: abc.Mapping[Any, Any], handler: Any) -> Any:
    return handler({key: item for key, item in value.items() if item is not None})


def _reject_raw_buffer(cls: type, value: Any) -> Any:
    raise ValueError(f"Raw buffers of type {cls.__name__} are not supported")


def _reject_untyped(cls: type, data: Any) -> Any:
    raise ValueError(f"Cannot deserialize into {cls.__qualname__}: no annotated fields")


def _build_instance(binding: ClassBinding, values: dict[str, Any]) -> Any:
    cls = binding.cls
    if not binding.is_dataclass:
        instance = cls.__new__(cls)
        for name, value in values.items():
            setattr(instance, name, value)
        return instance

    init_names = {field.name for field in binding.fields if field.init}
    kwargs = {name: value for name, value in values.items() if name in init_names}
    # Absent JSON members become None rather than failing construction.
    for name in binding.required_init:
        kwargs.setdefault(name, None)
    try:
        instance = cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Cannot build {cls.__qualname__}: {e}") from e
    for name, value in values.items():
        if name not in init_names:
            object.__setattr__(instance, name, value)
    return instance


def _field_values(binding: ClassBinding, value: Any) -> dict[str, Any]:
    if not isinstance(value, binding.cls):
        raise PydanticSerializationUnexpectedValue(
            f"Expected {binding.cls.__qualname__}, got {type(value).__qualname__}"
        )
    return {field.name: getattr(value, field.name, None) for field in binding.fields}


def _has_instance_dict(cls: type) -> bool:
    return any("__dict__" in vars(klass) for klass in cls.__mro__)


class CodecSchema:
    """``Annotated`` marker routing pydantic schema generation through a codec.

    Each schema build must be preceded by ``reset()``; the marker keeps
    the references of the classes it has already emitted so that
    recursive and repeated classes become definition references.
    """

    def __init__(self, codec: "JsonCodec") -> None:
        self._codec = codec
        self._refs: set[str] = set()
        self._active = threading.local()

    def reset(self) -> None:
        self._refs = set()

    def annotate(self, tp: Any) -> Any:
        return Annotated[tp, self]

    def __get_pydantic_core_schema__(
        self, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        adapter = self._codec.adapter_for(source)
        if adapter is not None:
            return self._adapter_schema(source, adapter, handler)
        return self._schema(source, handler)

    # ------------------------------------------------------------------
    # Schema construction
    # ------------------------------------------------------------------

    def _schema(self, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        if source is Any:
            return core_schema.any_schema(serialization=_plain_serializer(self.serialize_runtime))
        if isinstance(source, type) and source in _BARE_CONTAINERS:
            return self._generic_schema(_BARE_CONTAINERS[source], handler)
        if get_origin(source) is not None:
            return self._generic_schema(source, handler)
        if not isinstance(source, type) or source is object:
            return handler(source)

        if self._codec.skips_class(source):
            return core_schema.no_info_plain_validator_function(
                _to_none, serialization=_plain_serializer(_to_none)
            )
        if issubclass(source, _RAW_BUFFERS):
            reject = partial(_reject_raw_buffer, source)
            return core_schema.no_info_plain_validator_function(
                reject, serialization=_plain_serializer(reject)
            )
        if issubclass(source, Enum):
            return core_schema.no_info_before_validator_function(
                partial(_enum_by_name, source), handler(source)
            )

        scalar = self._scalar_schema(source)
        if scalar is not None:
            return scalar
        if source in (datetime, date) and self._codec.date_format:
            return self._date_schema(source, handler)

        binding = self._binding(source)
        if binding is not None:
            return self._class_schema(binding, handler)

        try:
            return handler(source)
        except PydanticSchemaGenerationError:
            if not _has_instance_dict(source):
                raise
        # Plain objects without annotations: public attributes, write only.
        return core_schema.no_info_plain_validator_function(
            partial(_reject_untyped, source),
            serialization=_plain_serializer(self.serialize_vars),
        )

    def _scalar_schema(self, source: type) -> core_schema.CoreSchema | None:
        if source is bool:
            return core_schema.no_info_before_validator_function(
                _read_bool, core_schema.bool_schema()
            )
        if source is int:
            return core_schema.no_info_before_validator_function(
                _reject_bool, core_schema.int_schema()
            )
        if source is float:
            return core_schema.no_info_before_validator_function(
                _reject_bool,
                core_schema.float_schema(),
                serialization=_plain_serializer(_finite_float),
            )
        if source is str:
            return core_schema.str_schema(coerce_numbers_to_str=True)
        if source is Decimal:
            return core_schema.no_info_before_validator_function(
                _reject_bool,
                core_schema.decimal_schema(),
                serialization=_plain_serializer(_decimal_number),
            )
        return None

    def _date_schema(self, source: type, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        pattern = self._codec.date_format
        return core_schema.no_info_before_validator_function(
            partial(_parse_date, pattern, source is date),
            handler(source),
            serialization=_plain_serializer(partial(_format_date, pattern)),
        )

    def _generic_schema(self, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        origin = get_origin(source)
        args = get_args(source)

        if is_union(source):
            return handler.generate_schema(Union[tuple(self._wrap(arg) for arg in args)])
        if (
            origin is Literal
            or origin is Annotated
            or not isinstance(origin, type)
            or not issubclass(origin, abc.Iterable)
            or issubclass(origin, (str, *_RAW_BUFFERS))
        ):
            return handler(source)

        if issubclass(origin, abc.Mapping):
            # Keys stay as they are: JSON object keys are always strings.
            if len(args) == 2:
                args = (args[0], self._wrap(args[1]))
            schema = handler.generate_schema(origin[args] if args else source)
            if self._codec.serialize_nulls:
                return schema
            return core_schema.no_info_after_validator_function(
                _identity,
                schema,
                serialization=core_schema.wrap_serializer_function_ser_schema(
                    _drop_null_values, info_arg=False
                ),
            )

        if not args:
            return handler(source)
        return handler.generate_schema(origin[tuple(self._wrap(arg) for arg in args)])

    def _wrap(self, arg: Any) -> Any:
        if arg is Ellipsis or arg is NONE_TYPE or arg is None:
            return arg
        return Annotated[arg, self]

    def _binding(self, cls: type) -> ClassBinding | None:
        if (
            issubclass(cls, (tuple, BaseModel))
            or is_typeddict(cls)
            or hasattr(cls, "__get_pydantic_core_schema__")
        ):
            return None
        return self._codec.binding_for(cls)

    def _class_schema(
        self, binding: ClassBinding, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        cls = binding.cls
        ref = f"{cls.__module__}.{cls.__qualname__}:{id(cls)}"
        if ref in self._refs:
            return core_schema.definition_reference_schema(ref)
        self._refs.add(ref)

        return core_schema.no_info_after_validator_function(
            partial(_build_instance, binding),
            self._fields_schema(binding, handler),
            ref=ref,
            serialization=_plain_serializer(
                partial(_field_values, binding),
                return_schema=self._fields_schema(binding, handler),
            ),
        )

    def _fields_schema(
        self, binding: ClassBinding, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        fields = {
            field.name: core_schema.typed_dict_field(
                handler.generate_schema(Annotated[field.declared_type, self]),
                required=False,
                validation_alias=field.json_name,
                serialization_alias=field.json_name,
            )
            for field in binding.fields
        }
        return core_schema.typed_dict_schema(fields, cls_name=binding.cls.__qualname__)

    def _adapter_schema(
        self, source: Any, adapter: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        serialize = getattr(adapter, "serialize", None)
        deserialize = getattr(adapter, "deserialize", None)
        serialization = None
        if callable(serialize):
            serialization = _plain_serializer(partial(self._serialize_with, serialize, source))

        if callable(serialize) and callable(deserialize):
            return core_schema.no_info_plain_validator_function(
                partial(self._deserialize_with, deserialize, source),
                serialization=serialization,
            )
        inner = self._schema(source, handler)
        ref = inner.pop("ref", None)
        if ref is not None:
            # Nested inside the adapter schema, never registered as a definition.
            self._refs.discard(ref)
        if callable(deserialize):
            return core_schema.no_info_wrap_validator_function(
                partial(self._deserialize_around, deserialize, source), inner
            )
        return core_schema.no_info_after_validator_function(
            _identity, inner, serialization=serialization
        )

    def _serialize_with(self, serialize: Any, declared_type: Any, value: Any) -> Any:
        if value is None:
            return None
        return serialize(value, declared_type, self._codec)

    def _deserialize_with(self, deserialize: Any, target_type: Any, data: Any) -> Any:
        if data is None:
            return None
        return deserialize(data, target_type, self._codec)

    def _deserialize_around(
        self, deserialize: Any, target_type: Any, data: Any, handler: Any
    ) -> Any:
        return self._deserialize_with(deserialize, target_type, data)

    # ------------------------------------------------------------------
    # Runtime dispatch
    # ------------------------------------------------------------------

    def serialize_runtime(self, value: Any) -> Any:
        """Serialize a value declared as Any by its runtime class."""
        if value is None:
            return None
        cls = type(value)
        if cls in _PLAIN_SCALARS or cls is float:
            if self._codec.adapter_for(cls) is None and not self._codec.skips_class(cls):
                return value if cls is not float else _finite_float(value)

        active: set[int] = self._active.__dict__.setdefault("ids", set())
        key = id(value)
        if key in active:
            raise ValueError(f"Circular reference detected at {cls.__qualname__}")
        active.add(key)
        try:
            if isinstance(value, abc.Mapping) and cls is not dict:
                value, cls = dict(value), dict
            elif isinstance(value, (abc.Sequence, abc.Set)) and not isinstance(
                value, (str, tuple, list, set, frozenset, *_RAW_BUFFERS)
            ):
                value, cls = list(value), list
            return self._codec.to_tree(value, cls)
        finally:
            active.discard(key)

    def serialize_vars(self, value: Any) -> dict[str, Any]:
        """Serialize the public attributes of an object without annotations."""
        result: dict[str, Any] = {}
        for name, item in vars(value).items():
            if name.startswith("_"):
                continue
            tree = self.serialize_runtime(item)
            if tree is None and not self._codec.serialize_nulls:
                continue
            result[translate_name(name, self._codec.field_naming_policy)] = tree
        return result
