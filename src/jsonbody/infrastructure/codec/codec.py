"""JSON codec implementation."""

import threading
from collections import abc
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

import pydantic_core
from cachetools import LRUCache, cachedmethod  # type: ignore[import-untyped]
from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from jsonbody.core.entities.codec_config import FieldNamingPolicy
from jsonbody.core.interfaces.exclusion_strategy import IExclusionStrategy
from jsonbody.infrastructure.codec.binding import ClassBinding, bind_class
from jsonbody.infrastructure.codec.errors import JsonMappingError, JsonSyntaxError
from jsonbody.infrastructure.codec.schema import CodecSchema
from jsonbody.utils.type_inspection import type_name

if TYPE_CHECKING:
    from jsonbody.infrastructure.codec.builder import JsonCodecBuilder

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "=": "\\u003d",
    "'": "\\u0027",
}
# Valid in JSON but not in JavaScript string literals.
_ALWAYS_ESCAPED = {"\u2028": "\\u2028", "\u2029": "\\u2029"}

_SERIALIZATION_ERRORS = (
    PydanticSerializationError,
    PydanticUserError,
    RecursionError,
    TypeError,
    ValueError,
)


def _hint(declared_type: Any) -> Any:
    if declared_type is None or isinstance(declared_type, TypeVar):
        return Any
    return declared_type


def _error_path(loc: tuple[Any, ...]) -> str:
    return "$" + "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in loc)


def _describe(error: ValidationError) -> str:
    first = error.errors(include_url=False)[0]
    return f"{first['msg']} at {_error_path(first['loc'])}"


class JsonCodec:
    """Immutable JSON engine converting between Python objects and JSON text.

    Validation and serialization are done by pydantic TypeAdapters, one
    per declared type, built with the codec settings and kept in a
    bounded cache. Instances are created by JsonCodecBuilder and never
    change after creation, so one codec can be shared by any number of
    threads.

    The codec also acts as the context handed to type adapters, which
    call back into ``to_tree`` and ``from_tree`` for nested values.
    """

    def __init__(
        self,
        *,
        field_naming_policy: FieldNamingPolicy = FieldNamingPolicy.IDENTITY,
        serialize_nulls: bool = False,
        html_safe: bool = True,
        date_format: str | None = None,
        type_adapters: abc.Mapping[Any, Any] | None = None,
        exclusion_strategies: abc.Iterable[IExclusionStrategy] = (),
        binding_cache_size: int = 256,
    ) -> None:
        """Initialize the codec.

        Args:
            field_naming_policy: How attribute names become JSON keys.
            serialize_nulls: Write None-valued fields and map entries.
            html_safe: Escape ``< > & = '`` in the output.
            date_format: strftime pattern for dates, None for ISO-8601.
            type_adapters: Mapping of type to adapter.
            exclusion_strategies: Field/class exclusion predicates.
            binding_cache_size: Maximum number of cached class bindings
                and of cached TypeAdapters.
        """
        self._field_naming_policy = field_naming_policy
        self._serialize_nulls = serialize_nulls
        self._html_safe = html_safe
        self._date_format = date_format or None
        self._type_adapters = MappingProxyType(dict(type_adapters or {}))
        self._exclusion_strategies = tuple(exclusion_strategies)

        escapes = dict(_ALWAYS_ESCAPED)
        if html_safe:
            escapes.update(_HTML_ESCAPES)
        self._escape_table = str.maketrans(escapes)
        self._dump_options: dict[str, Any] = {
            "by_alias": True,
            "exclude_none": not serialize_nulls,
            "warnings": False,
        }

        self._schema = CodecSchema(self)
        self._schema_lock = threading.RLock()
        self._bindings: LRUCache[type, ClassBinding | None] = LRUCache(
            maxsize=binding_cache_size
        )
        self._bindings_lock = threading.Lock()
        self._adapters: LRUCache[Any, TypeAdapter[Any]] = LRUCache(maxsize=binding_cache_size)
        self._adapters_lock = threading.Lock()

    @property
    def field_naming_policy(self) -> FieldNamingPolicy:
        return self._field_naming_policy

    @property
    def serialize_nulls(self) -> bool:
        return self._serialize_nulls

    @property
    def html_safe(self) -> bool:
        return self._html_safe

    @property
    def date_format(self) -> str | None:
        return self._date_format

    @property
    def type_adapters(self) -> abc.Mapping[Any, Any]:
        return self._type_adapters

    @property
    def exclusion_strategies(self) -> tuple[IExclusionStrategy, ...]:
        return self._exclusion_strategies

    def new_builder(self) -> "JsonCodecBuilder":
        """Return a builder preloaded with this codec's settings."""
        from jsonbody.infrastructure.codec.builder import JsonCodecBuilder

        builder = JsonCodecBuilder().set_field_naming_policy(self._field_naming_policy)
        if self._serialize_nulls:
            builder.serialize_nulls()
        if not self._html_safe:
            builder.disable_html_escaping()
        for type_, adapter in self._type_adapters.items():
            builder.register_type_adapter(type_, adapter)
        if self._exclusion_strategies:
            builder.set_exclusion_strategies(*self._exclusion_strategies)
        return builder.set_date_format(self._date_format)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self, value: Any, declared_type: Any = None) -> str:
        """Serialize a value to JSON text.

        Args:
            value: The value to serialize, possibly None.
            declared_type: The static type of the value. Type adapters
                and field bindings follow the declared type, e.g. the
                elements of ``list[Money]``. Without one, each value is
                handled by its runtime class.

        Returns:
            Compact JSON text.

        Raises:
            JsonMappingError: If the value cannot be represented as JSON.
        """
        if value is None:
            return "null"
        try:
            raw = self._type_adapter(_hint(declared_type)).dump_json(value, **self._dump_options)
        except _SERIALIZATION_ERRORS as e:
            raise JsonMappingError(f"Failed to serialize value: {e}") from e
        return raw.decode("utf-8").translate(self._escape_table)

    def to_tree(self, value: Any, declared_type: Any = None) -> Any:
        """Convert a value into a JSON tree of dicts, lists and scalars."""
        if value is None:
            return None
        try:
            return self._type_adapter(_hint(declared_type)).dump_python(
                value, mode="json", **self._dump_options
            )
        except _SERIALIZATION_ERRORS as e:
            raise JsonMappingError(f"Failed to serialize value: {e}") from e

    # ------------------------------------------------------------------
    # Deserialization
    # ------------------------------------------------------------------

    def from_json(self, text: str, target_type: Any = Any) -> Any:
        """Deserialize JSON text into an instance of ``target_type``.

        Args:
            text: The JSON text.
            target_type: The type to materialize. ``Any`` returns the
                plain JSON tree.

        Returns:
            The decoded value. Empty text and the JSON literal ``null``
            decode to None whatever the target type.

        Raises:
            JsonSyntaxError: If the text is not valid JSON.
            JsonMappingError: If the JSON does not fit ``target_type``.
        """
        if not text.strip():
            return None
        try:
            data = pydantic_core.from_json(text, allow_inf_nan=False)
        except ValueError as e:
            raise JsonSyntaxError(f"Malformed JSON: {e}") from e
        return self.from_tree(data, target_type)

    def from_tree(self, data: Any, target_type: Any = Any) -> Any:
        """Convert a parsed JSON tree into an instance of ``target_type``."""
        if data is None:
            return None
        try:
            return self._type_adapter(_hint(target_type)).validate_python(data)
        except ValidationError as e:
            raise JsonMappingError(_describe(e)) from e
        except (PydanticUserError, RecursionError) as e:
            raise JsonMappingError(f"Cannot deserialize into {type_name(target_type)}: {e}") from e

    # ------------------------------------------------------------------
    # Schema support
    # ------------------------------------------------------------------

    @cachedmethod(lambda self: self._adapters, lock=lambda self: self._adapters_lock)
    def _type_adapter(self, hint: Any) -> TypeAdapter[Any]:
        with self._schema_lock:
            self._schema.reset()
            return TypeAdapter(self._schema.annotate(hint))

    @cachedmethod(lambda self: self._bindings, lock=lambda self: self._bindings_lock)
    def binding_for(self, cls: type) -> ClassBinding | None:
        """The serializable fields of ``cls``, None if it has none."""
        return bind_class(cls, self._field_naming_policy, self._exclusion_strategies)

    def adapter_for(self, tp: Any) -> Any:
        """The type adapter registered for exactly ``tp``, if any."""
        if not self._type_adapters:
            return None
        try:
            return self._type_adapters.get(tp)
        except TypeError:
            # Unhashable annotation
            return None

    def skips_class(self, cls: type) -> bool:
        return any(strategy.should_skip_class(cls) for strategy in self._exclusion_strategies)

    def __repr__(self) -> str:
        return (
            f"JsonCodec(field_naming_policy={self._field_naming_policy.name}, "
            f"serialize_nulls={self._serialize_nulls}, html_safe={self._html_safe}, "
            f"date_format={self._date_format!r})"
        )
