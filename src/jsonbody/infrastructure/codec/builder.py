"""JSON codec builder."""

from typing import Any

from jsonbody.core.entities.codec_config import FieldNamingPolicy
from jsonbody.core.interfaces.exclusion_strategy import IExclusionStrategy
from jsonbody.infrastructure.codec.codec import JsonCodec


class JsonCodecBuilder:
    """Mutable builder producing immutable JsonCodec instances.

    A fresh builder describes a plain codec: attribute names are used
    as-is, None-valued fields are omitted, HTML characters are escaped
    and dates use ISO-8601. Every setter returns the builder so calls
    can be chained::

        codec = (
            JsonCodecBuilder()
            .set_field_naming_policy(FieldNamingPolicy.LOWER_CAMEL_CASE)
            .serialize_nulls()
            .create()
        )
    """

    def __init__(self) -> None:
        self._field_naming_policy = FieldNamingPolicy.IDENTITY
        self._serialize_nulls = False
        self._html_safe = True
        self._date_format: str | None = None
        self._type_adapters: dict[Any, Any] = {}
        self._exclusion_strategies: list[IExclusionStrategy] = []

    def set_field_naming_policy(self, policy: FieldNamingPolicy) -> "JsonCodecBuilder":
        self._field_naming_policy = policy
        return self

    def serialize_nulls(self) -> "JsonCodecBuilder":
        """Write None-valued fields and map entries as JSON null."""
        self._serialize_nulls = True
        return self

    def disable_html_escaping(self) -> "JsonCodecBuilder":
        """Write ``< > & = '`` literally instead of as unicode escapes."""
        self._html_safe = False
        return self

    def register_type_adapter(self, type_: Any, adapter: Any) -> "JsonCodecBuilder":
        """Register a custom adapter for exactly ``type_``.

        Args:
            type_: The class or parameterized type the adapter handles.
            adapter: An object with a ``serialize`` method, a
                ``deserialize`` method, or both.

        Raises:
            TypeError: If the adapter implements neither method.
        """
        has_serialize = callable(getattr(adapter, "serialize", None))
        has_deserialize = callable(getattr(adapter, "deserialize", None))
        if not (has_serialize or has_deserialize):
            raise TypeError(
                f"{type(adapter).__qualname__} is not a type adapter: "
                "it must define serialize() and/or deserialize()"
            )
        self._type_adapters[type_] = adapter
        return self

    def set_exclusion_strategies(self, *strategies: IExclusionStrategy) -> "JsonCodecBuilder":
        """Add exclusion strategies, consulted on both reads and writes.

        Raises:
            TypeError: If a strategy lacks ``should_skip_field`` or
                ``should_skip_class``.
        """
        for strategy in strategies:
            if not (
                callable(getattr(strategy, "should_skip_field", None))
                and callable(getattr(strategy, "should_skip_class", None))
            ):
                raise TypeError(f"{type(strategy).__qualname__} is not an exclusion strategy")
            self._exclusion_strategies.append(strategy)
        return self

    def set_date_format(self, pattern: str | None) -> "JsonCodecBuilder":
        """Use a strftime pattern for dates; empty or None restores ISO-8601."""
        self._date_format = pattern or None
        return self

    def create(self) -> JsonCodec:
        """Create a codec from the current settings.

        The builder can keep being used afterwards; later changes do
        not affect codecs already created.
        """
        return JsonCodec(
            field_naming_policy=self._field_naming_policy,
            serialize_nulls=self._serialize_nulls,
            html_safe=self._html_safe,
            date_format=self._date_format,
            type_adapters=self._type_adapters,
            exclusion_strategies=self._exclusion_strategies,
        )
