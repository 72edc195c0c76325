"""Type adapter interfaces.

A type adapter customizes how one type is converted. Adapters may
implement either side or both; the codec checks which methods are
present when the adapter is registered.
"""

from typing import Any, Protocol


class ISerializationContext(Protocol):
    """Lets adapters delegate nested values back to the codec."""

    def to_tree(self, value: Any, declared_type: Any = None) -> Any:
        ...


class IDeserializationContext(Protocol):
    def from_tree(self, data: Any, target_type: Any = Any) -> Any:
        ...


class IJsonSerializer(Protocol):
    """Converts a value into a JSON tree (dicts, lists, str, numbers, bool, None)."""

    def serialize(
        self,
        value: Any,
        declared_type: Any,
        context: ISerializationContext,
    ) -> Any:
        ...


class IJsonDeserializer(Protocol):
    """Converts a parsed JSON tree into an instance of ``target_type``."""

    def deserialize(
        self,
        data: Any,
        target_type: Any,
        context: IDeserializationContext,
    ) -> Any:
        ...


class ITypeAdapter(IJsonSerializer, IJsonDeserializer, Protocol):
    """An adapter handling both directions."""
