"""Core interfaces (Protocol classes) for jsonbody."""

from jsonbody.core.interfaces.body_reader import IMessageBodyReader
from jsonbody.core.interfaces.body_writer import IMessageBodyWriter
from jsonbody.core.interfaces.exclusion_strategy import IExclusionStrategy
from jsonbody.core.interfaces.type_adapter import (
    IDeserializationContext,
    IJsonDeserializer,
    IJsonSerializer,
    ISerializationContext,
    ITypeAdapter,
)

__all__ = [
    "IMessageBodyReader",
    "IMessageBodyWriter",
    "IExclusionStrategy",
    "IJsonSerializer",
    "IJsonDeserializer",
    "ITypeAdapter",
    "ISerializationContext",
    "IDeserializationContext",
]
