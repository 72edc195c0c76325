"""Infrastructure layer implementations for jsonbody."""

from jsonbody.infrastructure.codec import (
    JsonCodec,
    JsonCodecBuilder,
    JsonCodecError,
    JsonMappingError,
    JsonSyntaxError,
)
from jsonbody.infrastructure.exclusion import (
    ClassExclusionStrategy,
    FieldNameExclusionStrategy,
    MetadataExclusionStrategy,
)
from jsonbody.infrastructure.providers import JsonProvider

__all__ = [
    "JsonProvider",
    "JsonCodec",
    "JsonCodecBuilder",
    "JsonCodecError",
    "JsonMappingError",
    "JsonSyntaxError",
    "ClassExclusionStrategy",
    "FieldNameExclusionStrategy",
    "MetadataExclusionStrategy",
]
