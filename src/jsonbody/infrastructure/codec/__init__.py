"""JSON codec: builder, immutable codec and errors."""

from jsonbody.infrastructure.codec.binding import SERIALIZED_NAME, TRANSIENT
from jsonbody.infrastructure.codec.builder import JsonCodecBuilder
from jsonbody.infrastructure.codec.codec import JsonCodec
from jsonbody.infrastructure.codec.errors import (
    JsonCodecError,
    JsonMappingError,
    JsonSyntaxError,
)
from jsonbody.infrastructure.codec.naming import translate_name

__all__ = [
    "JsonCodec",
    "JsonCodecBuilder",
    "JsonCodecError",
    "JsonMappingError",
    "JsonSyntaxError",
    "SERIALIZED_NAME",
    "TRANSIENT",
    "translate_name",
]
