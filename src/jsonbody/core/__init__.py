"""Core domain layer for jsonbody."""

from jsonbody.core.entities import CodecConfig, FieldAttributes, FieldNamingPolicy, MediaType
from jsonbody.core.errors import (
    MessageBodyError,
    MessageBodyReadError,
    MessageBodyWriteError,
    NotAcceptableError,
    UnsupportedMediaTypeError,
)
from jsonbody.core.interfaces import (
    IExclusionStrategy,
    IMessageBodyReader,
    IMessageBodyWriter,
    ITypeAdapter,
)
from jsonbody.core.services import MessageBodyRegistry

__all__ = [
    # Entities
    "CodecConfig",
    "FieldAttributes",
    "FieldNamingPolicy",
    "MediaType",
    # Errors
    "MessageBodyError",
    "MessageBodyReadError",
    "MessageBodyWriteError",
    "NotAcceptableError",
    "UnsupportedMediaTypeError",
    # Interfaces
    "IMessageBodyReader",
    "IMessageBodyWriter",
    "IExclusionStrategy",
    "ITypeAdapter",
    # Services
    "MessageBodyRegistry",
]
