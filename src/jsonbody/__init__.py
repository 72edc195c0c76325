"""jsonbody - JSON message bodies for Starlette and FastAPI.

A message body provider that decides whether a value and media type
are eligible for JSON, builds a JSON codec once from a small set of
options, and encodes/decodes request and response bodies with it.

Example with Starlette:
    from dataclasses import dataclass

    from starlette.applications import Starlette
    from starlette.routing import Route

    from jsonbody import CodecConfig, FieldNamingPolicy, JsonProvider, configure
    from jsonbody.adapters.starlette import json_endpoint

    @dataclass
    class User:
        userName: str
        age: int | None = None

    configure(
        JsonProvider(
            CodecConfig(
                field_naming_policy=FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES,
                serialize_nulls=False,
            )
        )
    )

    @json_endpoint(body_type=User, response_type=User)
    async def echo(request, user: User) -> User:
        return user

    app = Starlette(routes=[Route("/echo", echo, methods=["POST"])])

    # POST {"user_name": "a"}  ->  200 {"user_name":"a"}
    # Content-Type: application/json;charset=UTF-8

Using the provider directly:
    provider = JsonProvider()
    headers = {}
    stream = io.BytesIO()
    provider.write_to(User(userName="a"), User, APPLICATION_JSON, headers, stream)
    # headers == {"Content-Type": "application/json;charset=UTF-8"}
"""

from jsonbody.core.entities import (
    APPLICATION_JSON,
    TEXT_JSON,
    CodecConfig,
    FieldAttributes,
    FieldNamingPolicy,
    MediaType,
    select_media_type,
)
from jsonbody.core.errors import (
    MessageBodyError,
    MessageBodyReadError,
    MessageBodyWriteError,
    NotAcceptableError,
    UnsupportedMediaTypeError,
)
from jsonbody.core.interfaces import (
    IExclusionStrategy,
    IJsonDeserializer,
    IJsonSerializer,
    IMessageBodyReader,
    IMessageBodyWriter,
    ITypeAdapter,
)
from jsonbody.core.services import MessageBodyRegistry
from jsonbody.defaults import configure, get_provider
from jsonbody.infrastructure import (
    ClassExclusionStrategy,
    FieldNameExclusionStrategy,
    JsonCodec,
    JsonCodecBuilder,
    JsonCodecError,
    JsonMappingError,
    JsonProvider,
    JsonSyntaxError,
    MetadataExclusionStrategy,
)
from jsonbody.infrastructure.codec import SERIALIZED_NAME, TRANSIENT
from jsonbody.infrastructure.providers import EXCLUDED_TYPES, UNKNOWN_SIZE

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CodecConfig",
    "FieldNamingPolicy",
    "FieldAttributes",
    "MediaType",
    "APPLICATION_JSON",
    "TEXT_JSON",
    "select_media_type",
    # Errors
    "MessageBodyError",
    "MessageBodyReadError",
    "MessageBodyWriteError",
    "NotAcceptableError",
    "UnsupportedMediaTypeError",
    "JsonCodecError",
    "JsonMappingError",
    "JsonSyntaxError",
    # Core interfaces
    "IMessageBodyReader",
    "IMessageBodyWriter",
    "IExclusionStrategy",
    "IJsonSerializer",
    "IJsonDeserializer",
    "ITypeAdapter",
    # Core services
    "MessageBodyRegistry",
    # Infrastructure implementations
    "JsonProvider",
    "JsonCodec",
    "JsonCodecBuilder",
    "EXCLUDED_TYPES",
    "UNKNOWN_SIZE",
    "SERIALIZED_NAME",
    "TRANSIENT",
    "ClassExclusionStrategy",
    "FieldNameExclusionStrategy",
    "MetadataExclusionStrategy",
    # Default provider
    "configure",
    "get_provider",
]
