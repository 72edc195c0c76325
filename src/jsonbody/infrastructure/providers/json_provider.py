"""JSON message body provider."""

import io
import logging
from collections import abc
from collections.abc import Mapping, MutableMapping
from typing import IO, Any

from starlette.responses import Response

from jsonbody.core.entities.codec_config import CodecConfig
from jsonbody.core.entities.media_type import APPLICATION_JSON, TEXT_JSON, MediaType
from jsonbody.core.errors import MessageBodyReadError, MessageBodyWriteError
from jsonbody.infrastructure.codec.builder import JsonCodecBuilder
from jsonbody.infrastructure.codec.codec import JsonCodec
from jsonbody.infrastructure.codec.errors import JsonCodecError
from jsonbody.utils.type_inspection import raw_class

logger = logging.getLogger(__name__)

# Types never handed to the codec, whatever the media type.
EXCLUDED_TYPES: frozenset[type] = frozenset(
    {
        io.IOBase,
        bytes,
        bytearray,
        memoryview,
        abc.Iterator,
        abc.AsyncIterator,
        Response,
        IO,
    }
)

UNKNOWN_SIZE = -1
UTF_8_CHARSET = "charset=UTF-8"
CONTENT_TYPE = "Content-Type"


def _coerce_media_type(media_type: MediaType | str | None) -> MediaType | None:
    if media_type is None or isinstance(media_type, MediaType):
        return media_type
    return MediaType.parse(media_type)


def is_json_media_type(media_type: MediaType | None) -> bool:
    """Absent media types count as JSON; otherwise ``json`` or ``*+json``."""
    if media_type is None:
        return True
    subtype = media_type.subtype.lower()
    return subtype == "json" or subtype.endswith("+json")


def is_excluded_type(type_: Any) -> bool:
    """Whether ``type_`` is, or derives from, one of EXCLUDED_TYPES."""
    cls = raw_class(type_)
    if cls is None:
        return False
    if cls in EXCLUDED_TYPES:
        return True
    for excluded in EXCLUDED_TYPES:
        try:
            if issubclass(cls, excluded):
                return True
        except TypeError:
            continue
    return False


class JsonProvider:
    """Reads and writes JSON message bodies with a configured codec.

    Implements both the reader and the writer role, so one instance
    can be registered for request and response bodies alike. The
    codec is built from a CodecConfig when the provider is created
    and can be rebuilt with ``build()`` after changing the config.
    Rebuilding swaps the codec reference; it should happen before the
    provider serves traffic.

    Example:
        provider = JsonProvider(
            CodecConfig(
                serialize_nulls=False,
                date_format_pattern="%Y-%m-%d",
            )
        )
        provider.write_to(user, User, APPLICATION_JSON, headers, stream)
    """

    consumes: tuple[MediaType, ...] = (APPLICATION_JSON, TEXT_JSON)
    produces: tuple[MediaType, ...] = (APPLICATION_JSON, TEXT_JSON)

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the provider and build its codec.

        Args:
            config: Codec options. Uses defaults if not provided.
        """
        self.config = config or CodecConfig()
        self._codec: JsonCodec = self.build()

    @property
    def codec(self) -> JsonCodec:
        """The codec currently in use."""
        return self._codec

    def build(self) -> JsonCodec:
        """Build a codec from ``self.config`` and make it current.

        Options are applied in a fixed order: naming policy, nulls,
        HTML escaping, type adapters, exclusion strategies and finally
        the date format, which is only set when non-empty.

        Returns:
            The new codec.
        """
        config = self.config
        builder = JsonCodecBuilder().set_field_naming_policy(config.field_naming_policy)
        if config.serialize_nulls:
            builder.serialize_nulls()
        if config.disable_html_escaping:
            builder.disable_html_escaping()
        for adapter, type_ in config.type_adapters.items():
            logger.debug("Registering type %s to adapter %s.", type_, adapter)
            builder.register_type_adapter(type_, adapter)
        if config.exclusion_strategies:
            builder.set_exclusion_strategies(*config.exclusion_strategies)
        if config.date_format_pattern:
            builder.set_date_format(config.date_format_pattern)

        self._codec = builder.create()
        logger.debug("Built %r", self._codec)
        return self._codec

    # Writer

    def is_writeable(
        self,
        type_: Any,
        media_type: MediaType | str | None,
        generic_type: Any = None,
    ) -> bool:
        return self._is_read_writable(type_, media_type)

    def get_size(
        self,
        value: Any,
        type_: Any,
        media_type: MediaType | str | None,
    ) -> int:
        return UNKNOWN_SIZE

    def write_to(
        self,
        value: Any,
        declared_type: Any,
        media_type: MediaType | str | None,
        headers: MutableMapping[str, Any] | None,
        stream: IO[bytes],
    ) -> None:
        """Serialize ``value`` as UTF-8 JSON onto ``stream``.

        Sets ``Content-Type: <type>/<subtype>;charset=UTF-8`` when
        headers are given, then writes and flushes the stream.

        Raises:
            JsonCodecError: If the value cannot be serialized.
            MessageBodyWriteError: If writing to the stream fails.
        """
        resolved = _coerce_media_type(media_type) or APPLICATION_JSON
        if headers is not None:
            headers[CONTENT_TYPE] = f"{resolved.mime_type};{UTF_8_CHARSET}"

        body = self._codec.to_json(value, declared_type).encode("utf-8")
        try:
            stream.write(body)
            stream.flush()
        except OSError as e:
            raise MessageBodyWriteError(f"Failed to write JSON body: {e}") from e

    # Reader

    def is_readable(
        self,
        type_: Any,
        media_type: MediaType | str | None,
        generic_type: Any = None,
    ) -> bool:
        return self._is_read_writable(type_, media_type)

    def read_from(
        self,
        target_type: Any,
        media_type: MediaType | str | None,
        headers: Mapping[str, str] | None,
        stream: IO[bytes],
    ) -> Any:
        """Read the whole stream and decode it into ``target_type``.

        A body consisting of the JSON literal ``null``, or of nothing
        but whitespace, decodes to None.

        Raises:
            MessageBodyReadError: If the body is not UTF-8, is not
                valid JSON, or does not fit ``target_type``.
        """
        raw = stream.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MessageBodyReadError(f"Request body is not valid UTF-8: {e}") from e

        try:
            return self._codec.from_json(text, target_type)
        except JsonCodecError as e:
            raise MessageBodyReadError(str(e)) from e

    def _is_read_writable(self, type_: Any, media_type: MediaType | str | None) -> bool:
        try:
            resolved = _coerce_media_type(media_type)
        except (ValueError, AttributeError):
            return False
        if not is_json_media_type(resolved):
            return False
        return not is_excluded_type(type_)
