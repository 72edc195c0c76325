"""Message body reader interface."""

from collections.abc import Mapping
from typing import IO, Any, Protocol, runtime_checkable

from jsonbody.core.entities.media_type import MediaType


@runtime_checkable
class IMessageBodyReader(Protocol):
    """Contract for decoding request bodies into Python objects.

    Readers are registered with a MessageBodyRegistry, which asks
    each one in turn whether it can handle a target type and media
    type before handing it the body stream.
    """

    def is_readable(
        self,
        type_: Any,
        media_type: MediaType | str | None,
        generic_type: Any = None,
    ) -> bool:
        """Check whether a body can be decoded into ``type_``.

        Args:
            type_: The class to decode into.
            media_type: The request's media type, or None if unknown.
            generic_type: The full (possibly parameterized) annotation.

        Returns:
            True if this reader handles the pair. Must not raise.
        """
        ...

    def read_from(
        self,
        target_type: Any,
        media_type: MediaType | str | None,
        headers: Mapping[str, str] | None,
        stream: IO[bytes],
    ) -> Any:
        """Decode the whole stream into an instance of ``target_type``.

        Args:
            target_type: The type to materialize.
            media_type: The request's media type.
            headers: The request headers.
            stream: The body stream. It is read to exhaustion but not closed.

        Returns:
            The decoded value, possibly None.

        Raises:
            MessageBodyReadError: If the body cannot be decoded.
        """
        ...
