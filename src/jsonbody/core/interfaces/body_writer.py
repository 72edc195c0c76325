"""Message body writer interface."""

from collections.abc import MutableMapping
from typing import IO, Any, Protocol, runtime_checkable

from jsonbody.core.entities.media_type import MediaType


@runtime_checkable
class IMessageBodyWriter(Protocol):
    """Contract for encoding Python objects into response bodies."""

    def is_writeable(
        self,
        type_: Any,
        media_type: MediaType | str | None,
        generic_type: Any = None,
    ) -> bool:
        """Check whether values of ``type_`` can be written as ``media_type``.

        Must not raise.
        """
        ...

    def get_size(
        self,
        value: Any,
        type_: Any,
        media_type: MediaType | str | None,
    ) -> int:
        """Return the encoded length in bytes, or -1 if unknown."""
        ...

    def write_to(
        self,
        value: Any,
        declared_type: Any,
        media_type: MediaType | str | None,
        headers: MutableMapping[str, Any] | None,
        stream: IO[bytes],
    ) -> None:
        """Encode ``value`` to the stream.

        Args:
            value: The value to write, possibly None.
            declared_type: The static type of the value; drives handling of
                parameterized shapes.
            media_type: The negotiated response media type.
            headers: Response headers to update, or None.
            stream: Output stream. It is flushed but not closed.

        Raises:
            MessageBodyWriteError: If writing to the stream fails.
        """
        ...
