"""Message body registry - discovers readers and writers by eligibility."""

import logging
from typing import Any

from jsonbody.core.entities.media_type import MediaType
from jsonbody.core.interfaces.body_reader import IMessageBodyReader
from jsonbody.core.interfaces.body_writer import IMessageBodyWriter

logger = logging.getLogger(__name__)


class MessageBodyRegistry:
    """Ordered registry of message body readers and writers.

    Readers and writers are registered independently. Lookups ask each
    registered entry, in registration order, whether it handles the
    given type and media type, and return the first that does.
    """

    def __init__(self) -> None:
        self._readers: list[IMessageBodyReader] = []
        self._writers: list[IMessageBodyWriter] = []

    @property
    def readers(self) -> tuple[IMessageBodyReader, ...]:
        return tuple(self._readers)

    @property
    def writers(self) -> tuple[IMessageBodyWriter, ...]:
        return tuple(self._writers)

    def register_reader(self, reader: IMessageBodyReader) -> None:
        logger.debug("Registering message body reader %r", reader)
        self._readers.append(reader)

    def register_writer(self, writer: IMessageBodyWriter) -> None:
        logger.debug("Registering message body writer %r", writer)
        self._writers.append(writer)

    def register(self, provider: Any) -> None:
        """Register a provider under every role it implements.

        Args:
            provider: An object implementing the reader role, the writer
                role, or both.

        Raises:
            TypeError: If the object implements neither role.
        """
        registered = False
        if isinstance(provider, IMessageBodyReader):
            self.register_reader(provider)
            registered = True
        if isinstance(provider, IMessageBodyWriter):
            self.register_writer(provider)
            registered = True
        if not registered:
            raise TypeError(
                f"{type(provider).__qualname__} is neither a message body reader nor writer"
            )

    def find_reader(
        self,
        type_: Any,
        media_type: MediaType | str | None,
        generic_type: Any = None,
    ) -> IMessageBodyReader | None:
        """Return the first reader able to decode ``type_`` from ``media_type``."""
        for reader in self._readers:
            if reader.is_readable(type_, media_type, generic_type):
                return reader
        return None

    def find_writer(
        self,
        type_: Any,
        media_type: MediaType | str | None,
        generic_type: Any = None,
    ) -> IMessageBodyWriter | None:
        """Return the first writer able to encode ``type_`` as ``media_type``."""
        for writer in self._writers:
            if writer.is_writeable(type_, media_type, generic_type):
                return writer
        return None
