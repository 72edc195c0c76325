"""HTTP-layer errors raised while processing message bodies.

They subclass Starlette's HTTPException so that the framework's
default exception handling turns them into error responses.
"""

from starlette.exceptions import HTTPException


class MessageBodyError(HTTPException):
    """Base class for message body failures."""

    status_code_default = 500

    def __init__(self, detail: str | None = None, status_code: int | None = None) -> None:
        super().__init__(
            status_code=status_code or self.status_code_default,
            detail=detail,
        )


class MessageBodyReadError(MessageBodyError):
    """The request body could not be decoded."""

    status_code_default = 400


class MessageBodyWriteError(MessageBodyError):
    """The response body could not be written."""

    status_code_default = 500


class UnsupportedMediaTypeError(MessageBodyError):
    """No reader accepts the request's media type."""

    status_code_default = 415


class NotAcceptableError(MessageBodyError):
    """No writer produces a media type the client accepts."""

    status_code_default = 406
