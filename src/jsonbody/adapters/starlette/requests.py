"""Decoding Starlette request bodies with a JsonProvider."""

import io
import logging
from typing import Any

from starlette.requests import Request

from jsonbody.core.entities.media_type import MediaType
from jsonbody.core.errors import UnsupportedMediaTypeError
from jsonbody.defaults import get_provider
from jsonbody.infrastructure.providers.json_provider import JsonProvider
from jsonbody.utils.type_inspection import type_name

logger = logging.getLogger(__name__)


async def read_body(
    request: Request,
    target_type: Any,
    provider: JsonProvider | None = None,
) -> Any:
    """Decode the request body into ``target_type``.

    Args:
        request: The incoming request.
        target_type: The type to materialize, e.g. ``User`` or ``list[User]``.
        provider: Provider to use. Defaults to the configured provider.

    Returns:
        The decoded value, or None for a ``null`` or empty body.

    Raises:
        UnsupportedMediaTypeError: If the Content-Type is not JSON.
        MessageBodyReadError: If the body cannot be decoded.
    """
    provider = provider or get_provider()

    content_type = request.headers.get("content-type")
    media_type: MediaType | None = None
    if content_type:
        try:
            media_type = MediaType.parse(content_type)
        except ValueError as e:
            raise UnsupportedMediaTypeError(f"Invalid Content-Type {content_type!r}") from e

    if not provider.is_readable(target_type, media_type, target_type):
        logger.warning(
            "Rejecting %s request body for %s", content_type, type_name(target_type)
        )
        raise UnsupportedMediaTypeError(
            f"Cannot read {type_name(target_type)} from {content_type}"
        )

    body = await request.body()
    return provider.read_from(target_type, media_type, request.headers, io.BytesIO(body))
