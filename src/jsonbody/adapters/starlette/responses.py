"""Starlette response rendered by a JsonProvider."""

import io
from collections.abc import Mapping
from typing import Any

from starlette.background import BackgroundTask
from starlette.responses import Response

from jsonbody.core.errors import MessageBodyWriteError
from jsonbody.defaults import get_provider
from jsonbody.infrastructure.providers.json_provider import CONTENT_TYPE, JsonProvider


class JsonProviderResponse(Response):
    """Response whose body is written by a JsonProvider.

    The provider's codec settings (naming policy, null handling, dates)
    apply to the content, and the ``Content-Type`` header is the one
    the provider sets, e.g. ``application/json;charset=UTF-8``.

    Example::

        async def get_user(request):
            return JsonProviderResponse(User(user_name="a"), provider=provider)
    """

    media_type = "application/json"

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        provider: JsonProvider | None = None,
        declared_type: Any = None,
    ) -> None:
        self._provider = provider or get_provider()
        self._declared_type = declared_type
        super().__init__(content, status_code, headers, media_type, background)

    @property
    def provider(self) -> JsonProvider:
        return self._provider

    def render(self, content: Any) -> bytes:
        media_type = self.media_type
        if not self._provider.is_writeable(type(content), media_type, self._declared_type):
            raise MessageBodyWriteError(
                f"Cannot write {type(content).__qualname__} as {media_type}"
            )

        headers: dict[str, Any] = {}
        stream = io.BytesIO()
        self._provider.write_to(content, self._declared_type, media_type, headers, stream)
        self.media_type = headers[CONTENT_TYPE]
        return stream.getvalue()
