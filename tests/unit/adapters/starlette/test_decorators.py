"""Tests for the json_endpoint decorator."""

import threading
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.responses import PlainTextResponse

from jsonbody import CodecConfig, JsonProvider, NotAcceptableError
from jsonbody.adapters.starlette import JsonProviderResponse, json_endpoint
from tests.models import User


def make_request(
    body: bytes = b"",
    content_type: str = "application/json",
    accept: str | None = None,
) -> MagicMock:
    headers = {"content-type": content_type}
    if accept is not None:
        headers["accept"] = accept
    request = MagicMock()
    request.headers = headers
    request.body = AsyncMock(return_value=body)
    return request


@pytest.fixture
def provider() -> JsonProvider:
    return JsonProvider(CodecConfig(serialize_nulls=False))


class TestJsonEndpoint:
    """Tests for json_endpoint."""

    @pytest.mark.asyncio
    async def test_async_endpoint_with_body(self, provider: JsonProvider) -> None:
        @json_endpoint(body_type=User, response_type=User, provider=provider)
        async def echo(request, user: User) -> User:
            return User(userName=user.userName.upper(), age=user.age)

        response = await echo(make_request(b'{"user_name": "a", "age": 2}'))

        assert isinstance(response, JsonProviderResponse)
        assert response.body == b'{"user_name":"A","age":2}'
        assert response.headers["content-type"] == "application/json;charset=UTF-8"

    @pytest.mark.asyncio
    async def test_sync_endpoint_without_body(self, provider: JsonProvider) -> None:
        @json_endpoint(provider=provider, status_code=202)
        def listing(request) -> list[User]:
            return [User(userName="a")]

        response = await listing(make_request())

        assert response.status_code == 202
        assert response.body == b'[{"user_name":"a"}]'

    @pytest.mark.asyncio
    async def test_sync_endpoint_runs_off_the_event_loop(self, provider: JsonProvider) -> None:
        seen: list[int] = []

        @json_endpoint(body_type=User, provider=provider)
        def create(request, user: User) -> User:
            seen.append(threading.get_ident())
            return user

        response = await create(make_request(b'{"user_name": "a"}'))

        assert response.body == b'{"user_name":"a"}'
        assert seen and seen[0] != threading.get_ident()

    @pytest.mark.asyncio
    async def test_negotiates_text_json(self, provider: JsonProvider) -> None:
        @json_endpoint(provider=provider)
        async def endpoint(request):
            return {"ok": True}

        response = await endpoint(make_request(accept="text/json"))

        assert response.headers["content-type"] == "text/json;charset=UTF-8"

    @pytest.mark.asyncio
    async def test_not_acceptable(self, provider: JsonProvider) -> None:
        called = MagicMock()

        @json_endpoint(provider=provider)
        async def endpoint(request):
            called()
            return {}

        with pytest.raises(NotAcceptableError) as exc_info:
            await endpoint(make_request(accept="text/html"))

        assert exc_info.value.status_code == 406
        called.assert_not_called()

    @pytest.mark.asyncio
    async def test_response_passes_through(self, provider: JsonProvider) -> None:
        @json_endpoint(provider=provider)
        async def endpoint(request):
            return PlainTextResponse("done")

        response = await endpoint(make_request())

        assert isinstance(response, PlainTextResponse)
        assert response.body == b"done"

    @pytest.mark.asyncio
    async def test_preserves_function_metadata(self, provider: JsonProvider) -> None:
        @json_endpoint(provider=provider)
        async def get_users(request):
            """List users."""
            return []

        assert get_users.__name__ == "get_users"
        assert get_users.__doc__ == "List users."
