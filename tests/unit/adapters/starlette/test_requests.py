"""Tests for read_body."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from jsonbody import (
    CodecConfig,
    JsonProvider,
    MessageBodyReadError,
    UnsupportedMediaTypeError,
    configure,
)
from jsonbody.adapters.starlette import read_body
from tests.models import User


def make_request(body: bytes, content_type: str | None = "application/json") -> MagicMock:
    request = MagicMock()
    request.headers = {} if content_type is None else {"content-type": content_type}
    request.body = AsyncMock(return_value=body)
    return request


@pytest.fixture
def provider() -> JsonProvider:
    return JsonProvider(CodecConfig(serialize_nulls=False))


class TestReadBody:
    """Tests for decoding request bodies."""

    @pytest.mark.asyncio
    async def test_reads_json_body(self, provider: JsonProvider) -> None:
        request = make_request(b'{"user_name": "a", "age": 3}')

        user = await read_body(request, User, provider)

        assert user == User(userName="a", age=3)

    @pytest.mark.asyncio
    async def test_reads_json_suffix_media_type(self, provider: JsonProvider) -> None:
        request = make_request(b'[{"user_name": "a"}]', "application/vnd.users+json")

        users = await read_body(request, list[User], provider)

        assert users == [User(userName="a")]

    @pytest.mark.asyncio
    async def test_missing_content_type_is_accepted(self, provider: JsonProvider) -> None:
        request = make_request(b'{"user_name": "a"}', None)

        assert await read_body(request, User, provider) == User(userName="a")

    @pytest.mark.asyncio
    async def test_empty_body_reads_as_none(self, provider: JsonProvider) -> None:
        request = make_request(b"")

        assert await read_body(request, User, provider) is None

    @pytest.mark.asyncio
    async def test_rejects_non_json_content_type(self, provider: JsonProvider) -> None:
        request = make_request(b"<user/>", "text/xml")

        with pytest.raises(UnsupportedMediaTypeError) as exc_info:
            await read_body(request, User, provider)

        assert exc_info.value.status_code == 415
        request.body.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_invalid_content_type(self, provider: JsonProvider) -> None:
        request = make_request(b"{}", "json")

        with pytest.raises(UnsupportedMediaTypeError):
            await read_body(request, User, provider)

    @pytest.mark.asyncio
    async def test_rejects_excluded_target_type(self, provider: JsonProvider) -> None:
        request = make_request(b'"abc"')

        with pytest.raises(UnsupportedMediaTypeError):
            await read_body(request, bytes, provider)

    @pytest.mark.asyncio
    async def test_malformed_body(self, provider: JsonProvider) -> None:
        request = make_request(b"{")

        with pytest.raises(MessageBodyReadError) as exc_info:
            await read_body(request, User, provider)

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_uses_default_provider(self, provider: JsonProvider) -> None:
        configure(provider)
        request = make_request(b'{"user_name": "a"}')

        assert await read_body(request, User) == User(userName="a")
