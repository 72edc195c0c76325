"""Tests for JsonProviderResponse."""

import pytest

from jsonbody import CodecConfig, JsonProvider, MessageBodyWriteError, configure
from jsonbody.adapters.starlette import JsonProviderResponse
from tests.models import User


@pytest.fixture
def provider() -> JsonProvider:
    return JsonProvider(CodecConfig(serialize_nulls=False))


class TestJsonProviderResponse:
    """Tests for JsonProviderResponse rendering."""

    def test_renders_with_provider(self, provider: JsonProvider) -> None:
        response = JsonProviderResponse(User(userName="a"), provider=provider)

        assert response.body == b'{"user_name":"a"}'
        assert response.headers["content-type"] == "application/json;charset=UTF-8"
        assert response.status_code == 200

    def test_content_length(self, provider: JsonProvider) -> None:
        response = JsonProviderResponse([1, 2], provider=provider)

        assert response.headers["content-length"] == "5"

    def test_media_type_argument(self, provider: JsonProvider) -> None:
        response = JsonProviderResponse({"a": 1}, media_type="text/json", provider=provider)

        assert response.headers["content-type"] == "text/json;charset=UTF-8"

    def test_status_code_and_headers(self, provider: JsonProvider) -> None:
        response = JsonProviderResponse(
            {"a": 1}, status_code=201, headers={"x-request-id": "42"}, provider=provider
        )

        assert response.status_code == 201
        assert response.headers["x-request-id"] == "42"

    def test_declared_type_drives_encoding(self, provider: JsonProvider) -> None:
        response = JsonProviderResponse(
            [{"userName": "a"}], provider=provider, declared_type=list[dict[str, str]]
        )

        assert response.body == b'[{"userName":"a"}]'

    def test_uses_default_provider(self, provider: JsonProvider) -> None:
        configure(provider)

        response = JsonProviderResponse(User(userName="a", age=None))

        assert response.provider is provider
        assert response.body == b'{"user_name":"a"}'

    def test_rejects_non_json_media_type(self, provider: JsonProvider) -> None:
        with pytest.raises(MessageBodyWriteError, match="text/xml"):
            JsonProviderResponse({"a": 1}, media_type="text/xml", provider=provider)

    def test_rejects_excluded_types(self, provider: JsonProvider) -> None:
        with pytest.raises(MessageBodyWriteError):
            JsonProviderResponse(b"raw", provider=provider)
