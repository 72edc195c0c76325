"""Integration tests running a Starlette app through the test client."""

from datetime import datetime

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.routing import Route
from starlette.testclient import TestClient

from jsonbody import CodecConfig, JsonProvider, configure
from jsonbody.adapters.starlette import JsonProviderResponse, json_endpoint, read_body
from tests.models import Customer, User


@pytest.fixture
def client() -> TestClient:
    configure(
        JsonProvider(CodecConfig(serialize_nulls=False, date_format_pattern="%Y-%m-%d %H:%M"))
    )

    @json_endpoint(body_type=User, response_type=User)
    async def echo(request: Request, user: User) -> User:
        return user

    @json_endpoint(body_type=list[Customer], status_code=201)
    def create_customers(request: Request, customers: list[Customer]) -> dict:
        return {"created": len(customers), "first": customers[0]}

    async def manual(request: Request) -> JsonProviderResponse:
        user = await read_body(request, User)
        return JsonProviderResponse({"greeting": f"hi {user.userName}"})

    app = Starlette(
        routes=[
            Route("/echo", echo, methods=["POST"]),
            Route("/customers", create_customers, methods=["POST"]),
            Route("/manual", manual, methods=["POST"]),
        ]
    )
    return TestClient(app)


class TestStarletteApp:
    """End-to-end request/response tests."""

    def test_echo(self, client: TestClient) -> None:
        response = client.post(
            "/echo",
            content=b'{"user_name": "a", "age": null}',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json;charset=UTF-8"
        assert response.content == b'{"user_name":"a"}'

    def test_nested_body_and_date_format(self, client: TestClient) -> None:
        response = client.post(
            "/customers",
            json=[
                {
                    "first_name": "Ada",
                    "address": {"street": "Main", "city": "London"},
                    "created_at": "2024-05-06 07:08",
                }
            ],
        )

        assert response.status_code == 201
        assert response.json() == {
            "created": 1,
            "first": {
                "first_name": "Ada",
                "address": {"street": "Main", "city": "London"},
                "tags": [],
                "created_at": "2024-05-06 07:08",
            },
        }
        assert datetime.strptime(response.json()["first"]["created_at"], "%Y-%m-%d %H:%M")

    def test_accept_text_json(self, client: TestClient) -> None:
        response = client.post(
            "/echo", json={"user_name": "a"}, headers={"accept": "text/json"}
        )

        assert response.headers["content-type"] == "text/json;charset=UTF-8"

    def test_not_acceptable(self, client: TestClient) -> None:
        response = client.post("/echo", json={"user_name": "a"}, headers={"accept": "text/html"})

        assert response.status_code == 406

    def test_unsupported_media_type(self, client: TestClient) -> None:
        response = client.post(
            "/echo", content=b"user_name=a", headers={"content-type": "text/plain"}
        )

        assert response.status_code == 415

    def test_malformed_body(self, client: TestClient) -> None:
        response = client.post(
            "/echo", content=b'{"user_name": ', headers={"content-type": "application/json"}
        )

        assert response.status_code == 400

    def test_manual_read_and_response(self, client: TestClient) -> None:
        response = client.post("/manual", json={"user_name": "Zoë"})

        assert response.status_code == 200
        assert response.json() == {"greeting": "hi Zoë"}
