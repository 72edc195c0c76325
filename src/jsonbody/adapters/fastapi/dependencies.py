"""FastAPI dependencies decoding request bodies with a JsonProvider."""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Depends
from starlette.requests import Request

from jsonbody.adapters.starlette.requests import read_body
from jsonbody.infrastructure.providers.json_provider import JsonProvider


def json_body(
    target_type: Any,
    provider: JsonProvider | None = None,
) -> Callable[[Request], Awaitable[Any]]:
    """Build a dependency that returns the decoded request body.

    FastAPI's own body parsing is bypassed, so the provider's naming
    policy and date format apply to the payload.

    Args:
        target_type: The type to decode into.
        provider: Provider to use. Defaults to the configured provider.

    Returns:
        An async dependency callable.

    Example:
        @app.post("/users")
        async def create_user(user: User = Depends(json_body(User))):
            return JsonProviderResponse(user)
    """

    async def dependency(request: Request) -> Any:
        return await read_body(request, target_type, provider)

    return dependency


def JsonBody(target_type: Any, provider: JsonProvider | None = None) -> Any:  # noqa: N802
    """Shorthand for ``Depends(json_body(target_type, provider))``.

    Example:
        @app.put("/users/{user_id}")
        async def update_user(user_id: int, user: User = JsonBody(User)):
            ...
    """
    return Depends(json_body(target_type, provider))
