"""Endpoint decorator for Starlette routes."""

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

from jsonbody.adapters.starlette.requests import read_body
from jsonbody.adapters.starlette.responses import JsonProviderResponse
from jsonbody.core.entities.media_type import select_media_type
from jsonbody.core.errors import NotAcceptableError
from jsonbody.defaults import get_provider
from jsonbody.infrastructure.providers.json_provider import JsonProvider

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]


def json_endpoint(
    body_type: Any = None,
    response_type: Any = None,
    provider: JsonProvider | None = None,
    status_code: int = 200,
) -> Callable[[Callable[..., Any]], Endpoint]:
    """Decorator turning a function into a JSON Starlette endpoint.

    The decorated function receives the request, plus the decoded body
    when ``body_type`` is given, and returns a plain value that is
    written with the provider. Returning a Response skips encoding.
    Sync functions run in the threadpool so they do not block the
    event loop.

    Args:
        body_type: Type to decode the request body into, or None for
            endpoints without a body.
        response_type: Declared type of the return value, e.g.
            ``list[User]``.
        provider: Provider to use. Defaults to the configured provider.
        status_code: Status code for successful responses.

    Returns:
        Decorator producing an ``async def endpoint(request)``.

    Example:
        @json_endpoint(body_type=User, status_code=201)
        async def create_user(request: Request, user: User) -> User:
            return await repository.save(user)

        app = Starlette(routes=[Route("/users", create_user, methods=["POST"])])
    """

    def decorator(func: Callable[..., Any]) -> Endpoint:
        @functools.wraps(func)
        async def wrapper(request: Request) -> Response:
            active = provider or get_provider()

            accept = request.headers.get("accept")
            media_type = select_media_type(accept, active.produces)
            if media_type is None:
                logger.warning("No JSON media type acceptable for Accept: %s", accept)
                raise NotAcceptableError(f"Cannot produce any of: {accept}")

            args: tuple[Any, ...] = (request,)
            if body_type is not None:
                args = (request, await read_body(request, body_type, active))
            if inspect.iscoroutinefunction(func):
                result = await func(*args)
            else:
                result = await run_in_threadpool(func, *args)
                if inspect.isawaitable(result):
                    result = await result

            if isinstance(result, Response):
                return result
            return JsonProviderResponse(
                result,
                status_code=status_code,
                media_type=media_type.mime_type,
                provider=active,
                declared_type=response_type,
            )

        return wrapper

    return decorator
