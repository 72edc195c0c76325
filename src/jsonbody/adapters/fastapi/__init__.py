"""FastAPI framework adapter for jsonbody."""

from jsonbody.adapters.fastapi.dependencies import JsonBody, json_body
from jsonbody.adapters.starlette.responses import JsonProviderResponse

__all__ = [
    "json_body",
    "JsonBody",
    "JsonProviderResponse",
]
