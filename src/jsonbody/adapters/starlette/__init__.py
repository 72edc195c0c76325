"""Starlette framework adapter for jsonbody."""

from jsonbody.adapters.starlette.decorators import json_endpoint
from jsonbody.adapters.starlette.requests import read_body
from jsonbody.adapters.starlette.responses import JsonProviderResponse

__all__ = [
    "JsonProviderResponse",
    "read_body",
    "json_endpoint",
]
