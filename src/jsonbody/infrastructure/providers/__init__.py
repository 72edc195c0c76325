"""Message body provider implementations."""

from jsonbody.infrastructure.providers.json_provider import (
    EXCLUDED_TYPES,
    UNKNOWN_SIZE,
    JsonProvider,
    is_excluded_type,
    is_json_media_type,
)

__all__ = [
    "JsonProvider",
    "EXCLUDED_TYPES",
    "UNKNOWN_SIZE",
    "is_excluded_type",
    "is_json_media_type",
]
