"""Domain services for jsonbody."""

from jsonbody.core.services.registry import MessageBodyRegistry

__all__ = [
    "MessageBodyRegistry",
]
