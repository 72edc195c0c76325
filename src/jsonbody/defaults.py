"""Process-wide default provider.

Adapters fall back to this provider when none is passed explicitly.
Call ``configure()`` once during application startup, before the
first request is served.
"""

import threading

from jsonbody.infrastructure.providers.json_provider import JsonProvider

# Module-level provider reference
_provider: JsonProvider | None = None
_lock = threading.Lock()


def configure(provider: JsonProvider) -> None:
    """Install the default provider used by the framework adapters.

    Args:
        provider: The provider instance to use.

    Example:
        configure(JsonProvider(CodecConfig(serialize_nulls=False)))
    """
    global _provider
    with _lock:
        _provider = provider


def get_provider() -> JsonProvider:
    """Get the default provider, creating one with default options if needed.

    Returns:
        The configured provider.
    """
    global _provider
    if _provider is None:
        with _lock:
            if _provider is None:
                _provider = JsonProvider()
    return _provider
