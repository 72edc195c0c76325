"""Field naming policy translation."""

import re
from collections.abc import Callable

from jsonbody.core.entities.codec_config import FieldNamingPolicy

# lower/digit -> Upper ("userName"), and the end of an acronym ("URLValue")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def split_words(name: str) -> tuple[str, list[str]]:
    """Split an attribute name into its leading underscores and words.

    >>> split_words("_userName")
    ('_', ['user', 'Name'])
    >>> split_words("created_at")
    ('', ['created', 'at'])
    """
    body = name.lstrip("_")
    prefix = name[: len(name) - len(body)]
    words = [word for word in _CAMEL_BOUNDARY.sub("_", body).split("_") if word]
    return prefix, words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _lower_camel(words: list[str]) -> str:
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


_JOINERS: dict[FieldNamingPolicy, Callable[[list[str]], str]] = {
    FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES: lambda w: "_".join(x.lower() for x in w),
    FieldNamingPolicy.LOWER_CASE_WITH_DASHES: lambda w: "-".join(x.lower() for x in w),
    FieldNamingPolicy.LOWER_CASE_WITH_DOTS: lambda w: ".".join(x.lower() for x in w),
    FieldNamingPolicy.UPPER_CASE_WITH_UNDERSCORES: lambda w: "_".join(x.upper() for x in w),
    FieldNamingPolicy.LOWER_CAMEL_CASE: _lower_camel,
    FieldNamingPolicy.UPPER_CAMEL_CASE: lambda w: "".join(_capitalize(x) for x in w),
    FieldNamingPolicy.UPPER_CAMEL_CASE_WITH_SPACES: lambda w: " ".join(_capitalize(x) for x in w),
}


def translate_name(name: str, policy: FieldNamingPolicy) -> str:
    """Translate an attribute name into a JSON key.

    Args:
        name: The Python attribute name.
        policy: The naming policy to apply.

    Returns:
        The JSON key. Names made only of underscores are left unchanged.
    """
    if policy is FieldNamingPolicy.IDENTITY:
        return name
    prefix, words = split_words(name)
    if not words:
        return name
    return prefix + _JOINERS[policy](words)
