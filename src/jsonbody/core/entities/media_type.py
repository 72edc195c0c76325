"""Media type entity.

A small, immutable representation of an HTTP media type such as
``application/json; charset=utf-8``, with just enough behaviour for
eligibility checks and ``Accept`` negotiation.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

WILDCARD = "*"


@dataclass(frozen=True)
class MediaType:
    """An HTTP media type.

    Attributes:
        type: Top-level type, e.g. ``application``.
        subtype: Subtype, e.g. ``json`` or ``vnd.api+json``.
        parameters: Parameters as ``(name, value)`` pairs, in header order.
    """

    type: str = WILDCARD
    subtype: str = WILDCARD
    parameters: tuple[tuple[str, str], ...] = field(default=())

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """Parse a header value into a MediaType.

        Args:
            value: A header value like ``text/json; charset=UTF-8``.

        Returns:
            The parsed media type. Type, subtype and parameter names
            are lower-cased; parameter values keep their case.

        Raises:
            ValueError: If the value is not a ``type/subtype`` pair.
        """
        main, *raw_params = value.split(";")
        full_type = main.strip().lower()
        if full_type == WILDCARD:
            # Some clients send a bare "*" in Accept headers.
            full_type = "*/*"

        type_, sep, subtype = full_type.partition("/")
        if not sep or not type_ or not subtype or "/" in subtype:
            raise ValueError(f"Invalid media type: {value!r}")

        parameters: list[tuple[str, str]] = []
        for raw in raw_params:
            raw = raw.strip()
            if not raw:
                continue
            name, sep, param_value = raw.partition("=")
            if not sep or not name.strip():
                raise ValueError(f"Invalid media type parameter {raw!r} in {value!r}")
            parameters.append((name.strip().lower(), param_value.strip().strip('"')))

        return cls(type=type_, subtype=subtype, parameters=tuple(parameters))

    @property
    def mime_type(self) -> str:
        """The ``type/subtype`` pair without parameters."""
        return f"{self.type}/{self.subtype}"

    @property
    def is_wildcard_type(self) -> bool:
        return self.type == WILDCARD

    @property
    def is_wildcard_subtype(self) -> bool:
        return self.subtype == WILDCARD or self.subtype.startswith("*+")

    def get_parameter(self, name: str, default: str | None = None) -> str | None:
        """Get a parameter value by (case-insensitive) name."""
        name = name.lower()
        for key, value in self.parameters:
            if key == name:
                return value
        return default

    def with_parameters(self, **parameters: str) -> "MediaType":
        """Return a copy with the given parameters replacing existing ones."""
        kept = tuple(
            (key, value) for key, value in self.parameters if key not in parameters
        )
        added = tuple((key.lower(), value) for key, value in parameters.items())
        return MediaType(self.type, self.subtype, kept + added)

    def is_compatible(self, other: "MediaType") -> bool:
        """Check whether two media types match, honouring wildcards.

        Parameters are ignored. ``application/*`` matches any
        ``application`` subtype and ``*/*`` matches everything.
        """
        if self.is_wildcard_type or other.is_wildcard_type:
            return True
        if self.type != other.type:
            return False
        if self.subtype == WILDCARD or other.subtype == WILDCARD:
            return True
        if self.subtype == other.subtype:
            return True
        # "*+json" style suffix wildcards
        for pattern, concrete in ((self.subtype, other.subtype), (other.subtype, self.subtype)):
            if pattern.startswith("*+"):
                return concrete.endswith(pattern[1:])
        return False

    def __str__(self) -> str:
        params = "".join(f";{key}={value}" for key, value in self.parameters)
        return f"{self.mime_type}{params}"


APPLICATION_JSON = MediaType("application", "json")
TEXT_JSON = MediaType("text", "json")


def _quality(media_type: MediaType) -> float:
    raw = media_type.get_parameter("q")
    if raw is None:
        return 1.0
    try:
        return float(raw)
    except ValueError:
        return 0.0


def parse_accept(header: str) -> list[MediaType]:
    """Parse an ``Accept`` header, most preferred first.

    Unparseable entries are dropped. Entries with equal quality keep
    their header order.
    """
    entries: list[MediaType] = []
    for part in header.split(","):
        if not part.strip():
            continue
        try:
            entries.append(MediaType.parse(part))
        except ValueError:
            continue
    return sorted(entries, key=_quality, reverse=True)


def select_media_type(
    accept_header: str | None,
    produces: Iterable[MediaType],
) -> MediaType | None:
    """Pick the produced media type a client accepts.

    Args:
        accept_header: Raw ``Accept`` header value, or None if absent.
        produces: Media types the server can produce, preferred first.

    Returns:
        The first produced media type acceptable to the client, the
        first produced media type when no header was sent, or None if
        nothing matches.
    """
    candidates = list(produces)
    if not candidates:
        return None
    if accept_header is None or not accept_header.strip():
        return candidates[0]

    accepted = parse_accept(accept_header)
    for wanted in accepted:
        if _quality(wanted) <= 0:
            continue
        for candidate in candidates:
            if not wanted.is_compatible(candidate):
                continue
            # An explicit q=0 for this exact type vetoes a wildcard match.
            vetoed = any(
                _quality(other) <= 0 and other.mime_type == candidate.mime_type
                for other in accepted
            )
            if not vetoed:
                return candidate
    return None
