"""JSON codec errors."""


class JsonCodecError(Exception):
    """Raised when a value cannot be converted to or from JSON."""

    pass


class JsonSyntaxError(JsonCodecError):
    """Raised when JSON text is malformed."""

    pass


class JsonMappingError(JsonCodecError):
    """Raised when a value or JSON shape does not fit the requested type."""

    pass
