"""Codec configuration entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldNamingPolicy(Enum):
    """Rule mapping Python attribute names to JSON keys.

    Names are split into words at underscores and at lower-to-upper
    camel-case boundaries, so ``user_name`` and ``userName`` translate
    the same way. Leading underscores are kept as-is.
    """

    IDENTITY = "identity"
    LOWER_CASE_WITH_UNDERSCORES = "lower_case_with_underscores"
    LOWER_CASE_WITH_DASHES = "lower_case_with_dashes"
    LOWER_CASE_WITH_DOTS = "lower_case_with_dots"
    UPPER_CASE_WITH_UNDERSCORES = "upper_case_with_underscores"
    LOWER_CAMEL_CASE = "lower_camel_case"
    UPPER_CAMEL_CASE = "upper_camel_case"
    UPPER_CAMEL_CASE_WITH_SPACES = "upper_camel_case_with_spaces"


@dataclass
class CodecConfig:
    """JSON codec configuration.

    Holds the options a JsonProvider builds its codec from. The
    config itself stays mutable; changes take effect only when the
    provider's ``build()`` runs again, which swaps in a new codec.

    Attributes:
        serialize_nulls: Emit fields whose value is None as JSON null.
            When False, such fields are left out of the output.
        disable_html_escaping: Write ``<``, ``>``, ``&``, ``=`` and ``'``
            literally instead of as ``\\u00XX`` escapes.
        date_format_pattern: strftime/strptime pattern for dates. When
            empty or None the codec's ISO-8601 format is used.
        field_naming_policy: How attribute names become JSON keys.
        type_adapters: Mapping of adapter instance to the type it handles.
        exclusion_strategies: Field/class predicates, applied in order.
    """

    serialize_nulls: bool = True
    disable_html_escaping: bool = True
    date_format_pattern: str | None = None
    field_naming_policy: FieldNamingPolicy = FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES
    type_adapters: dict[Any, Any] = field(default_factory=dict)
    exclusion_strategies: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Accept naming policies given by name, e.g. from settings files."""
        if isinstance(self.field_naming_policy, str):
            try:
                self.field_naming_policy = FieldNamingPolicy[self.field_naming_policy.upper()]
            except KeyError:
                self.field_naming_policy = FieldNamingPolicy(self.field_naming_policy.lower())
