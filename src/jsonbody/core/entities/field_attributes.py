"""Field attributes entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from jsonbody.utils.type_inspection import raw_class, strip_optional

EMPTY_METADATA: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class FieldAttributes:
    """Read-only view of a field, as seen by exclusion strategies.

    Attributes:
        name: The Python attribute name.
        declaring_class: The class the field belongs to.
        declared_type: The annotation of the field (may be parameterized).
        metadata: Dataclass field metadata, empty for plain classes.
    """

    name: str
    declaring_class: type
    declared_type: Any
    metadata: Mapping[str, Any] = field(default_factory=lambda: EMPTY_METADATA)

    @property
    def declared_class(self) -> type | None:
        """The class behind the declared type.

        ``list[int]`` gives ``list`` and ``Address | None`` gives ``Address``.
        """
        return raw_class(strip_optional(self.declared_type))

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)
