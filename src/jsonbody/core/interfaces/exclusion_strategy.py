"""Exclusion strategy interface."""

from typing import Protocol

from jsonbody.core.entities.field_attributes import FieldAttributes


class IExclusionStrategy(Protocol):
    """Contract for suppressing fields or classes from (de)serialization.

    Strategies are consulted on both reads and writes. A skipped field
    is neither written nor populated; a skipped class is read and
    written as null.
    """

    def should_skip_field(self, field: FieldAttributes) -> bool:
        """Return True to leave ``field`` out."""
        ...

    def should_skip_class(self, cls: type) -> bool:
        """Return True to treat values of ``cls`` as null."""
        ...
