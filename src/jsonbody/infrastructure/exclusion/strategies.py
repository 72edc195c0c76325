"""Ready-made exclusion strategies."""

from jsonbody.core.entities.field_attributes import FieldAttributes


class FieldNameExclusionStrategy:
    """Skip fields by attribute name, optionally only on given classes."""

    def __init__(self, *names: str, declaring_class: type | None = None) -> None:
        """Initialize the strategy.

        Args:
            names: Attribute names to skip.
            declaring_class: Restrict the rule to fields declared on this
                class (or its subclasses). Applies everywhere if None.
        """
        self._names = frozenset(names)
        self._declaring_class = declaring_class

    def should_skip_field(self, field: FieldAttributes) -> bool:
        if field.name not in self._names:
            return False
        if self._declaring_class is None:
            return True
        return issubclass(field.declaring_class, self._declaring_class)

    def should_skip_class(self, cls: type) -> bool:
        return False


class ClassExclusionStrategy:
    """Skip values of the given classes and their subclasses."""

    def __init__(self, *classes: type) -> None:
        self._classes = tuple(classes)

    def should_skip_field(self, field: FieldAttributes) -> bool:
        return False

    def should_skip_class(self, cls: type) -> bool:
        return issubclass(cls, self._classes)


class MetadataExclusionStrategy:
    """Skip dataclass fields whose metadata has a truthy ``key``.

    Example:
        @dataclass
        class Account:
            login: str
            password: str = field(metadata={"secret": True})

        MetadataExclusionStrategy("secret")
    """

    def __init__(self, key: str) -> None:
        self._key = key

    def should_skip_field(self, field: FieldAttributes) -> bool:
        return bool(field.get_metadata(self._key))

    def should_skip_class(self, cls: type) -> bool:
        return False
