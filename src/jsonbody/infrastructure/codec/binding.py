"""Per-class field bindings.

A binding lists the fields of a dataclass or annotated class together
with the JSON key each one is written under. Bindings depend on the
naming policy and exclusion strategies, so each codec keeps its own.
"""

import dataclasses
import inspect
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, get_origin, get_type_hints

from jsonbody.core.entities.codec_config import FieldNamingPolicy
from jsonbody.core.entities.field_attributes import EMPTY_METADATA, FieldAttributes
from jsonbody.core.interfaces.exclusion_strategy import IExclusionStrategy
from jsonbody.infrastructure.codec.naming import translate_name

# Dataclass field metadata keys
SERIALIZED_NAME = "serialized_name"
TRANSIENT = "transient"


@dataclass(frozen=True)
class FieldBinding:
    """One serializable field of a class."""

    attributes: FieldAttributes
    json_name: str
    init: bool

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def declared_type(self) -> Any:
        return self.attributes.declared_type


@dataclass(frozen=True)
class ClassBinding:
    """The serializable fields of a class, in declaration order.

    Attributes:
        cls: The bound class.
        fields: Fields that take part in (de)serialization.
        is_dataclass: Whether instances are built through ``__init__``.
        required_init: ``__init__`` parameters without defaults, including
            fields that are excluded from JSON. Missing ones are passed
            as None when reading.
    """

    cls: type
    fields: tuple[FieldBinding, ...]
    is_dataclass: bool
    required_init: tuple[str, ...] = ()


def _resolve_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable forward references: fall back to the raw annotations.
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(inspect.get_annotations(klass))
        return hints


def _declaring_class(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass):
            return klass
    return cls


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def _is_excluded(
    attributes: FieldAttributes,
    strategies: Iterable[IExclusionStrategy],
) -> bool:
    declared_class = attributes.declared_class
    for strategy in strategies:
        if strategy.should_skip_field(attributes):
            return True
        if declared_class is not None and strategy.should_skip_class(declared_class):
            return True
    return False


def _candidate_fields(cls: type) -> tuple[list[tuple[FieldAttributes, bool]], tuple[str, ...]] | None:
    hints = _resolve_hints(cls)

    if dataclasses.is_dataclass(cls):
        candidates: list[tuple[FieldAttributes, bool]] = []
        required: list[str] = []
        for f in dataclasses.fields(cls):
            has_default = (
                f.default is not dataclasses.MISSING
                or f.default_factory is not dataclasses.MISSING
            )
            if f.init and not has_default:
                required.append(f.name)
            attributes = FieldAttributes(
                name=f.name,
                declaring_class=_declaring_class(cls, f.name),
                declared_type=hints.get(f.name, f.type),
                metadata=f.metadata or EMPTY_METADATA,
            )
            candidates.append((attributes, f.init))
        return candidates, tuple(required)

    if not hints or cls.__module__ == "builtins":
        return None

    candidates = [
        (
            FieldAttributes(
                name=name,
                declaring_class=_declaring_class(cls, name),
                declared_type=hint,
            ),
            False,
        )
        for name, hint in hints.items()
        if not _is_class_var(hint)
    ]
    return candidates, ()


def bind_class(
    cls: type,
    naming_policy: FieldNamingPolicy,
    strategies: Iterable[IExclusionStrategy] = (),
) -> ClassBinding | None:
    """Build the binding for a class.

    Dataclasses use their declared fields. Other classes use their
    (inherited) annotations, skipping ``ClassVar``. Underscore-prefixed
    names, ``transient`` fields and fields rejected by an exclusion
    strategy are left out. A ``serialized_name`` metadata entry
    overrides the naming policy.

    Args:
        cls: The class to bind.
        naming_policy: Policy used to derive JSON keys.
        strategies: Exclusion strategies to consult.

    Returns:
        The binding, or None if the class has no field information.
    """
    collected = _candidate_fields(cls)
    if collected is None:
        return None
    candidates, required = collected
    strategies = tuple(strategies)

    fields: list[FieldBinding] = []
    for attributes, init in candidates:
        if attributes.name.startswith("_") or attributes.get_metadata(TRANSIENT):
            continue
        if _is_excluded(attributes, strategies):
            continue
        json_name = attributes.get_metadata(SERIALIZED_NAME) or translate_name(
            attributes.name, naming_policy
        )
        fields.append(FieldBinding(attributes=attributes, json_name=json_name, init=init))

    return ClassBinding(
        cls=cls,
        fields=tuple(fields),
        is_dataclass=dataclasses.is_dataclass(cls),
        required_init=required,
    )
