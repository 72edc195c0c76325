"""Exclusion strategy implementations."""

from jsonbody.infrastructure.exclusion.strategies import (
    ClassExclusionStrategy,
    FieldNameExclusionStrategy,
    MetadataExclusionStrategy,
)

__all__ = [
    "ClassExclusionStrategy",
    "FieldNameExclusionStrategy",
    "MetadataExclusionStrategy",
]
