"""Domain entities for jsonbody."""

from jsonbody.core.entities.codec_config import CodecConfig, FieldNamingPolicy
from jsonbody.core.entities.field_attributes import FieldAttributes
from jsonbody.core.entities.media_type import (
    APPLICATION_JSON,
    TEXT_JSON,
    MediaType,
    parse_accept,
    select_media_type,
)

__all__ = [
    "CodecConfig",
    "FieldNamingPolicy",
    "FieldAttributes",
    "MediaType",
    "APPLICATION_JSON",
    "TEXT_JSON",
    "parse_accept",
    "select_media_type",
]
