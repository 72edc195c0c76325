"""Tests for core entities."""

from dataclasses import dataclass, field, fields

import pytest

from jsonbody.core.entities import CodecConfig, FieldAttributes, FieldNamingPolicy


class TestCodecConfig:
    """Tests for CodecConfig entity."""

    def test_defaults(self) -> None:
        config = CodecConfig()

        assert config.serialize_nulls is True
        assert config.disable_html_escaping is True
        assert config.date_format_pattern is None
        assert config.field_naming_policy is FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES
        assert config.type_adapters == {}
        assert config.exclusion_strategies == []

    def test_mutable_defaults_are_not_shared(self) -> None:
        first = CodecConfig()
        second = CodecConfig()
        first.exclusion_strategies.append(object())

        assert second.exclusion_strategies == []

    @pytest.mark.parametrize(
        "name",
        ["LOWER_CAMEL_CASE", "lower_camel_case", "Lower_Camel_Case"],
    )
    def test_naming_policy_from_string(self, name: str) -> None:
        config = CodecConfig(field_naming_policy=name)  # type: ignore[arg-type]

        assert config.field_naming_policy is FieldNamingPolicy.LOWER_CAMEL_CASE

    def test_unknown_naming_policy(self) -> None:
        with pytest.raises(ValueError):
            CodecConfig(field_naming_policy="kebab")  # type: ignore[arg-type]


class TestFieldAttributes:
    """Tests for FieldAttributes entity."""

    def test_declared_class(self) -> None:
        attributes = FieldAttributes(name="tags", declaring_class=object, declared_type=list[str])

        assert attributes.declared_class is list

    def test_declared_class_for_optional(self) -> None:
        attributes = FieldAttributes(
            name="age", declaring_class=object, declared_type=int | None
        )

        assert attributes.declared_class is int

    def test_declared_class_for_union(self) -> None:
        attributes = FieldAttributes(
            name="key", declaring_class=object, declared_type=int | str
        )

        assert attributes.declared_class is None

    def test_metadata(self) -> None:
        @dataclass
        class Account:
            password: str = field(default="", metadata={"secret": True})

        f = fields(Account)[0]
        attributes = FieldAttributes(
            name=f.name, declaring_class=Account, declared_type=str, metadata=f.metadata
        )

        assert attributes.get_metadata("secret") is True
        assert attributes.get_metadata("missing", "default") == "default"

    def test_metadata_defaults_to_empty(self) -> None:
        first = FieldAttributes(name="a", declaring_class=object, declared_type=str)
        second = FieldAttributes(name="b", declaring_class=object, declared_type=str)

        assert dict(first.metadata) == {}
        assert first.get_metadata("secret") is None
        assert first.metadata is second.metadata
