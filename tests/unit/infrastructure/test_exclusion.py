"""Tests for exclusion strategies."""

from dataclasses import dataclass, field

from jsonbody import (
    ClassExclusionStrategy,
    FieldNameExclusionStrategy,
    JsonCodecBuilder,
    MetadataExclusionStrategy,
)


class Secret:
    def __init__(self, value: str) -> None:
        self.value = value


@dataclass
class Account:
    login: str
    password: str = field(default="", metadata={"secret": True})
    token: Secret | None = None


@dataclass
class Audited:
    login: str
    version: int = 0


@dataclass
class Other:
    version: int = 0


class TestFieldNameExclusionStrategy:
    """Tests for FieldNameExclusionStrategy."""

    def test_skips_named_fields_on_write(self) -> None:
        codec = JsonCodecBuilder().set_exclusion_strategies(
            FieldNameExclusionStrategy("password")
        ).create()

        assert codec.to_json(Account(login="ada", password="pw")) == '{"login":"ada"}'

    def test_skips_named_fields_on_read(self) -> None:
        codec = JsonCodecBuilder().set_exclusion_strategies(
            FieldNameExclusionStrategy("password")
        ).create()

        account = codec.from_json('{"login": "ada", "password": "pw"}', Account)

        assert account.password == ""

    def test_restricted_to_declaring_class(self) -> None:
        codec = JsonCodecBuilder().set_exclusion_strategies(
            FieldNameExclusionStrategy("version", declaring_class=Audited)
        ).create()

        assert codec.to_json(Audited(login="a", version=2)) == '{"login":"a"}'
        assert codec.to_json(Other(version=2)) == '{"version":2}'


class TestClassExclusionStrategy:
    """Tests for ClassExclusionStrategy."""

    def test_fields_of_skipped_class_are_dropped(self) -> None:
        codec = (
            JsonCodecBuilder()
            .serialize_nulls()
            .set_exclusion_strategies(ClassExclusionStrategy(Secret))
            .create()
        )

        text = codec.to_json(Account(login="ada", token=Secret("t")))

        assert text == '{"login":"ada","password":""}'

    def test_skipped_class_values_become_null(self) -> None:
        codec = JsonCodecBuilder().set_exclusion_strategies(
            ClassExclusionStrategy(Secret)
        ).create()

        assert codec.to_json([Secret("t"), 1]) == "[null,1]"
        assert codec.from_json('{"value": "t"}', Secret) is None

    def test_subclasses_are_skipped(self) -> None:
        class TopSecret(Secret):
            pass

        strategy = ClassExclusionStrategy(Secret)

        assert strategy.should_skip_class(TopSecret) is True
        assert strategy.should_skip_class(str) is False


class TestMetadataExclusionStrategy:
    """Tests for MetadataExclusionStrategy."""

    def test_skips_flagged_fields(self) -> None:
        codec = JsonCodecBuilder().set_exclusion_strategies(
            MetadataExclusionStrategy("secret")
        ).create()

        assert codec.to_json(Account(login="ada", password="pw")) == '{"login":"ada"}'
