"""Tests for field naming policies."""

import pytest

from jsonbody import FieldNamingPolicy
from jsonbody.infrastructure.codec.naming import split_words, translate_name


class TestSplitWords:
    """Tests for split_words."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("user_name", ("", ["user", "name"])),
            ("userName", ("", ["user", "Name"])),
            ("URLValue", ("", ["URL", "Value"])),
            ("_private_value", ("_", ["private", "value"])),
            ("field2Name", ("", ["field2", "Name"])),
            ("__", ("__", [])),
        ],
    )
    def test_split(self, name: str, expected: tuple[str, list[str]]) -> None:
        assert split_words(name) == expected


class TestTranslateName:
    """Tests for translate_name."""

    @pytest.mark.parametrize(
        ("policy", "expected"),
        [
            (FieldNamingPolicy.IDENTITY, "userName"),
            (FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES, "user_name"),
            (FieldNamingPolicy.LOWER_CASE_WITH_DASHES, "user-name"),
            (FieldNamingPolicy.LOWER_CASE_WITH_DOTS, "user.name"),
            (FieldNamingPolicy.UPPER_CASE_WITH_UNDERSCORES, "USER_NAME"),
            (FieldNamingPolicy.LOWER_CAMEL_CASE, "userName"),
            (FieldNamingPolicy.UPPER_CAMEL_CASE, "UserName"),
            (FieldNamingPolicy.UPPER_CAMEL_CASE_WITH_SPACES, "User Name"),
        ],
    )
    def test_camel_case_source(self, policy: FieldNamingPolicy, expected: str) -> None:
        assert translate_name("userName", policy) == expected

    @pytest.mark.parametrize(
        ("policy", "expected"),
        [
            (FieldNamingPolicy.IDENTITY, "created_at"),
            (FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES, "created_at"),
            (FieldNamingPolicy.LOWER_CAMEL_CASE, "createdAt"),
            (FieldNamingPolicy.UPPER_CAMEL_CASE, "CreatedAt"),
            (FieldNamingPolicy.LOWER_CASE_WITH_DASHES, "created-at"),
        ],
    )
    def test_snake_case_source(self, policy: FieldNamingPolicy, expected: str) -> None:
        assert translate_name("created_at", policy) == expected

    def test_leading_underscores_kept(self) -> None:
        assert translate_name("_userName", FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES) == "_user_name"

    def test_acronyms(self) -> None:
        assert translate_name("userID", FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES) == "user_id"
        assert translate_name("HTTPStatus", FieldNamingPolicy.LOWER_CASE_WITH_DASHES) == "http-status"

    def test_only_underscores(self) -> None:
        assert translate_name("__", FieldNamingPolicy.UPPER_CAMEL_CASE) == "__"
