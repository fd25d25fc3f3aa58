# tests/0_independant/test_parse_string.py

import pytest

import convene.config.config_parse as mod_parse
from convene.errors import ConfigurationError


def test_parse_string_trims_value() -> None:
    assert mod_parse.parse_string("publishing.githubOwner", "  acme \n") == "acme"


def test_parse_string_absent_is_none() -> None:
    assert mod_parse.parse_string("publishing.githubOwner", None) is None


@pytest.mark.parametrize("raw", ["", " ", "\t\n"])
def test_parse_string_blank_is_an_error(raw: str) -> None:
    # --- execute and verify ---
    with pytest.raises(ConfigurationError, match="must not be blank") as exc_info:
        mod_parse.parse_string("publishing.githubOwner", raw)

    assert str(exc_info.value) == "Property 'publishing.githubOwner' must not be blank"


def test_parse_list_splits_and_trims_entries() -> None:
    # --- execute ---
    result = mod_parse.parse_list("basePackage", " com.example , org.acme ")

    # --- verify ---
    assert result == ["com.example", "org.acme"]


def test_parse_list_rejects_empty_entries() -> None:
    with pytest.raises(ConfigurationError, match="empty entries"):
        mod_parse.parse_list("basePackage", "com.example,,org.acme")


def test_parse_list_blank_is_an_error() -> None:
    with pytest.raises(ConfigurationError, match="must not be blank"):
        mod_parse.parse_list("basePackage", "   ")
