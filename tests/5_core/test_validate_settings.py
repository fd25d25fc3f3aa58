# tests/5_core/test_validate_settings.py

import pytest

import convene.config.config_validate as mod_validate
from convene.errors import ConfigurationError


# ---------------------------------------------------------------------------
# require_all_or_none
# ---------------------------------------------------------------------------


def test_require_all_or_none_all_present() -> None:
    assert mod_validate.require_all_or_none({"a": "1", "b": "2"}) is True


def test_require_all_or_none_none_present() -> None:
    assert mod_validate.require_all_or_none({"a": None, "b": None}) is False


def test_require_all_or_none_mixed_names_whole_group() -> None:
    # --- execute and verify ---
    with pytest.raises(ConfigurationError) as exc_info:
        mod_validate.require_all_or_none(
            {
                "publishing.developer.id": "jdoe",
                "publishing.developer.name": None,
                "publishing.developer.url": None,
            }
        )

    message = str(exc_info.value)
    assert message == (
        "Properties 'publishing.developer.id', 'publishing.developer.name' and"
        " 'publishing.developer.url' must be configured together"
    )
    assert exc_info.value.key == "publishing.developer.name"


# ---------------------------------------------------------------------------
# validate_settings
# ---------------------------------------------------------------------------


def test_validate_settings_known_keys_are_valid() -> None:
    summary = mod_validate.validate_settings(
        {"publishing.enabled": False, "basePackage": "com.example", "log_level": "debug"}
    )

    assert summary.valid
    assert summary.errors == []
    assert summary.warnings == []


def test_validate_settings_unknown_key_warns_with_hint() -> None:
    # --- execute ---
    summary = mod_validate.validate_settings({"basePackge": "com.example"})

    # --- verify ---
    assert summary.valid
    assert summary.warnings == [
        "Unknown setting 'basePackge'. Did you mean 'basePackage'?"
    ]


def test_validate_settings_unknown_key_is_error_in_strict_mode() -> None:
    summary = mod_validate.validate_settings(
        {"strict_config": True, "publishing.enabeld": True}
    )

    assert not summary.valid
    assert summary.strict
    assert "Did you mean 'publishing.enabled'?" in summary.errors[0]


def test_validate_settings_strict_arg_overrides_file() -> None:
    summary = mod_validate.validate_settings(
        {"strict_config": True, "whatever": 1}, strict_arg=False
    )

    assert summary.valid
    assert len(summary.warnings) == 1


def test_validate_settings_rejects_non_scalar_values() -> None:
    summary = mod_validate.validate_settings({"basePackage": ["com.a", "com.b"]})

    assert not summary.valid
    assert summary.errors == ["Property 'basePackage' must be a single value, got list"]


def test_validate_settings_strict_config_must_be_boolean() -> None:
    summary = mod_validate.validate_settings({"strict_config": "yes"})

    assert not summary.valid
    assert summary.errors == [
        "Property 'strict_config' must be 'true' or 'false', got 'yes'"
    ]


@pytest.mark.parametrize("value", ["true", " TRUE ", True])
def test_validate_settings_strict_config_accepts_text_from_overrides(
    value: object,
) -> None:
    # --- execute ---
    summary = mod_validate.validate_settings({"strict_config": value, "nme": "x"})

    # --- verify ---
    assert summary.strict
    assert len(summary.errors) == 1
    assert summary.errors[0].startswith("Unknown setting 'nme'.")


def test_check_settings_accepts_strict_config_override_text() -> None:
    summary = mod_validate.check_settings({"strict_config": "false"}, origin="cli")

    assert summary.valid
    assert not summary.strict


def test_check_settings_raises_with_all_errors() -> None:
    # --- execute and verify ---
    with pytest.raises(ConfigurationError) as exc_info:
        mod_validate.check_settings(
            {"strict_config": True, "nme": "x", "group": {"a": 1}},
            origin=".convene.toml",
        )

    message = str(exc_info.value)
    assert message.startswith(".convene.toml contains 2 errors (strict mode)")
    assert "Unknown setting 'nme'" in message
    assert "Property 'group' must be a single value" in message


def test_check_settings_logs_warnings(capsys: pytest.CaptureFixture[str]) -> None:
    summary = mod_validate.check_settings({"colour": "red"}, origin=".convene.json")

    assert summary.valid
    assert ".convene.json: Unknown setting 'colour'" in capsys.readouterr().err
