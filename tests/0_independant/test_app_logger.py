# tests/0_independant/test_app_logger.py
"""Tests for the convene-specific parts of AppLogger."""

import logging
from argparse import Namespace

import pytest

import convene.logs as mod_logs


def test_app_logger_is_registered_under_package_name() -> None:
    logger = mod_logs.get_app_logger()

    assert isinstance(logger, mod_logs.AppLogger)
    assert logging.getLogger("convene") is logger


def test_determine_log_level_prefers_cli(
    monkeypatch: pytest.MonkeyPatch,
    direct_logger: mod_logs.AppLogger,
) -> None:
    # --- setup ---
    monkeypatch.setenv("JAVA_CONVENTIONS_LOG_LEVEL", "error")
    args = Namespace(log_level="debug")

    # --- execute ---
    level = direct_logger.determine_log_level(args=args, root_log_level="warning")

    # --- verify ---
    assert level == "DEBUG"


def test_determine_log_level_program_env_before_generic_env(
    monkeypatch: pytest.MonkeyPatch,
    direct_logger: mod_logs.AppLogger,
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("JAVA_CONVENTIONS_LOG_LEVEL", "warning")

    assert direct_logger.determine_log_level(args=Namespace(log_level=None)) == "WARNING"


def test_determine_log_level_settings_then_default(
    direct_logger: mod_logs.AppLogger,
) -> None:
    assert direct_logger.determine_log_level(root_log_level="error") == "ERROR"
    assert direct_logger.determine_log_level() == "INFO"


def test_level_name_tracks_set_level(direct_logger: mod_logs.AppLogger) -> None:
    direct_logger.setLevel("WARNING")
    assert direct_logger.level_name == "WARNING"

    direct_logger.setLevel("TRACE")
    assert direct_logger.level_name == "TRACE"


def test_safe_log_writes_to_original_stderr(
    capfd: pytest.CaptureFixture[str],
) -> None:
    mod_logs.safe_log("[FATAL] still here")

    assert "[FATAL] still here" in capfd.readouterr().err


@pytest.mark.parametrize(
    ("level", "expected_call"),
    [("INFO", "error"), ("WARNING", "error"), ("DEBUG", "exception")],
)
def test_error_if_not_debug_adds_traceback_only_when_debugging(
    monkeypatch: pytest.MonkeyPatch,
    direct_logger: mod_logs.AppLogger,
    level: str,
    expected_call: str,
) -> None:
    # --- setup ---
    calls: list[str] = []
    monkeypatch.setattr(direct_logger, "error", lambda *_a, **_k: calls.append("error"))
    monkeypatch.setattr(
        direct_logger, "exception", lambda *_a, **_k: calls.append("exception")
    )
    direct_logger.setLevel(level)

    # --- execute ---
    direct_logger.error_if_not_debug("broken settings")

    # --- verify ---
    assert calls == [expected_call]
