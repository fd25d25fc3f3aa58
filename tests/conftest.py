# tests/conftest.py
"""Shared test setup for convene."""

from collections.abc import Generator

import pytest

import convene.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL
from tests.utils.log_fixtures import direct_logger


# These fixtures are intentionally re-exported so pytest can discover them.
__all__ = [
    "direct_logger",
]


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger level before and after each test.

    The app logger is a module-level singleton, and the CLI changes its
    level; without this, one test's verbosity leaks into the next.
    """
    logger = mod_logs.get_app_logger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop convention env vars that a CI runner may have set."""
    for name in (
        "GITHUB_REPOSITORY_OWNER",
        "GITHUB_ACTOR",
        "GITHUB_TOKEN",
        "LOG_LEVEL",
        "JAVA_CONVENTIONS_LOG_LEVEL",
        "JAVA_CONVENTIONS_MAVEN_CENTRAL_ENABLED",
        "JAVA_CONVENTIONS_PUBLISHING_ENABLED",
        "JAVA_CONVENTIONS_PUBLISHING_GITHUB_OWNER",
        "JAVA_CONVENTIONS_PUBLISHING_DEVELOPER_ID",
        "JAVA_CONVENTIONS_PUBLISHING_DEVELOPER_NAME",
        "JAVA_CONVENTIONS_PUBLISHING_DEVELOPER_URL",
        "JAVA_CONVENTIONS_BASE_PACKAGE",
    ):
        monkeypatch.delenv(name, raising=False)


# ----------------------------------------------------------------------
# Hooks
# ----------------------------------------------------------------------


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip tests marked `debug` unless asked for with -k debug."""
    keywords = config.getoption("-k") or ""
    if "debug" in keywords.lower():
        return

    for item in items:
        if item.get_closest_marker("debug") is not None:
            item.add_marker(
                pytest.mark.skip(reason="Skipped debug test (use -k debug to run)"),
            )
