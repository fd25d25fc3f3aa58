# src/convene/logs.py

import argparse
import logging
import os
import sys
from contextlib import suppress
from typing import Any, cast

from apathetic_logging import (
    Logger,
    registerDefaultLogLevel,
    registerLogger,
    registerLogLevelEnvVars,
)

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE


# Levels accepted by --log-level and the log_level setting, most verbose first.
LEVEL_ORDER = ["trace", "debug", "info", "warning", "error", "critical", "silent"]

LOG_LEVEL_ENV_VARS = [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]


def safe_log(msg: str) -> None:
    """Write to the interpreter's original stderr when logging itself broke."""
    with suppress(Exception):
        print(msg, file=sys.__stderr__)


class AppLogger(Logger):
    """App-specific logger class."""

    def determine_log_level(
        self,
        *,
        args: argparse.Namespace | None = None,
        root_log_level: str | None = None,
    ) -> str:
        """Pick a level name: CLI flag, then env, then settings, then default."""
        args_level = getattr(args, "log_level", None)
        if args_level is not None:
            return str(args_level).upper()

        for env_name in LOG_LEVEL_ENV_VARS:
            env_level = os.getenv(env_name)
            if env_level:
                return env_level.upper()

        return (root_log_level or DEFAULT_LOG_LEVEL).upper()

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.getEffectiveLevel())

    def error_if_not_debug(self, msg: str, *args: Any) -> None:
        """Log an error; include the traceback only at debug or lower."""
        if self.isEnabledFor(logging.DEBUG):
            self.exception(msg, *args, stacklevel=2)
        else:
            self.error(msg, *args)

    def critical_if_not_debug(self, msg: str, *args: Any) -> None:
        if self.isEnabledFor(logging.DEBUG):
            self.critical(msg, *args, exc_info=True, stacklevel=2)
        else:
            self.critical(msg, *args)


# --- Logger initialization ---------------------------------------------------

# Must happen *before* any loggers are created.
logging.setLoggerClass(AppLogger)

# Registers TRACE and SILENT with the logging module
AppLogger.extendLoggingModule()

registerLogLevelEnvVars(LOG_LEVEL_ENV_VARS)
registerDefaultLogLevel(DEFAULT_LOG_LEVEL)
registerLogger(PROGRAM_PACKAGE)

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))


def get_app_logger() -> AppLogger:
    """Return the configured app logger."""
    return _APP_LOGGER
