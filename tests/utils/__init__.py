# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .project import (
    make_java_project,
    write_java_source,
    write_settings_file,
    write_toml_settings,
)


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
    # project
    "make_java_project",
    "write_java_source",
    "write_settings_file",
    "write_toml_settings",
]
