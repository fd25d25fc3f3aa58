# src/convene/meta.py
"""Program identity shared by the CLI, logger, and config discovery."""

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version


PROGRAM_DISPLAY = "Convene"
PROGRAM_SCRIPT = "convene"
PROGRAM_PACKAGE = "convene"
PROGRAM_CONFIG = "convene"
PROGRAM_ENV = "JAVA_CONVENTIONS"
PROGRAM_DIST = "convene"


@dataclass(frozen=True)
class Metadata:
    """Version information reported by `--version`."""

    version: str
    dist: str = PROGRAM_DIST

    def __str__(self) -> str:
        return f"{PROGRAM_DISPLAY} {self.version}"


def get_metadata() -> Metadata:
    try:
        return Metadata(version=version(PROGRAM_DIST))
    except PackageNotFoundError:
        return Metadata(version="unknown (source checkout)")
