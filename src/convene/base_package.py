# src/convene/base_package.py
"""Discover the root Java package(s) of a project from its sources."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from convene.constants import JAVA_SOURCE_ROOT, JAVA_SOURCE_SUFFIX
from convene.logs import get_app_logger


PACKAGE_PATTERN = re.compile(
    r"^\s*package\s+([A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)\s*;"
)


@dataclass(frozen=True)
class NamespaceDeclaration:
    """A package declared by the sources of one directory."""

    name: str
    directory: Path


def detect_package_in_file(source_file: Path) -> str | None:
    """Return the first package declared in a source file, if any."""
    try:
        with source_file.open(encoding="utf-8", errors="replace") as f:
            for line in f:
                match = PACKAGE_PATTERN.match(line)
                if match:
                    return match.group(1)
    except OSError as e:
        get_app_logger().debug("Skipping unreadable source %s: %s", source_file, e)
    return None


def _sorted_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        get_app_logger().debug("Skipping unreadable directory %s: %s", directory, e)
        return []


def _detect_recursively(
    directory: Path,
    found: list[NamespaceDeclaration],
    visited: set[Path],
) -> None:
    real = directory.resolve()
    if real in visited:  # symlink loop
        return
    visited.add(real)

    entries = _sorted_entries(directory)
    for entry in entries:
        if entry.suffix != JAVA_SOURCE_SUFFIX or not entry.is_file():
            continue
        package = detect_package_in_file(entry)
        if package is not None:
            get_app_logger().trace(f"[detect] {directory} declares {package}")
            found.append(NamespaceDeclaration(name=package, directory=directory))
            # a declaring directory is a package root; deeper files are ignored
            return

    for entry in entries:
        if entry.is_dir():
            _detect_recursively(entry, found, visited)


def root_packages(names: Iterable[str]) -> list[str]:
    """Collapse names to roots: ``a.b`` absorbs ``a.b.c`` but not ``a.bc``."""
    roots: list[str] = []
    for name in sorted(set(names)):
        if not any(name == root or name.startswith(f"{root}.") for root in roots):
            roots.append(name)
    return roots


def detect(source_root: Path) -> list[NamespaceDeclaration]:
    """Scan a source tree for its root package declarations.

    A missing source root is not an error; it just yields nothing.
    Results are sorted by name, one declaration per root package.
    """
    if not source_root.is_dir():
        return []

    found: list[NamespaceDeclaration] = []
    _detect_recursively(source_root, found, set())

    by_name: dict[str, NamespaceDeclaration] = {}
    for declaration in sorted(found, key=lambda d: (d.name, str(d.directory))):
        by_name.setdefault(declaration.name, declaration)

    return [by_name[name] for name in root_packages(by_name)]


def detect_base_packages(project_dir: Path) -> list[str]:
    """Root packages declared under ``<project_dir>/src/main/java``."""
    return [declaration.name for declaration in detect(project_dir / JAVA_SOURCE_ROOT)]
