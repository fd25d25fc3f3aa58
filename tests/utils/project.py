# tests/utils/project.py
"""Helpers that lay out small Java projects on disk."""

import json
from pathlib import Path
from typing import Any

import convene.meta as mod_meta


def write_java_source(
    project_dir: Path,
    relative_path: str,
    package: str | None,
    *,
    body: str = "public final class Example {}\n",
) -> Path:
    """Write a .java file under src/main/java, optionally declaring a package."""
    source = project_dir / "src" / "main" / "java" / relative_path
    source.parent.mkdir(parents=True, exist_ok=True)
    header = f"package {package};\n\n" if package is not None else ""
    source.write_text(header + body, encoding="utf-8")
    return source


def make_java_project(
    project_dir: Path,
    *,
    package: str = "com.example.app",
) -> Path:
    """Create a project with one class declaring `package`."""
    project_dir.mkdir(parents=True, exist_ok=True)
    relative = package.replace(".", "/") + "/App.java"
    write_java_source(project_dir, relative, package)
    return project_dir


def write_settings_file(
    project_dir: Path,
    settings: dict[str, Any],
    *,
    suffix: str = ".json",
) -> Path:
    """Write a .convene.json (or .jsonc) settings file from a dict."""
    path = project_dir / f".{mod_meta.PROGRAM_CONFIG}{suffix}"
    path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
    return path


def write_toml_settings(project_dir: Path, content: str) -> Path:
    path = project_dir / f".{mod_meta.PROGRAM_CONFIG}.toml"
    path.write_text(content, encoding="utf-8")
    return path
