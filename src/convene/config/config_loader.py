# src/convene/config/config_loader.py


import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from convene.errors import ConfigurationError
from convene.logs import get_app_logger
from convene.meta import PROGRAM_CONFIG
from convene.utils import load_jsonc, load_toml, remove_path_in_error_message

from .config_types import ProjectSettings


# Preferred first when several sit in the same directory
CONFIG_CANDIDATES: tuple[str, ...] = (
    f".{PROGRAM_CONFIG}.toml",
    f".{PROGRAM_CONFIG}.jsonc",
    f".{PROGRAM_CONFIG}.json",
)


def find_config(
    project_dir: Path,
    config_path: Path | str | None = None,
    *,
    missing_level: str = "debug",
) -> Path | None:
    """Locate the project settings file.

    Search order:
      1. Explicit path (--config)
      2. .convene.toml, .convene.jsonc, .convene.json in project_dir,
         then in each parent directory

    Returns the first matching path, or None if no settings file exists;
    a project without one simply relies on env vars and defaults.
    """
    logger = get_app_logger()

    # --- 1. Explicit config path ---
    if config_path is not None:
        config = Path(config_path).expanduser()
        if not config.is_absolute():
            config = project_dir / config
        config = config.resolve()
        logger.trace(f"[find_config] Checking explicit path: {config}")
        if not config.exists():
            xmsg = f"Specified config file not found: {config}"
            raise FileNotFoundError(xmsg)
        if config.is_dir():
            xmsg = f"Specified config path is a directory, not a file: {config}"
            raise ValueError(xmsg)
        return config

    # --- 2. Default candidates (project dir and parents) ---
    current = project_dir.resolve()
    while True:
        found = [
            current / name for name in CONFIG_CANDIDATES if (current / name).is_file()
        ]
        if found:
            break
        parent = current.parent
        if parent == current:
            found = []
            break
        current = parent

    if not found:
        level = logging.getLevelName(missing_level.upper())
        if not isinstance(level, int):
            level = logging.DEBUG
        logger.log(level, "No settings file found in %s or parents", project_dir)
        return None

    if len(found) > 1:
        names = ", ".join(p.name for p in found)
        logger.warning(
            "Multiple settings files detected (%s); using %s.", names, found[0].name
        )
    return found[0]


def load_settings_file(config_path: Path) -> dict[str, Any]:
    """Load the raw (possibly nested) settings mapping from a file."""
    logger = get_app_logger()
    logger.trace(f"[load_settings_file] Loading from {config_path} ({config_path.suffix})")

    try:
        if config_path.suffix == ".toml":
            data: Any = load_toml(config_path)
        else:
            data = load_jsonc(config_path)
    except ValueError as e:
        clean_msg = remove_path_in_error_message(str(e), config_path)
        xmsg = f"Error while loading settings file '{config_path.name}': {clean_msg}"
        raise ValueError(xmsg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        xmsg = (
            f"Settings file '{config_path.name}' must hold an object,"
            f" not {type(data).__name__}"
        )
        raise TypeError(xmsg)
    return data


def flatten_settings(raw: Mapping[str, Any], prefix: str = "") -> ProjectSettings:
    """Flatten nested tables into dotted keys.

    {"publishing": {"enabled": False}} → {"publishing.enabled": False}.
    Keys that are already dotted are kept; a key reachable both ways
    is rejected rather than silently picking one.
    """
    flat: ProjectSettings = {}
    for key, value in raw.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            nested = flatten_settings(value, prefix=f"{full_key}.")
        else:
            nested = {full_key: value}
        for nested_key, nested_value in nested.items():
            if nested_key in flat:
                xmsg = f"Property '{nested_key}' is configured more than once"
                raise ConfigurationError(xmsg, key=nested_key)
            flat[nested_key] = nested_value
    return flat


def parse_property_overrides(items: Iterable[str] | None) -> ProjectSettings:
    """Parse repeated `-P key=value` CLI arguments.

    The value is kept verbatim (blank values are rejected later, by the
    resolver, with the property name in the message).
    """
    overrides: ProjectSettings = {}
    for item in items or ():
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            xmsg = f"Invalid property override '{item}': expected KEY=VALUE"
            raise ValueError(xmsg)
        overrides[key] = value
    return overrides


def load_project_settings(
    project_dir: Path,
    *,
    config_path: Path | str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> tuple[Path | None, ProjectSettings]:
    """Find and load the project settings, then apply CLI overrides on top.

    Returns (settings_file, flattened settings).
    """
    logger = get_app_logger()

    settings_file = find_config(project_dir, config_path)
    settings: ProjectSettings = {}
    if settings_file is not None:
        settings = flatten_settings(load_settings_file(settings_file))
        logger.debug(
            "Loaded %d setting(s) from %s", len(settings), settings_file.name
        )

    if overrides:
        logger.trace(f"[load_project_settings] CLI overrides: {sorted(overrides)}")
        settings.update(overrides)

    return settings_file, settings
