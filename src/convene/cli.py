# src/convene/cli.py

import argparse
import json
import platform
import sys
from difflib import get_close_matches
from pathlib import Path
from typing import Any

from .config import parse_property_overrides
from .conventions import ConventionsResolver, load_conventions_resolver
from .errors import ConfigurationError
from .logs import LEVEL_ORDER, get_app_logger, safe_log
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT, get_metadata
from .resources import install_git_hooks, write_checkstyle_config
from .utils import shorten_path_for_display


COMMANDS = ("resolve", "write-checkstyle-config", "install-git-hooks", "setup-project")
DEFAULT_COMMAND = "resolve"
OUTPUT_FORMATS = ("text", "json")

REDACTED = "****"


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        # Build known option strings: ["-v", "--verbose", "--log-level", ...]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # "unrecognized arguments: --projct-dir ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")
        # "argument command: invalid choice: 'reslove' (choose from ...)"
        elif "invalid choice:" in message:
            bad = message.split("invalid choice:", 1)[1].split("(", 1)[0]
            close = get_close_matches(bad.strip(" '"), COMMANDS, n=1, cutoff=0.6)
            if close:
                hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description="Resolve shared Java build conventions for a project.",
    )

    parser.add_argument(
        "command",
        nargs="?",
        choices=COMMANDS,
        default=DEFAULT_COMMAND,
        help=f"What to do (default: {DEFAULT_COMMAND}).",
    )

    # --- Project selection ---
    parser.add_argument(
        "--project-dir",
        default=".",
        help="Project root directory (default: current directory).",
    )
    parser.add_argument("-c", "--config", help="Path to the project settings file.")
    parser.add_argument(
        "-P",
        "--property",
        action="append",
        dest="properties",
        metavar="KEY=VALUE",
        help="Set a project property; repeatable. Overrides the settings file.",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        dest="output_format",
        help="Output format for 'resolve' (default: text).",
    )

    # --- Color ---
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        "--no-color",
        dest="use_color",
        action="store_const",
        const=False,
        help="Disable ANSI color output.",
    )
    color.add_argument(
        "--color",
        dest="use_color",
        action="store_const",
        const=True,
        help="Force-enable ANSI color output (overrides auto-detect).",
    )
    color.set_defaults(use_color=None)

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


def _initialize_logger(args: argparse.Namespace) -> None:
    """Initialize logger with CLI args, env vars, and defaults."""
    logger = get_app_logger()
    log_level = logger.determine_log_level(args=args)
    logger.setLevel(log_level)
    if args.use_color is not None:
        logger.enable_color = args.use_color
    logger.trace("[BOOT] log-level initialized: %s", logger.level_name)

    logger.debug(
        "Runtime: Python %s (%s)\n    %s",
        platform.python_version(),
        platform.python_implementation(),
        sys.version.replace("\n", " "),
    )


def _load_resolver(args: argparse.Namespace) -> ConventionsResolver:
    """Check the project directory, then load its settings into a resolver."""
    logger = get_app_logger()
    project_dir = Path(args.project_dir).expanduser().resolve()
    if not project_dir.is_dir():
        xmsg = f"Project directory not found: {project_dir}"
        raise FileNotFoundError(xmsg)

    resolver = load_conventions_resolver(
        project_dir,
        overrides=parse_property_overrides(args.properties),
        config_path=args.config,
        args=args,
    )

    if resolver.settings_file is not None:
        logger.debug(
            "Using settings: %s",
            shorten_path_for_display(
                resolver.settings_file, cwd=Path.cwd(), project_dir=project_dir
            ),
        )
    return resolver


def _redact(resolved: dict[str, Any]) -> dict[str, Any]:
    """Copy of the resolved values with credentials masked for display."""
    output = dict(resolved)
    publishing = output.get("publishing")
    if publishing and publishing.get("github_packages"):
        packages = dict(publishing["github_packages"])
        if packages.get("password") is not None:
            packages["password"] = REDACTED
        output["publishing"] = {**publishing, "github_packages": packages}
    return output


def _format_text(data: Any, indent: int = 0) -> list[str]:
    pad = "  " * indent
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"{pad}{key}:")
            lines.extend(_format_text(value, indent + 1))
        elif isinstance(value, list):
            lines.append(f"{pad}{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, bool):
            lines.append(f"{pad}{key}: {'true' if value else 'false'}")
        elif value is None:
            lines.append(f"{pad}{key}: -")
        else:
            lines.append(f"{pad}{key}: {value}")
    return lines


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


def _run_resolve(args: argparse.Namespace) -> None:
    resolver = _load_resolver(args)
    resolved = _redact(dict(resolver.resolve()))
    if args.output_format == "json":
        print(json.dumps(resolved, indent=2, default=str))
    else:
        print("\n".join(_format_text(resolved)))


def _run_write_checkstyle_config(args: argparse.Namespace) -> None:
    resolver = _load_resolver(args)
    write_checkstyle_config(resolver.project_dir)


def _run_install_git_hooks(args: argparse.Namespace) -> None:
    resolver = _load_resolver(args)
    install_git_hooks(resolver.project_dir)


def _run_setup_project(args: argparse.Namespace) -> None:
    logger = get_app_logger()
    resolver = _load_resolver(args)
    installed = install_git_hooks(resolver.project_dir)
    if installed is None:
        logger.warning("Project setup finished without git hooks (not a git checkout).")
    else:
        logger.info("Project setup complete.")


_COMMAND_HANDLERS = {
    "resolve": _run_resolve,
    "write-checkstyle-config": _run_write_checkstyle_config,
    "install-git-hooks": _run_install_git_hooks,
    "setup-project": _run_setup_project,
}


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = get_app_logger()  # init (use env + defaults)

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)

        # --- Early runtime init (use CLI + env + defaults) ---
        _initialize_logger(args)

        # --- Version flag ---
        if args.version:
            meta = get_metadata()
            logger.info("%s %s", PROGRAM_DISPLAY, meta.version)
            return 0

        # --- Keep stdout machine-readable ---
        if args.output_format == "json" and args.log_level is None:
            args.log_level = "warning"
            logger.setLevel("WARNING")

        _COMMAND_HANDLERS[args.command](args)

    except (ConfigurationError, FileNotFoundError, ValueError, TypeError, OSError) as e:
        # controlled termination
        try:
            logger.error_if_not_debug(str(e))
        except Exception:  # noqa: BLE001
            safe_log(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    except Exception as e:  # noqa: BLE001
        # unexpected internal error
        try:
            logger.critical_if_not_debug("Unexpected internal error: %s", e)
        except Exception:  # noqa: BLE001
            safe_log(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    else:
        return 0
