# src/convene/config/config_validate.py


from collections.abc import Mapping
from difflib import get_close_matches
from typing import Any

from convene.constants import DEFAULT_STRICT_CONFIG, PROP_STRICT_CONFIG
from convene.errors import ConfigurationError
from convene.logs import get_app_logger
from convene.utils import plural, quote_list

from .config_keys import KNOWN_KEYS
from .config_parse import parse_boolean
from .config_store import setting_to_text
from .config_types import ValidationSummary


SCALAR_TYPES = (str, bool, int, float)


# ---------------------------------------------------------------------------
# field groups
# ---------------------------------------------------------------------------


def require_all_or_none(fields: Mapping[str, object | None]) -> bool:
    """Check that a group of related properties is either complete or empty.

    Returns True when every field has a value, False when none has.
    Raises ConfigurationError naming the whole group otherwise.
    """
    present = [name for name, value in fields.items() if value is not None]
    if not present:
        return False
    if len(present) == len(fields):
        return True

    names = quote_list(list(fields))
    xmsg = f"Properties {names} must be configured together"
    missing = [name for name in fields if name not in present]
    raise ConfigurationError(xmsg, key=missing[0])


# ---------------------------------------------------------------------------
# settings validator
# ---------------------------------------------------------------------------


def _suggest(key: str) -> str:
    close = get_close_matches(key, sorted(KNOWN_KEYS), n=1, cutoff=0.6)
    return f" Did you mean '{close[0]}'?" if close else ""


def validate_settings(
    settings: Mapping[str, Any],
    *,
    strict_arg: bool | None = None,
) -> ValidationSummary:
    """Check flattened project settings against the known keys.

    Unknown keys are warnings (errors in strict mode); non-scalar values
    are always errors since every setting is read as text.
    """
    logger = get_app_logger()
    logger.trace(f"[validate_settings] Validating {len(settings)} key(s)")

    errors: list[str] = []
    try:
        strict = parse_boolean(
            PROP_STRICT_CONFIG,
            setting_to_text(settings.get(PROP_STRICT_CONFIG)),
            default=DEFAULT_STRICT_CONFIG,
        )
    except ConfigurationError as e:
        errors.append(str(e))
        strict = DEFAULT_STRICT_CONFIG
    if strict_arg is not None:
        strict = strict_arg

    summary = ValidationSummary(strict=strict)
    summary.errors.extend(errors)

    for key in sorted(settings):
        value = settings[key]
        if key not in KNOWN_KEYS:
            msg = f"Unknown setting '{key}'.{_suggest(key)}"
            if strict:
                summary.errors.append(msg)
            else:
                summary.warnings.append(msg)
            continue
        if value is not None and not isinstance(value, SCALAR_TYPES):
            summary.errors.append(
                f"Property '{key}' must be a single value, got {type(value).__name__}"
            )

    summary.valid = not summary.errors
    return summary


def check_settings(
    settings: Mapping[str, Any],
    *,
    origin: str,
    strict_arg: bool | None = None,
) -> ValidationSummary:
    """Validate, log the outcome, and raise when the settings are unusable."""
    logger = get_app_logger()
    summary = validate_settings(settings, strict_arg=strict_arg)
    mode = "strict mode" if summary.strict else "lenient mode"

    for warning in summary.warnings:
        logger.warning("%s: %s", origin, warning)

    if not summary.valid:
        details = "\n  • ".join(summary.errors)
        xmsg = (
            f"{origin} contains {len(summary.errors)}"
            f" error{plural(summary.errors)} ({mode}):\n  • {details}"
        )
        raise ConfigurationError(xmsg)

    logger.debug("Validated %s (%s) successfully.", origin, mode)
    return summary
