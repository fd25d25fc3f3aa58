# src/convene/config/config_parse.py
"""Typed parsing of raw property text."""

from convene.errors import ConfigurationError


TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


def parse_boolean(name: str, value: str | None, *, default: bool) -> bool:
    """Parse 'true'/'false' (any case, surrounding spaces ignored).

    None yields `default`. Anything else raises ConfigurationError naming
    the property and the offending value.
    """
    if value is None:
        return default

    configured = value.strip()
    lowered = configured.lower()
    if lowered == TRUE_LITERAL:
        return True
    if lowered == FALSE_LITERAL:
        return False

    xmsg = f"Property '{name}' must be 'true' or 'false', got '{configured}'"
    raise ConfigurationError(xmsg, key=name)


def parse_string(name: str, value: str | None) -> str | None:
    """Trim a configured value; None stays None, blank is an error."""
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        xmsg = f"Property '{name}' must not be blank"
        raise ConfigurationError(xmsg, key=name)
    return trimmed


def parse_list(name: str, value: str | None) -> list[str] | None:
    """Split a comma separated value, rejecting empty entries."""
    text = parse_string(name, value)
    if text is None:
        return None

    items = [item.strip() for item in text.split(",")]
    if any(not item for item in items):
        xmsg = f"Property '{name}' must not contain empty entries, got '{text}'"
        raise ConfigurationError(xmsg, key=name)
    return items
