# src/convene/utils/utils_text.py

import re
from pathlib import Path
from typing import Any


def remove_path_in_error_message(inner_msg: str, path: Path) -> str:
    """Drop file path mentions from a wrapped error message.

    Example:
        "Invalid JSONC syntax in /abs/path/.convene.jsonc: Expecting value"
        → "Invalid JSONC syntax: Expecting value"
    """
    clean_msg = inner_msg
    for ref in (str(path), path.name):
        for form in (f"in '{ref}'", f'in "{ref}"', f"in {ref}", ref):
            clean_msg = clean_msg.replace(form, "")
    clean_msg = re.sub(r"\s*:\s*", ": ", clean_msg)
    clean_msg = re.sub(r"\s{2,}", " ", clean_msg)
    return clean_msg.strip(": ").strip()


def plural(obj: Any) -> str:
    """Return 's' unless obj counts exactly one (by len() or as a number)."""
    try:
        count = len(obj)
    except TypeError:
        count = obj if isinstance(obj, (int, float)) else 0
    return "" if count == 1 else "s"


def quote_list(names: list[str] | tuple[str, ...]) -> str:
    """Render names as 'a', 'b' and 'c'."""
    quoted = [f"'{name}'" for name in names]
    if len(quoted) <= 1:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} and {quoted[-1]}"
