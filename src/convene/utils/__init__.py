# src/convene/utils/__init__.py

from .utils_files import load_jsonc, load_toml
from .utils_paths import shorten_path_for_display
from .utils_text import plural, quote_list, remove_path_in_error_message


__all__ = [  # noqa: RUF022
    # utils_files
    "load_jsonc",
    "load_toml",
    # utils_paths
    "shorten_path_for_display",
    # utils_text
    "plural",
    "quote_list",
    "remove_path_in_error_message",
]
