# src/convene/config/config_store.py


import os
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from .config_types import OriginType


class RawLookup(NamedTuple):
    """An unparsed value and the layer that supplied it."""

    raw: str
    origin: OriginType
    source: str


def setting_to_text(value: Any) -> str | None:
    """Render a settings-file scalar the way a properties file would hold it."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PropertyStore:
    """Read-only snapshot of the environment and the project settings.

    Both mappings are copied on construction, so later changes to
    os.environ or to the caller's dict never leak into a resolution pass.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> None:
        self._environ: dict[str, str] = dict(
            os.environ if environ is None else environ
        )
        self._settings: dict[str, Any] = dict(settings or {})

    @property
    def settings(self) -> Mapping[str, Any]:
        return self._settings

    def env_value(self, aliases: Iterable[str]) -> tuple[str, str] | None:
        """Return (alias, value) for the first alias set in the environment."""
        for alias in aliases:
            value = self._environ.get(alias)
            if value is not None:
                return alias, value
        return None

    def setting(self, name: str) -> str | None:
        return setting_to_text(self._settings.get(name))

    def lookup(self, name: str, aliases: Iterable[str] = ()) -> RawLookup | None:
        """Find the raw value for `name`: environment first, then settings."""
        env_hit = self.env_value(aliases)
        if env_hit is not None:
            alias, value = env_hit
            return RawLookup(raw=value, origin="env", source=alias)

        setting = self.setting(name)
        if setting is not None:
            return RawLookup(raw=setting, origin="project", source=name)

        return None
