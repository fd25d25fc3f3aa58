# src/convene/config/config_resolve.py


from collections.abc import Iterable
from typing import Any, cast

from convene.logs import get_app_logger

from .config_parse import parse_boolean, parse_string
from .config_store import PropertyStore
from .config_types import ConfigurationKey, ResolvedValue


# (kind, name, aliases, default)
_CacheKey = tuple[str, str, tuple[str, ...], Any]


class PropertyResolver:
    """Applies env → project setting → default precedence with type checks.

    Each resolved value is memoized for the lifetime of the resolver, so a
    key asked for twice within one pass always answers the same.
    """

    def __init__(self, store: PropertyStore) -> None:
        self.store = store
        self._cache: dict[_CacheKey, ResolvedValue[Any]] = {}

    # --- booleans -------------------------------------------------------------

    def resolve_boolean_value(
        self,
        name: str,
        env_aliases: Iterable[str] = (),
        *,
        default: bool,
    ) -> ResolvedValue[bool]:
        aliases = tuple(env_aliases)
        cache_key: _CacheKey = ("boolean", name, aliases, default)
        if cache_key in self._cache:
            return cast("ResolvedValue[bool]", self._cache[cache_key])

        hit = self.store.lookup(name, aliases)
        if hit is None:
            resolved: ResolvedValue[bool] = ResolvedValue(default, "default")
        else:
            value = parse_boolean(name, hit.raw, default=default)
            resolved = ResolvedValue(value, hit.origin, hit.source)

        get_app_logger().trace(
            f"[resolve_boolean] {name}={resolved.value} ({resolved.describe()})"
        )
        self._cache[cache_key] = resolved
        return resolved

    def resolve_boolean(
        self,
        name: str,
        env_aliases: Iterable[str] = (),
        *,
        default: bool,
    ) -> bool:
        return self.resolve_boolean_value(name, env_aliases, default=default).value

    # --- strings --------------------------------------------------------------

    def resolve_string_value(
        self,
        name: str,
        env_aliases: Iterable[str] = (),
    ) -> ResolvedValue[str | None]:
        aliases = tuple(env_aliases)
        cache_key: _CacheKey = ("string", name, aliases, None)
        if cache_key in self._cache:
            return cast("ResolvedValue[str | None]", self._cache[cache_key])

        hit = self.store.lookup(name, aliases)
        if hit is None:
            resolved: ResolvedValue[str | None] = ResolvedValue(None, "default")
        else:
            resolved = ResolvedValue(parse_string(name, hit.raw), hit.origin, hit.source)

        get_app_logger().trace(
            f"[resolve_string] {name}={resolved.value!r} ({resolved.describe()})"
        )
        self._cache[cache_key] = resolved
        return resolved

    def resolve_string(self, name: str, env_aliases: Iterable[str] = ()) -> str | None:
        return self.resolve_string_value(name, env_aliases).value

    # --- registry keys --------------------------------------------------------

    def resolve_key(self, key: ConfigurationKey) -> ResolvedValue[Any]:
        """Resolve a registered key by its kind.

        Computed keys come back with value None when nothing is configured;
        the caller decides how to infer them.
        """
        if key.kind == "boolean":
            if not isinstance(key.default, bool):
                xmsg = f"Boolean key '{key.name}' needs a fixed boolean default"
                raise TypeError(xmsg)
            return self.resolve_boolean_value(
                key.name, key.env_aliases, default=key.default
            )

        resolved = self.resolve_string_value(key.name, key.env_aliases)
        if resolved.value is None and isinstance(key.default, str):
            return ResolvedValue(key.default, "default")
        return resolved

    def origins(self) -> dict[str, str]:
        """Describe which layer supplied each value resolved so far."""
        return {
            cache_key[1]: resolved.describe()
            for cache_key, resolved in self._cache.items()
        }
