# src/convene/config/__init__.py

"""Configuration handling for convene.

Loading of project settings files, layered property resolution, and
validation of the settings a project provides.
"""

from .config_keys import (
    CONVENTION_KEYS,
    DEVELOPER_KEYS,
    KNOWN_KEYS,
    TOOL_KEYS,
)
from .config_loader import (
    find_config,
    flatten_settings,
    load_project_settings,
    load_settings_file,
    parse_property_overrides,
)
from .config_parse import parse_boolean, parse_list, parse_string
from .config_resolve import PropertyResolver
from .config_store import PropertyStore, RawLookup
from .config_types import (
    COMPUTED,
    CheckstyleResolved,
    ConfigurationKey,
    ConventionsResolved,
    DeveloperResolved,
    GithubPackagesResolved,
    LicenseResolved,
    OriginType,
    ProjectSettings,
    PublishingResolved,
    ResolvedValue,
    ScmResolved,
    ValidationSummary,
)
from .config_validate import check_settings, require_all_or_none, validate_settings


__all__ = [  # noqa: RUF022
    # config_keys
    "CONVENTION_KEYS",
    "DEVELOPER_KEYS",
    "KNOWN_KEYS",
    "TOOL_KEYS",
    # config_loader
    "find_config",
    "flatten_settings",
    "load_project_settings",
    "load_settings_file",
    "parse_property_overrides",
    # config_parse
    "parse_boolean",
    "parse_list",
    "parse_string",
    # config_resolve
    "PropertyResolver",
    # config_store
    "PropertyStore",
    "RawLookup",
    # config_types
    "COMPUTED",
    "CheckstyleResolved",
    "ConfigurationKey",
    "ConventionsResolved",
    "DeveloperResolved",
    "GithubPackagesResolved",
    "LicenseResolved",
    "OriginType",
    "ProjectSettings",
    "PublishingResolved",
    "ResolvedValue",
    "ScmResolved",
    "ValidationSummary",
    # config_validate
    "check_settings",
    "require_all_or_none",
    "validate_settings",
]
