# src/convene/config/config_keys.py
"""Every setting the conventions understand, with env aliases and defaults."""

from convene.constants import (
    DEFAULT_MAVEN_CENTRAL_ENABLED,
    DEFAULT_PUBLISHING_ENABLED,
    ENV_BASE_PACKAGE,
    ENV_GITHUB_ACTOR,
    ENV_GITHUB_REPOSITORY_OWNER,
    ENV_GITHUB_TOKEN,
    ENV_MAVEN_CENTRAL_ENABLED,
    ENV_PUBLISHING_DEVELOPER_ID,
    ENV_PUBLISHING_DEVELOPER_NAME,
    ENV_PUBLISHING_DEVELOPER_URL,
    ENV_PUBLISHING_ENABLED,
    ENV_PUBLISHING_GITHUB_OWNER,
    PROP_BASE_PACKAGE,
    PROP_DESCRIPTION,
    PROP_GITHUB_PACKAGES_KEY,
    PROP_GITHUB_PACKAGES_USER,
    PROP_GROUP,
    PROP_LOG_LEVEL,
    PROP_MAVEN_CENTRAL_ENABLED,
    PROP_NAME,
    PROP_PUBLISHING_DEVELOPER_ID,
    PROP_PUBLISHING_DEVELOPER_NAME,
    PROP_PUBLISHING_DEVELOPER_URL,
    PROP_PUBLISHING_ENABLED,
    PROP_PUBLISHING_GITHUB_OWNER,
    PROP_STRICT_CONFIG,
)

from .config_types import COMPUTED, ConfigurationKey


MAVEN_CENTRAL_ENABLED = ConfigurationKey(
    name=PROP_MAVEN_CENTRAL_ENABLED,
    kind="boolean",
    env_aliases=(ENV_MAVEN_CENTRAL_ENABLED,),
    default=DEFAULT_MAVEN_CENTRAL_ENABLED,
    description="Add Maven Central to the project repositories.",
)
PUBLISHING_ENABLED = ConfigurationKey(
    name=PROP_PUBLISHING_ENABLED,
    kind="boolean",
    env_aliases=(ENV_PUBLISHING_ENABLED,),
    default=DEFAULT_PUBLISHING_ENABLED,
    description="Apply the publishing conventions.",
)
PUBLISHING_GITHUB_OWNER = ConfigurationKey(
    name=PROP_PUBLISHING_GITHUB_OWNER,
    env_aliases=(ENV_PUBLISHING_GITHUB_OWNER, ENV_GITHUB_REPOSITORY_OWNER),
    default=COMPUTED,
    description="GitHub owner; inferred from an io.github.<owner> group.",
)
PUBLISHING_DEVELOPER_ID = ConfigurationKey(
    name=PROP_PUBLISHING_DEVELOPER_ID,
    env_aliases=(ENV_PUBLISHING_DEVELOPER_ID,),
    default=COMPUTED,
)
PUBLISHING_DEVELOPER_NAME = ConfigurationKey(
    name=PROP_PUBLISHING_DEVELOPER_NAME,
    env_aliases=(ENV_PUBLISHING_DEVELOPER_NAME,),
    default=COMPUTED,
)
PUBLISHING_DEVELOPER_URL = ConfigurationKey(
    name=PROP_PUBLISHING_DEVELOPER_URL,
    env_aliases=(ENV_PUBLISHING_DEVELOPER_URL,),
    default=COMPUTED,
)
BASE_PACKAGE = ConfigurationKey(
    name=PROP_BASE_PACKAGE,
    env_aliases=(ENV_BASE_PACKAGE,),
    default=COMPUTED,
    description="Root Java package(s), comma separated; detected when unset.",
)
GITHUB_PACKAGES_USER = ConfigurationKey(
    name=PROP_GITHUB_PACKAGES_USER,
    env_aliases=(ENV_GITHUB_ACTOR,),
)
GITHUB_PACKAGES_KEY = ConfigurationKey(
    name=PROP_GITHUB_PACKAGES_KEY,
    env_aliases=(ENV_GITHUB_TOKEN,),
)
NAME = ConfigurationKey(name=PROP_NAME, default=COMPUTED)
DESCRIPTION = ConfigurationKey(name=PROP_DESCRIPTION)
GROUP = ConfigurationKey(name=PROP_GROUP)

DEVELOPER_KEYS: tuple[ConfigurationKey, ...] = (
    PUBLISHING_DEVELOPER_ID,
    PUBLISHING_DEVELOPER_NAME,
    PUBLISHING_DEVELOPER_URL,
)

CONVENTION_KEYS: dict[str, ConfigurationKey] = {
    key.name: key
    for key in (
        MAVEN_CENTRAL_ENABLED,
        PUBLISHING_ENABLED,
        PUBLISHING_GITHUB_OWNER,
        *DEVELOPER_KEYS,
        BASE_PACKAGE,
        GITHUB_PACKAGES_USER,
        GITHUB_PACKAGES_KEY,
        NAME,
        DESCRIPTION,
        GROUP,
    )
}

# Settings read by the tool itself; never resolved as conventions.
TOOL_KEYS: frozenset[str] = frozenset({PROP_LOG_LEVEL, PROP_STRICT_CONFIG})

KNOWN_KEYS: frozenset[str] = frozenset(CONVENTION_KEYS) | TOOL_KEYS
