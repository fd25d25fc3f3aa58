# src/convene/__init__.py

"""Convene: shared Java build conventions, resolved per project.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use from build scripts or tooling.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                   → CLI entrypoint
    - resolve_conventions()    → Every convention value for a project
    - detect_base_packages()   → Root Java packages under src/main/java
    - infer_owner()            → GitHub owner from an io.github.<owner> group
    - write_checkstyle_config()→ Materialize the Checkstyle configuration
    - install_git_hooks()      → Install the pre-commit hook
"""

from .base_package import (
    NamespaceDeclaration,
    detect,
    detect_base_packages,
    root_packages,
)
from .cli import main
from .config import (
    ConfigurationKey,
    ConventionsResolved,
    PropertyResolver,
    PropertyStore,
    ResolvedValue,
    find_config,
    load_project_settings,
    require_all_or_none,
)
from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAVEN_CENTRAL_ENABLED,
    DEFAULT_PUBLISHING_ENABLED,
    DEFAULT_STRICT_CONFIG,
)
from .conventions import (
    ConventionsResolver,
    load_conventions_resolver,
    resolve_conventions,
)
from .errors import ConfigurationError
from .github_owner import infer_owner
from .logs import get_app_logger
from .meta import (
    PROGRAM_CONFIG,
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
    get_metadata,
)
from .resources import (
    ResourceRequest,
    install_git_hooks,
    load_bundled_resource,
    materialize,
    resolve_hooks_dir,
    write_checkstyle_config,
)


__all__ = [  # noqa: RUF022
    # base_package
    "NamespaceDeclaration",
    "detect",
    "detect_base_packages",
    "root_packages",
    # cli
    "main",
    # config
    "ConfigurationKey",
    "ConventionsResolved",
    "PropertyResolver",
    "PropertyStore",
    "ResolvedValue",
    "find_config",
    "load_project_settings",
    "require_all_or_none",
    # constants
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAVEN_CENTRAL_ENABLED",
    "DEFAULT_PUBLISHING_ENABLED",
    "DEFAULT_STRICT_CONFIG",
    # conventions
    "ConventionsResolver",
    "load_conventions_resolver",
    "resolve_conventions",
    # errors
    "ConfigurationError",
    # github_owner
    "infer_owner",
    # logs
    "get_app_logger",
    # meta
    "PROGRAM_CONFIG",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "Metadata",
    "get_metadata",
    # resources
    "ResourceRequest",
    "install_git_hooks",
    "load_bundled_resource",
    "materialize",
    "resolve_hooks_dir",
    "write_checkstyle_config",
]
