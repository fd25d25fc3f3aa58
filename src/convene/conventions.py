# src/convene/conventions.py
"""Resolve every convention value a Java project build consumes.

The resolver works from fixed snapshots of the environment, the project
settings and the source tree; running it twice on the same snapshots gives
the same answers.
"""

import argparse
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .base_package import detect_base_packages
from .config import (
    CheckstyleResolved,
    ConventionsResolved,
    DeveloperResolved,
    GithubPackagesResolved,
    LicenseResolved,
    ProjectSettings,
    PropertyResolver,
    PropertyStore,
    PublishingResolved,
    ScmResolved,
    check_settings,
    load_project_settings,
    parse_list,
    require_all_or_none,
)
from .config import config_keys as keys
from .constants import (
    CHECKSTYLE_CONFIG_NAME,
    CHECKSTYLE_OUTPUT_DIR,
    CHECKSTYLE_SUPPRESSIONS_NAME,
    GITHUB_PACKAGES_REPOSITORY_NAME,
    GITHUB_PACKAGES_URL,
    GITHUB_URL,
    JAVA_SOURCE_ROOT,
    LICENSE_NAME,
    LICENSE_URL,
    PROP_BASE_PACKAGE,
    PROP_LOG_LEVEL,
    PROP_NAME,
    PROP_PUBLISHING_DEVELOPER_ID,
    PROP_PUBLISHING_DEVELOPER_NAME,
    PROP_PUBLISHING_DEVELOPER_URL,
    PROP_PUBLISHING_GITHUB_OWNER,
)
from .errors import ConfigurationError
from .github_owner import infer_owner
from .logs import get_app_logger


_UNSET: Any = object()


class ConventionsResolver:
    """Answers convention questions for one project.

    Inferred values (base packages, owner, name) are memoized on the
    instance and never written back into the settings snapshot.
    """

    def __init__(
        self,
        project_dir: Path,
        settings: Mapping[str, Any] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        settings_file: Path | None = None,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.settings_file = settings_file
        self.resolver = PropertyResolver(PropertyStore(environ, settings))

        self._base_packages: list[str] | None = None
        self._owner: str | None = _UNSET
        self._name: str | None = None
        self._inferred: set[str] = set()

    # --- switches -------------------------------------------------------------

    def maven_central_enabled(self) -> bool:
        return self.resolver.resolve_key(keys.MAVEN_CENTRAL_ENABLED).value

    def publishing_enabled(self) -> bool:
        return self.resolver.resolve_key(keys.PUBLISHING_ENABLED).value

    # --- project identity -----------------------------------------------------

    def project_name(self) -> str:
        if self._name is None:
            configured = self.resolver.resolve_key(keys.NAME).value
            if configured is None:
                configured = self.project_dir.resolve().name
                self._inferred.add(PROP_NAME)
            self._name = configured
        return self._name

    def description(self) -> str | None:
        """Configured description; a blank one counts as unset."""
        raw = self.resolver.store.lookup(
            keys.DESCRIPTION.name, keys.DESCRIPTION.env_aliases
        )
        if raw is None or not raw.raw.strip():
            return None
        return self.resolver.resolve_key(keys.DESCRIPTION).value

    def group(self) -> str | None:
        return self.resolver.resolve_key(keys.GROUP).value

    # --- base package ---------------------------------------------------------

    def base_packages(self) -> list[str]:
        """Configured root package(s), or the ones declared in the sources."""
        if self._base_packages is not None:
            return self._base_packages

        configured = self.resolver.resolve_key(keys.BASE_PACKAGE).value
        if configured is not None:
            self._base_packages = parse_list(PROP_BASE_PACKAGE, configured)
            return self._base_packages

        detected = detect_base_packages(self.project_dir)
        if not detected:
            xmsg = (
                f"Property '{PROP_BASE_PACKAGE}' must be configured or at least"
                " one Java package declaration must be discoverable under"
                f" {JAVA_SOURCE_ROOT}"
            )
            raise ConfigurationError(xmsg, key=PROP_BASE_PACKAGE)

        get_app_logger().info(
            "Inferred '%s=%s' from source packages under %s",
            PROP_BASE_PACKAGE,
            ",".join(detected),
            JAVA_SOURCE_ROOT,
        )
        self._inferred.add(PROP_BASE_PACKAGE)
        self._base_packages = detected
        return detected

    def null_away_annotated_packages(self) -> str:
        return ",".join(self.base_packages())

    # --- publishing -----------------------------------------------------------

    def github_owner(self) -> str | None:
        """Configured or env-supplied owner, else one inferred from `group`."""
        if self._owner is not _UNSET:
            return self._owner

        owner = self.resolver.resolve_key(keys.PUBLISHING_GITHUB_OWNER).value
        if owner is None:
            owner = infer_owner(self.group())
            if owner is not None:
                get_app_logger().debug(
                    "Inferred '%s=%s' from group", PROP_PUBLISHING_GITHUB_OWNER, owner
                )
                self._inferred.add(PROP_PUBLISHING_GITHUB_OWNER)
        self._owner = owner
        return owner

    def developer(self) -> DeveloperResolved | None:
        """Developer identity for the POM.

        Each field left unset falls back to the owner; the effective
        fields must then be all present or all absent.
        """
        configured = {
            key.name: self.resolver.resolve_key(key).value for key in keys.DEVELOPER_KEYS
        }

        owner = self.github_owner()
        fallbacks: dict[str, str | None] = {
            PROP_PUBLISHING_DEVELOPER_ID: owner,
            PROP_PUBLISHING_DEVELOPER_NAME: owner,
            PROP_PUBLISHING_DEVELOPER_URL: f"{GITHUB_URL}/{owner}" if owner else None,
        }
        effective = {
            name: value if value is not None else fallbacks[name]
            for name, value in configured.items()
        }

        if not require_all_or_none(effective):
            return None
        return DeveloperResolved(
            id=effective[PROP_PUBLISHING_DEVELOPER_ID],  # type: ignore[typeddict-item]
            name=effective[PROP_PUBLISHING_DEVELOPER_NAME],  # type: ignore[typeddict-item]
            url=effective[PROP_PUBLISHING_DEVELOPER_URL],  # type: ignore[typeddict-item]
        )

    def github_packages(self) -> GithubPackagesResolved | None:
        owner = self.github_owner()
        if owner is None:
            return None
        return GithubPackagesResolved(
            name=GITHUB_PACKAGES_REPOSITORY_NAME,
            url=f"{GITHUB_PACKAGES_URL}/{owner}/{self.project_name()}",
            username=self.resolver.resolve_key(keys.GITHUB_PACKAGES_USER).value,
            password=self.resolver.resolve_key(keys.GITHUB_PACKAGES_KEY).value,
        )

    def publishing(self) -> PublishingResolved | None:
        if not self.publishing_enabled():
            return None

        owner = self.github_owner()
        repository = self.project_name()
        url: str | None = None
        scm: ScmResolved | None = None
        if owner is not None:
            url = f"{GITHUB_URL}/{owner}/{repository}"
            scm = ScmResolved(
                url=url,
                connection=f"scm:git:{url}.git",
                developer_connection=(
                    f"scm:git:ssh://git@github.com/{owner}/{repository}.git"
                ),
            )

        return PublishingResolved(
            github_owner=owner,
            github_repository=repository,
            pom_name=repository,
            pom_description=self.description() or self.project_name(),
            url=url,
            scm=scm,
            license=LicenseResolved(name=LICENSE_NAME, url=LICENSE_URL),
            developer=self.developer(),
            github_packages=self.github_packages(),
        )

    # --- checkstyle -----------------------------------------------------------

    def checkstyle(self) -> CheckstyleResolved:
        config_dir = self.project_dir / CHECKSTYLE_OUTPUT_DIR
        return CheckstyleResolved(
            config_dir=config_dir,
            config_file=config_dir / CHECKSTYLE_CONFIG_NAME,
            suppressions_file=config_dir / CHECKSTYLE_SUPPRESSIONS_NAME,
        )

    # --- everything -----------------------------------------------------------

    def origins(self) -> dict[str, str]:
        origins = self.resolver.origins()
        for name in self._inferred:
            origins[name] = "inferred"
        return dict(sorted(origins.items()))

    def resolve(self) -> ConventionsResolved:
        resolved = ConventionsResolved(
            project_dir=self.project_dir,
            settings_file=self.settings_file,
            name=self.project_name(),
            description=self.description(),
            group=self.group(),
            maven_central_enabled=self.maven_central_enabled(),
            publishing_enabled=self.publishing_enabled(),
            base_packages=self.base_packages(),
            null_away_annotated_packages=self.null_away_annotated_packages(),
            publishing=self.publishing(),
            checkstyle=self.checkstyle(),
        )
        resolved["origins"] = self.origins()
        return resolved


def load_conventions_resolver(
    project_dir: Path,
    *,
    environ: Mapping[str, str] | None = None,
    overrides: ProjectSettings | None = None,
    config_path: Path | str | None = None,
    args: argparse.Namespace | None = None,
) -> ConventionsResolver:
    """Load and validate the project settings, then build a resolver on them.

    A `log_level` in the settings takes effect before validation runs,
    unless `args` or the environment already chose one.
    """
    logger = get_app_logger()
    project_dir = Path(project_dir)
    settings_file, settings = load_project_settings(
        project_dir, config_path=config_path, overrides=overrides
    )

    raw_log_level = settings.get(PROP_LOG_LEVEL)
    if isinstance(raw_log_level, str) and raw_log_level:
        logger.setLevel(
            logger.determine_log_level(args=args, root_log_level=raw_log_level)
        )
        logger.trace("[CONFIG] log-level re-resolved from settings: %s", logger.level_name)

    origin = settings_file.name if settings_file is not None else "project settings"
    check_settings(settings, origin=origin)
    return ConventionsResolver(
        project_dir, settings, environ=environ, settings_file=settings_file
    )


def resolve_conventions(
    project_dir: Path,
    *,
    environ: Mapping[str, str] | None = None,
    overrides: ProjectSettings | None = None,
    config_path: Path | str | None = None,
) -> ConventionsResolved:
    """Resolve every convention value for the project at `project_dir`.

    Raises ConfigurationError for invalid or missing required settings.
    """
    return load_conventions_resolver(
        project_dir, environ=environ, overrides=overrides, config_path=config_path
    ).resolve()
