# src/convene/config/config_types.py


from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, Literal, TypedDict, TypeVar

from typing_extensions import NotRequired


T = TypeVar("T")

OriginType = Literal["env", "project", "default", "inferred"]
PropertyKind = Literal["boolean", "string"]


class _Computed:
    """Default policy marker: the value has to be inferred by the caller."""

    _instance: "_Computed | None" = None

    def __new__(cls) -> "_Computed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "COMPUTED"


COMPUTED = _Computed()


@dataclass(frozen=True)
class ConfigurationKey:
    """A single named setting and where it may come from."""

    name: str
    kind: PropertyKind = "string"
    env_aliases: tuple[str, ...] = ()
    default: bool | str | _Computed | None = None
    description: str = ""

    @property
    def is_computed(self) -> bool:
        return self.default is COMPUTED


@dataclass(frozen=True)
class ResolvedValue(Generic[T]):
    """Outcome of resolving one key: the typed value and the layer it came from."""

    value: T
    origin: OriginType
    source: str | None = None  # env var or settings key that supplied the value

    def describe(self) -> str:
        if self.origin == "env":
            return f"env {self.source}"
        if self.origin == "project" and self.source:
            return f"project setting {self.source}"
        return self.origin


@dataclass
class ValidationSummary:
    """Outcome of checking a settings mapping against the known keys."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    strict: bool = False


# --- raw settings ------------------------------------------------------------

# Flattened project settings: dotted key -> scalar value
ProjectSettings = dict[str, Any]


# --- resolved shapes ---------------------------------------------------------


class DeveloperResolved(TypedDict):
    id: str
    name: str
    url: str


class ScmResolved(TypedDict):
    url: str
    connection: str
    developer_connection: str


class LicenseResolved(TypedDict):
    name: str
    url: str


class GithubPackagesResolved(TypedDict):
    name: str
    url: str
    username: str | None
    password: str | None


class PublishingResolved(TypedDict):
    github_owner: str | None
    github_repository: str
    pom_name: str
    pom_description: str
    url: str | None
    scm: ScmResolved | None
    license: LicenseResolved
    developer: DeveloperResolved | None
    github_packages: GithubPackagesResolved | None


class CheckstyleResolved(TypedDict):
    config_dir: Path
    config_file: Path
    suppressions_file: Path


class ConventionsResolved(TypedDict):
    project_dir: Path
    settings_file: Path | None
    name: str
    description: str | None
    group: str | None
    maven_central_enabled: bool
    publishing_enabled: bool
    base_packages: list[str]
    null_away_annotated_packages: str
    publishing: PublishingResolved | None
    checkstyle: CheckstyleResolved

    # meta only
    origins: NotRequired[dict[str, str]]  # key -> layer that supplied it
