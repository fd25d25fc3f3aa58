# src/convene/resources.py
"""Write configuration artifacts, preferring project files over bundled ones."""

from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from convene.constants import (
    BUNDLED_CHECKSTYLE_CONFIG,
    BUNDLED_CHECKSTYLE_SUPPRESSIONS,
    BUNDLED_PRE_COMMIT_HOOK,
    CHECKSTYLE_CONFIG_NAME,
    CHECKSTYLE_CONFIG_OVERRIDE,
    CHECKSTYLE_OUTPUT_DIR,
    CHECKSTYLE_SUPPRESSIONS_NAME,
    CHECKSTYLE_SUPPRESSIONS_OVERRIDE,
    GIT_COMMONDIR_FILE,
    GIT_MARKER,
    GIT_POINTER_PREFIX,
    HOOK_FILE_MODE,
    PRE_COMMIT_HOOK_NAME,
    PRE_COMMIT_HOOK_OVERRIDE,
)
from convene.errors import ConfigurationError
from convene.logs import get_app_logger
from convene.utils import shorten_path_for_display


BUNDLED_PACKAGE = "convene.bundled"

CHECKSTYLE_CONFIG_RESOURCE = "checkstyle-config"
CHECKSTYLE_SUPPRESSIONS_RESOURCE = "checkstyle-suppressions"
PRE_COMMIT_HOOK_RESOURCE = "pre-commit-hook"


@dataclass(frozen=True)
class ResourceRequest:
    """One logical resource: where a project may override it, and the default."""

    resource_id: str
    bundled_path: str  # relative to the bundled resources package, "/"-separated
    override_path: Path | None = None


# --------------------------------------------------------------------------- #
# core
# --------------------------------------------------------------------------- #


def load_bundled_resource(bundled_path: str, *, package: str = BUNDLED_PACKAGE) -> bytes:
    """Read a resource shipped inside the package.

    A missing resource is a packaging defect, so it always raises.
    """
    resource = resources.files(package)
    for part in bundled_path.split("/"):
        resource = resource.joinpath(part)
    if not resource.is_file():
        xmsg = f"Missing bundled resource at '{bundled_path}'"
        raise ConfigurationError(xmsg)
    return resource.read_bytes()


def materialize(
    request: ResourceRequest,
    output_path: Path,
    *,
    mode: int | None = None,
    package: str = BUNDLED_PACKAGE,
) -> Path:
    """Write the effective content of `request` to `output_path`.

    The project override is copied byte for byte when it exists; otherwise
    the bundled default is written. The output is overwritten every time.
    """
    logger = get_app_logger()

    override = request.override_path
    if override is not None and override.is_file():
        content = override.read_bytes()
        origin = f"project file {override}"
    else:
        content = load_bundled_resource(request.bundled_path, package=package)
        origin = f"bundled {request.bundled_path}"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(content)
    if mode is not None:
        output_path.chmod(mode)

    logger.debug("Wrote %s from %s to %s", request.resource_id, origin, output_path)
    return output_path


# --------------------------------------------------------------------------- #
# checkstyle
# --------------------------------------------------------------------------- #


def checkstyle_requests(project_dir: Path) -> tuple[ResourceRequest, ResourceRequest]:
    return (
        ResourceRequest(
            resource_id=CHECKSTYLE_CONFIG_RESOURCE,
            bundled_path=BUNDLED_CHECKSTYLE_CONFIG,
            override_path=project_dir / CHECKSTYLE_CONFIG_OVERRIDE,
        ),
        ResourceRequest(
            resource_id=CHECKSTYLE_SUPPRESSIONS_RESOURCE,
            bundled_path=BUNDLED_CHECKSTYLE_SUPPRESSIONS,
            override_path=project_dir / CHECKSTYLE_SUPPRESSIONS_OVERRIDE,
        ),
    )


def write_checkstyle_config(
    project_dir: Path,
    output_dir: Path | None = None,
) -> tuple[Path, Path]:
    """Materialize checkstyle.xml and suppressions.xml for the project.

    Returns (config_file, suppressions_file).
    """
    out = output_dir if output_dir is not None else project_dir / CHECKSTYLE_OUTPUT_DIR
    config_request, suppressions_request = checkstyle_requests(project_dir)
    config_file = materialize(config_request, out / CHECKSTYLE_CONFIG_NAME)
    suppressions_file = materialize(
        suppressions_request, out / CHECKSTYLE_SUPPRESSIONS_NAME
    )
    get_app_logger().info(
        "Checkstyle configuration written to %s",
        shorten_path_for_display(out, cwd=Path.cwd(), project_dir=project_dir),
    )
    return config_file, suppressions_file


# --------------------------------------------------------------------------- #
# git hooks
# --------------------------------------------------------------------------- #


def _read_git_pointer(marker: Path) -> Path:
    """Follow a `.git` file (`gitdir: <path>`) to the real git directory."""
    for line in marker.read_text(encoding="utf-8").splitlines():
        if line.startswith(GIT_POINTER_PREFIX):
            target = line[len(GIT_POINTER_PREFIX) :].strip()
            if target:
                git_dir = Path(target)
                if not git_dir.is_absolute():
                    git_dir = marker.parent / git_dir
                return git_dir

    xmsg = f"Git pointer file '{marker}' does not contain a '{GIT_POINTER_PREFIX}' line"
    raise ConfigurationError(xmsg)


def resolve_hooks_dir(project_dir: Path) -> Path | None:
    """Locate the hooks directory of the git checkout at `project_dir`.

    Linked worktrees and submodules have a `.git` pointer file instead of a
    directory; worktrees share hooks through the `commondir` of the
    pointed-to directory. Returns None when the project is not a checkout.
    """
    marker = project_dir / GIT_MARKER
    if marker.is_dir():
        return marker / "hooks"
    if not marker.is_file():
        return None

    git_dir = _read_git_pointer(marker)
    commondir_file = git_dir / GIT_COMMONDIR_FILE
    if commondir_file.is_file():
        common = Path(commondir_file.read_text(encoding="utf-8").strip())
        if not common.is_absolute():
            common = git_dir / common
        git_dir = common
    return (git_dir / "hooks").resolve()


def pre_commit_hook_request(project_dir: Path) -> ResourceRequest:
    return ResourceRequest(
        resource_id=PRE_COMMIT_HOOK_RESOURCE,
        bundled_path=BUNDLED_PRE_COMMIT_HOOK,
        override_path=project_dir / PRE_COMMIT_HOOK_OVERRIDE,
    )


def install_git_hooks(project_dir: Path) -> Path | None:
    """Install the pre-commit hook with executable permission.

    Returns the installed path, or None when there is no git checkout.
    """
    logger = get_app_logger()
    hooks_dir = resolve_hooks_dir(project_dir)
    if hooks_dir is None:
        logger.info("No git checkout at %s; skipping hook installation.", project_dir)
        return None

    installed = materialize(
        pre_commit_hook_request(project_dir),
        hooks_dir / PRE_COMMIT_HOOK_NAME,
        mode=HOOK_FILE_MODE,
    )
    logger.info(
        "Git hooks installed in %s",
        shorten_path_for_display(hooks_dir, cwd=Path.cwd(), project_dir=project_dir),
    )
    return installed
