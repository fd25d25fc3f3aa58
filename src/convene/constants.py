# src/convene/constants.py
"""Central constants used across the project."""

from .meta import PROGRAM_ENV


# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

ENV_MAVEN_CENTRAL_ENABLED: str = f"{PROGRAM_ENV}_MAVEN_CENTRAL_ENABLED"
ENV_PUBLISHING_ENABLED: str = f"{PROGRAM_ENV}_PUBLISHING_ENABLED"
ENV_PUBLISHING_GITHUB_OWNER: str = f"{PROGRAM_ENV}_PUBLISHING_GITHUB_OWNER"
ENV_PUBLISHING_DEVELOPER_ID: str = f"{PROGRAM_ENV}_PUBLISHING_DEVELOPER_ID"
ENV_PUBLISHING_DEVELOPER_NAME: str = f"{PROGRAM_ENV}_PUBLISHING_DEVELOPER_NAME"
ENV_PUBLISHING_DEVELOPER_URL: str = f"{PROGRAM_ENV}_PUBLISHING_DEVELOPER_URL"
ENV_BASE_PACKAGE: str = f"{PROGRAM_ENV}_BASE_PACKAGE"

# GitHub Actions native variables
ENV_GITHUB_REPOSITORY_OWNER: str = "GITHUB_REPOSITORY_OWNER"
ENV_GITHUB_ACTOR: str = "GITHUB_ACTOR"
ENV_GITHUB_TOKEN: str = "GITHUB_TOKEN"

# --- canonical property names ---
PROP_MAVEN_CENTRAL_ENABLED: str = "repositories.mavenCentral.enabled"
PROP_PUBLISHING_ENABLED: str = "publishing.enabled"
PROP_PUBLISHING_GITHUB_OWNER: str = "publishing.githubOwner"
PROP_PUBLISHING_DEVELOPER_ID: str = "publishing.developer.id"
PROP_PUBLISHING_DEVELOPER_NAME: str = "publishing.developer.name"
PROP_PUBLISHING_DEVELOPER_URL: str = "publishing.developer.url"
PROP_BASE_PACKAGE: str = "basePackage"
PROP_GITHUB_PACKAGES_USER: str = "gpr.user"
PROP_GITHUB_PACKAGES_KEY: str = "gpr.key"
PROP_NAME: str = "name"
PROP_DESCRIPTION: str = "description"
PROP_GROUP: str = "group"

# settings that tune the tool itself rather than the conventions
PROP_LOG_LEVEL: str = "log_level"
PROP_STRICT_CONFIG: str = "strict_config"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_STRICT_CONFIG: bool = False
DEFAULT_MAVEN_CENTRAL_ENABLED: bool = True
DEFAULT_PUBLISHING_ENABLED: bool = True

# --- conventions ---
GROUP_UNSPECIFIED: str = "unspecified"
GITHUB_GROUP_PREFIX: str = "io.github."
GITHUB_URL: str = "https://github.com"
GITHUB_PACKAGES_URL: str = "https://maven.pkg.github.com"
GITHUB_PACKAGES_REPOSITORY_NAME: str = "GitHubPackages"
LICENSE_NAME: str = "The MIT License"
LICENSE_URL: str = "https://opensource.org/licenses/MIT"

# --- source layout ---
JAVA_SOURCE_ROOT: str = "src/main/java"
JAVA_SOURCE_SUFFIX: str = ".java"

# --- resources ---
BUILD_DIR: str = "build"
CHECKSTYLE_OUTPUT_DIR: str = "build/generated/checkstyle"
CHECKSTYLE_CONFIG_NAME: str = "checkstyle.xml"
CHECKSTYLE_SUPPRESSIONS_NAME: str = "suppressions.xml"
CHECKSTYLE_CONFIG_OVERRIDE: str = "config/checkstyle/checkstyle.xml"
CHECKSTYLE_SUPPRESSIONS_OVERRIDE: str = "config/checkstyle/suppressions.xml"
BUNDLED_CHECKSTYLE_CONFIG: str = "checkstyle/checkstyle.xml"
BUNDLED_CHECKSTYLE_SUPPRESSIONS: str = "checkstyle/empty-suppressions.xml"

PRE_COMMIT_HOOK_NAME: str = "pre-commit"
PRE_COMMIT_HOOK_OVERRIDE: str = "scripts/git-hooks/pre-commit"
BUNDLED_PRE_COMMIT_HOOK: str = "git-hooks/pre-commit"
HOOK_FILE_MODE: int = 0o755

GIT_MARKER: str = ".git"
GIT_POINTER_PREFIX: str = "gitdir:"
GIT_COMMONDIR_FILE: str = "commondir"
