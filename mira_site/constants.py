"""Centralized constants module for mira-site.

This module serves as the single source of truth for all shared constants
across the mira-site codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from mira_site.constants import DOWNLOADABLE_EXTENSIONS
"""

from typing import Final, Literal

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "mira-site"
LOG_FILE_NAME: Final[str] = "mira-site.log"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_INCLUDE_PRERELEASES: Final[bool] = False
DEFAULT_RETRY_ATTEMPTS: Final[int] = 3
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_GITHUB: Final[str] = "github"
SECTION_NETWORK: Final[str] = "network"
SECTION_DIRECTORY: Final[str] = "directory"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_INCLUDE_PRERELEASES: Final[str] = "include_prereleases"
KEY_RETRY_ATTEMPTS: Final[str] = "retry_attempts"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"

ENV_GITHUB_TOKEN: Final[str] = "GITHUB_TOKEN"

# =============================================================================
# GitHub Constants
# =============================================================================

DEFAULT_REPO_OWNER: Final[str] = "FatalMistake02"
DEFAULT_REPO_NAME: Final[str] = "mira"
DEFAULT_ROADMAP_PATH: Final[str] = "ROADMAP.md"
DEFAULT_ROADMAP_REF: Final[str] = "main"

GITHUB_API_BASE: Final[str] = "https://api.github.com"
GITHUB_WEB_BASE: Final[str] = "https://github.com"
GITHUB_RAW_BASE: Final[str] = "https://raw.githubusercontent.com"

GITHUB_JSON_ACCEPT: Final[str] = "application/vnd.github+json"
USER_AGENT: Final[str] = "mira-website"

# Number of releases inspected when looking for a stable fallback version
STABLE_FALLBACK_PAGE_SIZE: Final[int] = 10

HTTP_NOT_FOUND: Final[int] = 404
HTTP_CLIENT_ERROR_MIN: Final[int] = 400
HTTP_SERVER_ERROR_MIN: Final[int] = 500

# =============================================================================
# Asset Classification Constants
# =============================================================================

# Only assets ending with one of these are offered for download
DOWNLOADABLE_EXTENSIONS: Final[tuple[str, ...]] = (
    ".exe",
    ".msi",
    ".dmg",
    ".pkg",
    ".zip",
    ".tar.gz",
    ".appimage",
    ".deb",
    ".rpm",
)

WINDOWS_EXTENSIONS: Final[tuple[str, ...]] = (".exe", ".msi")
MAC_EXTENSIONS: Final[tuple[str, ...]] = (".dmg", ".pkg")
LINUX_EXTENSIONS: Final[tuple[str, ...]] = (".appimage", ".deb", ".rpm")
INSTALLER_EXTENSIONS: Final[tuple[str, ...]] = (".msi", ".dmg", ".pkg")
PORTABLE_EXTENSIONS: Final[tuple[str, ...]] = (".zip", ".tar.gz")

WINDOWS_MARKERS: Final[tuple[str, ...]] = ("win",)
MAC_MARKERS: Final[tuple[str, ...]] = ("mac", "darwin")
LINUX_MARKERS: Final[tuple[str, ...]] = ("linux",)
APPLE_SILICON_MARKERS: Final[tuple[str, ...]] = (
    "apple-silicon",
    "apple_silicon",
)

# Classification tags
TAG_WINDOWS: Final[str] = "windows"
TAG_MAC: Final[str] = "mac"
TAG_LINUX: Final[str] = "linux"
TAG_INSTALLER: Final[str] = "installer"
TAG_PORTABLE: Final[str] = "portable"
TAG_ARCH_ARM64: Final[str] = "arch-arm64"
TAG_ARCH_X64: Final[str] = "arch-x64"
TAG_ARCH_UNKNOWN: Final[str] = "arch-unknown"

MacArchitecture = Literal["arm64", "x64", "unknown"]
PlatformTag = Literal["windows", "mac", "mac-arm64", "mac-x64", "linux"]

# =============================================================================
# Roadmap Constants
# =============================================================================

NO_TASKS_MESSAGE: Final[str] = "No tasks listed for this milestone."
NO_NEWER_MILESTONE_HEADING: Final[str] = "No newer roadmap milestone listed yet"
NO_NEWER_MILESTONE_MESSAGE: Final[str] = (
    "ROADMAP.md currently has no version higher than the latest stable release."
)

# =============================================================================
# Logging Constants
# =============================================================================

LOG_MAX_FILE_SIZE_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
