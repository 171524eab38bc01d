"""Configuration management for mira-site.

Settings live in an INI file (``~/.config/mira-site/settings.conf``) and are
converted into a typed ``GlobalConfig`` dictionary. Loading never writes to
disk; the default file is created explicitly via ``save_global_config``.
"""

import configparser
import os
from pathlib import Path
from typing import TypedDict

from mira_site.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_INCLUDE_PRERELEASES,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPO_NAME,
    DEFAULT_REPO_OWNER,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_ROADMAP_PATH,
    DEFAULT_ROADMAP_REF,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_GITHUB_TOKEN,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_INCLUDE_PRERELEASES,
    KEY_LOG_LEVEL,
    KEY_RETRY_ATTEMPTS,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_GITHUB,
    SECTION_NETWORK,
)
from mira_site.exceptions import ConfigurationError

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class NetworkConfig(TypedDict):
    """Network configuration options."""

    retry_attempts: int
    timeout_seconds: int


class GitHubConfig(TypedDict):
    """Repository that hosts releases and the roadmap."""

    owner: str
    repo: str
    roadmap_path: str
    roadmap_ref: str


class DirectoryConfig(TypedDict):
    """Directory paths configuration."""

    logs: Path


class GlobalConfig(TypedDict):
    """Global application configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    include_prereleases: bool
    github: GitHubConfig
    network: NetworkConfig
    directory: DirectoryConfig


class DirectoryManager:
    """Manages directory operations and path resolution."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize directory manager.

        Args:
            config_dir: Optional custom config directory. Defaults to
                ~/.config/mira-site/

        """
        self._config_dir: Path = (
            config_dir or Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
        )
        self._settings_file: Path = self._config_dir / CONFIG_FILE_NAME

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self._settings_file

    def expand_path(self, path_str: str) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Args:
            path_str: Path string to expand

        Returns:
            Expanded and resolved Path

        """
        return Path(path_str).expanduser().resolve()


class GlobalConfigManager:
    """Manages global INI configuration."""

    def __init__(self, directory_manager: DirectoryManager) -> None:
        """Initialize global config manager.

        Args:
            directory_manager: Directory manager for path operations

        """
        self.directory_manager = directory_manager

    def get_default_global_config(self) -> dict[str, str | dict[str, str]]:
        """Get default global configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_INCLUDE_PRERELEASES: str(DEFAULT_INCLUDE_PRERELEASES).lower(),
            SECTION_GITHUB: {
                "owner": DEFAULT_REPO_OWNER,
                "repo": DEFAULT_REPO_NAME,
                "roadmap_path": DEFAULT_ROADMAP_PATH,
                "roadmap_ref": DEFAULT_ROADMAP_REF,
            },
            SECTION_NETWORK: {
                KEY_RETRY_ATTEMPTS: str(DEFAULT_RETRY_ATTEMPTS),
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_DIRECTORY: {
                "logs": str(self.directory_manager.config_dir / "logs"),
            },
        }

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        Missing files and missing keys fall back to defaults.

        Returns:
            Loaded global configuration

        Raises:
            ConfigurationError: If the file cannot be parsed or holds
                invalid values

        """
        config = configparser.ConfigParser()

        defaults = self.get_default_global_config()
        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        if self.directory_manager.settings_file.exists():
            try:
                config.read(
                    self.directory_manager.settings_file, encoding="utf-8"
                )
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Failed to parse {self.directory_manager.settings_file}: {e}"
                ) from e

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file.

        Args:
            config: Global configuration to save

        """
        parser = configparser.ConfigParser()

        parser[SECTION_DEFAULT] = {
            KEY_CONFIG_VERSION: config["config_version"],
            KEY_LOG_LEVEL: config["log_level"],
            KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            KEY_INCLUDE_PRERELEASES: str(config["include_prereleases"]).lower(),
        }
        parser[SECTION_GITHUB] = dict(config["github"])
        parser[SECTION_NETWORK] = {
            KEY_RETRY_ATTEMPTS: str(config["network"]["retry_attempts"]),
            KEY_TIMEOUT_SECONDS: str(config["network"]["timeout_seconds"]),
        }
        parser[SECTION_DIRECTORY] = {
            key: str(path) for key, path in config["directory"].items()
        }

        self.directory_manager.config_dir.mkdir(parents=True, exist_ok=True)
        with open(
            self.directory_manager.settings_file, "w", encoding="utf-8"
        ) as f:
            parser.write(f)

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert configparser data to typed GlobalConfig.

        Args:
            config: Parsed configuration

        Returns:
            Typed global configuration

        """
        defaults = config.defaults()

        log_level = self._get_log_level(defaults, KEY_LOG_LEVEL)
        console_log_level = self._get_log_level(defaults, KEY_CONSOLE_LOG_LEVEL)

        try:
            include_prereleases = config.getboolean(
                SECTION_DEFAULT, KEY_INCLUDE_PRERELEASES
            )
        except ValueError as e:
            raise ConfigurationError(
                str(e), key=KEY_INCLUDE_PRERELEASES
            ) from e

        github = GitHubConfig(
            owner=config.get(SECTION_GITHUB, "owner"),
            repo=config.get(SECTION_GITHUB, "repo"),
            roadmap_path=config.get(SECTION_GITHUB, "roadmap_path"),
            roadmap_ref=config.get(SECTION_GITHUB, "roadmap_ref"),
        )

        network = NetworkConfig(
            retry_attempts=self._get_positive_int(
                config, SECTION_NETWORK, KEY_RETRY_ATTEMPTS
            ),
            timeout_seconds=self._get_positive_int(
                config, SECTION_NETWORK, KEY_TIMEOUT_SECONDS
            ),
        )

        return GlobalConfig(
            config_version=defaults.get(KEY_CONFIG_VERSION, CONFIG_VERSION),
            log_level=log_level,
            console_log_level=console_log_level,
            include_prereleases=include_prereleases,
            github=github,
            network=network,
            directory=DirectoryConfig(
                logs=self.directory_manager.expand_path(
                    config.get(SECTION_DIRECTORY, "logs")
                ),
            ),
        )

    @staticmethod
    def _get_log_level(defaults: dict[str, str], key: str) -> str:
        level = defaults.get(key, DEFAULT_LOG_LEVEL).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"unknown log level '{level}'", key=key)
        return level

    @staticmethod
    def _get_positive_int(
        config: configparser.ConfigParser, section: str, key: str
    ) -> int:
        try:
            value = config.getint(section, key)
        except ValueError as e:
            raise ConfigurationError(str(e), key=key) from e
        if value < 1:
            raise ConfigurationError("must be at least 1", key=key)
        return value


class ConfigManager:
    """Facade over directory and global settings management."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Optional custom config directory

        """
        self.directory_manager = DirectoryManager(config_dir)
        self.global_config_manager = GlobalConfigManager(self.directory_manager)

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self.directory_manager.config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self.directory_manager.settings_file

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration."""
        return self.global_config_manager.load_global_config()

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration."""
        self.global_config_manager.save_global_config(config)

    @staticmethod
    def get_github_token() -> str | None:
        """Return the GitHub API token from the environment, if any."""
        token = os.environ.get(ENV_GITHUB_TOKEN, "").strip()
        return token or None


config_manager = ConfigManager()
