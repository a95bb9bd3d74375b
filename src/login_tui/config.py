# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Login-TUI configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/login-tui/  (default: ~/.config/login-tui/)
#   - State:   $XDG_STATE_HOME/login-tui/   (default: ~/.local/state/login-tui/)
#
# Files:
#   - config.toml: User configuration (validation, UI, logging)
#   - login-tui.log: Application log (in state directory)
#
# Nothing the user types into the login form is ever written here.
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from login_tui.core.form import MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "login-tui"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Login-TUI.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/login-tui/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for Login-TUI.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/login-tui/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates the XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class LoginConfig:
    """
    Configuration for the login form.

    Attributes:
        min_password_length: Shortest password the form accepts on submit.
    """
    min_password_length: int = MIN_PASSWORD_LENGTH


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        show_header: Show the Textual header on every screen.
        show_footer: Show the key binding footer on every screen.
    """
    show_header: bool = True
    show_footer: bool = True


@dataclass
class LoggingConfig:
    """
    Configuration for the application log.

    Attributes:
        level: Log level name ("DEBUG", "INFO", ...).
        file: Log file name. Relative paths are placed in the state directory.
    """
    level: str = "INFO"
    file: str = "login-tui.log"

    @property
    def path(self) -> Path:
        """Resolved path of the log file."""
        log_path = Path(self.file).expanduser()
        if log_path.is_absolute():
            return log_path
        return get_xdg_state_home() / log_path


@dataclass
class Config:
    """
    Main configuration container for Login-TUI.

    Attributes:
        login: Login form settings.
        ui: User interface settings.
        logging: Log file settings.

    Usage:
        >>> config = Config.load()
        >>> config.login.min_password_length
        6
    """
    login: LoginConfig = field(default_factory=LoginConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def state_dir() -> Path:
        """Returns the state directory path."""
        return get_xdg_state_home()

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the config file doesn't exist, returns default configuration.
        Creates necessary directories if they don't exist.

        Args:
            path: Explicit config file. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid, or if an
                         explicitly requested file is missing.
        """
        ensure_directories()

        config_path = path if path is not None else cls.config_file_path()

        if not config_path.exists():
            if path is not None:
                raise ConfigError(f"Config file not found: {config_path}")
            logger.debug(f"No config file at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        logger.info(f"Loaded config from {config_path}")
        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.
        """
        ensure_directories()

        config_path = path if path is not None else self.config_file_path()
        data = self._to_dict()

        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value is out of range or of the wrong type.
        """
        config = cls()

        # Login settings
        login = _section(data, "login")
        min_length = login.get("min_password_length", MIN_PASSWORD_LENGTH)
        if not isinstance(min_length, int) or isinstance(min_length, bool) or min_length < 1:
            raise ConfigError(
                f"login.min_password_length must be a positive integer, got {min_length!r}"
            )
        config.login = LoginConfig(
            min_password_length=min_length,
        )

        # UI settings
        ui = _section(data, "ui")
        config.ui = UIConfig(
            show_header=_bool(ui, "ui", "show_header", True),
            show_footer=_bool(ui, "ui", "show_footer", True),
        )

        # Logging settings
        log = _section(data, "logging")
        level = log.get("level", "INFO")
        if not isinstance(level, str):
            raise ConfigError(f"logging.level must be a string, got {level!r}")
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
        log_file = log.get("file", "login-tui.log")
        if not isinstance(log_file, str) or not log_file:
            raise ConfigError(f"logging.file must be a non-empty string, got {log_file!r}")
        config.logging = LoggingConfig(
            level=level,
            file=log_file,
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "login": {
                "min_password_length": self.login.min_password_length,
            },
            "ui": {
                "show_header": self.ui.show_header,
                "show_footer": self.ui.show_footer,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Value Checks
# =============================================================================

def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the [name] table, or an empty one if it is absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def _bool(section: dict[str, Any], section_name: str, key: str, default: bool) -> bool:
    """Read a TOML boolean. Quoted strings like "false" are rejected."""
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{section_name}.{key} must be true or false, got {value!r}")
    return value


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config and logs are stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {LoggingConfig().path}")
