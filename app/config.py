"""
Configuration for the Home Energy Manager
=========================================
Runtime settings loaded from environment variables.
Sets up the logging configuration as well.
"""

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.domain.exceptions import ConfigurationError

_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'") from exc


def _env_optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("HOMEENERGY_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("HOMEENERGY_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("HOMEENERGY_LOG_LEVEL", "INFO"))
    log_file_path: Optional[str] = field(default_factory=lambda: _env_optional("HOMEENERGY_LOG_FILE"))

    # Overload alerts are appended here as JSON lines (disabled when unset)
    alert_log_path: Optional[str] = field(default_factory=lambda: _env_optional("HOMEENERGY_ALERT_LOG_PATH"))
    alert_history_size: int = field(default_factory=lambda: _env_int("HOMEENERGY_ALERT_HISTORY_SIZE", 100))

    # Optional JSON file with initial devices and plan
    seed_path: Optional[str] = field(default_factory=lambda: _env_optional("HOMEENERGY_SEED_PATH"))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        level = self.log_level.upper()
        if level not in _VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}'. Expected one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
            )
        self.log_level = level

        if self.alert_history_size < 1:
            raise ConfigurationError(f"Alert history size must be at least 1, got {self.alert_history_size}")

        if self.seed_path and not Path(self.seed_path).is_file():
            raise ConfigurationError(f"Household seed file does not exist: {self.seed_path}")

    @property
    def effective_log_level(self) -> int:
        return logging.DEBUG if self.DEBUG else getattr(logging, self.log_level)


def setup_logging(debug: bool = False, log_file: Optional[str] = None, level: Optional[int] = None) -> None:
    """Setup logging configuration."""
    log_level = level if level is not None else (logging.DEBUG if debug else logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicate handlers when called multiple times
    has_console = any(getattr(h, "name", "") == "homeenergy_console" for h in root.handlers)
    has_file = any(getattr(h, "name", "") == "homeenergy_file" for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "homeenergy_console"
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "homeenergy_file"
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    # Ensure handler levels follow the desired log level
    for handler in root.handlers:
        if getattr(handler, "name", "") in {"homeenergy_console", "homeenergy_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info(f"Logging initialized at level: {logging.getLevelName(log_level)}")


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    config = AppConfig()
    logging.getLogger("config_loader").debug(
        "Loaded %s configuration (seed=%s, alert_log=%s)",
        config.environment,
        config.seed_path,
        config.alert_log_path,
    )
    return config
