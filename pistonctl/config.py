"""
Configuration for the Configurable Pistons controller
=====================================================
Runtime settings loaded from environment variables, including the
"user editable" default speeds applied when a piston's settings block
omits a key. Sets up the logging configuration as well.
"""

import os
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any

from pistonctl.constants import PistonDefaults


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("PISTONCTL_ENV", "development"))
    secret_key: str = field(default_factory=lambda: os.getenv("PISTONCTL_SECRET_KEY", "PistonCtlDevSecretKey"))

    DEBUG: bool = field(default_factory=lambda: _env_bool("PISTONCTL_DEBUG", False))
    # Empty string disables the rotating file handler / audit trail.
    log_file: str = field(default_factory=lambda: os.getenv("PISTONCTL_LOG_FILE", "logs/pistonctl.log"))
    audit_log_path: str = field(default_factory=lambda: os.getenv("PISTONCTL_AUDIT_LOG_PATH", "logs/audit.log"))

    # Scheduling: one base tick is one simulation frame (60 Hz)
    base_tick_seconds: float = field(default_factory=lambda: _env_float("PISTONCTL_BASE_TICK_SECONDS", 1.0 / 60.0))

    # Piston defaults, used when a [Piston Settings] key is absent or invalid
    default_retract_speed: float = field(
        default_factory=lambda: _env_float("PISTONCTL_DEFAULT_RETRACT_SPEED", PistonDefaults.RETRACT_SPEED)
    )
    default_extend_speed: float = field(
        default_factory=lambda: _env_float("PISTONCTL_DEFAULT_EXTEND_SPEED", PistonDefaults.EXTEND_SPEED)
    )
    default_auto_retract: bool = field(
        default_factory=lambda: _env_bool("PISTONCTL_DEFAULT_AUTO_RETRACT", PistonDefaults.AUTO_RETRACT)
    )
    default_auto_extend: bool = field(
        default_factory=lambda: _env_bool("PISTONCTL_DEFAULT_AUTO_EXTEND", PistonDefaults.AUTO_EXTEND)
    )

    # Host world
    world_file: str = field(default_factory=lambda: os.getenv("PISTONCTL_WORLD_FILE", ""))
    simulate_motion: bool = field(default_factory=lambda: _env_bool("PISTONCTL_SIMULATE", True))

    # HTTP server
    host: str = field(default_factory=lambda: os.getenv("PISTONCTL_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PISTONCTL_PORT", 8000))

    _DEFAULT_SECRET_KEY: str = field(default="PistonCtlDevSecretKey", init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.base_tick_seconds <= 0:
            raise ValueError("PISTONCTL_BASE_TICK_SECONDS must be greater than zero.")
        if self.default_retract_speed <= 0 or self.default_extend_speed <= 0:
            raise ValueError("Default piston speeds must be greater than zero.")
        if self.environment == "production" and self.secret_key == self._DEFAULT_SECRET_KEY:
            raise RuntimeError(
                "SECURITY ERROR: Cannot use default secret key in production!\n"
                "Set PISTONCTL_SECRET_KEY environment variable to a secure random value."
            )

    def as_flask_config(self) -> dict[str, Any]:
        """Render configuration values for Flask application."""
        return {
            "SECRET_KEY": self.secret_key,
            "DEBUG": self.DEBUG,
        }


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    return AppConfig()


def setup_logging(debug: bool = False, log_file: str | None = "logs/pistonctl.log") -> None:
    """Setup logging configuration."""
    import logging
    import sys
    from logging.handlers import RotatingFileHandler

    log_level = logging.DEBUG if debug else logging.INFO

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicates when create_app is called multiple times
    has_console = any(getattr(h, "name", "") == "pistonctl_console" for h in root.handlers)
    has_file = any(getattr(h, "name", "") == "pistonctl_file" for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "pistonctl_console"
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "pistonctl_file"
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    for handler in root.handlers:
        if getattr(handler, "name", "") in {"pistonctl_console", "pistonctl_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info(f"Logging initialized at level: {logging.getLevelName(log_level)}")

    if _env_bool("PISTONCTL_SILENCE_WERKZEUG", True):
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
