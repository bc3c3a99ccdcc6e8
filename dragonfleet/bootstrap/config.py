"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger("bootstrap.config")


@dataclass
class FleetConfig:
    """Fleet engine configuration."""

    history_limit: int = 1000  # Transition events kept per fleet
    verify_consistency: bool = True  # Check mirrored references after each mutation

    @classmethod
    def from_env(cls) -> "FleetConfig":
        return cls(
            history_limit=int(os.getenv("DRAGON_HISTORY_LIMIT", "1000")),
            verify_consistency=os.getenv("DRAGON_VERIFY_CONSISTENCY", "true").lower() == "true",
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("DRAGON_LOG_LEVEL", "WARNING"),
            format=os.getenv("DRAGON_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("DRAGON_LOG_FILE"),
        )


@dataclass
class DragonConfig:
    """Root configuration for the fleet application."""

    environment: str = "development"
    debug: bool = False  # Same effect as --verbose
    version: str = "1.0.0"

    fleet: FleetConfig = field(default_factory=FleetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Additional settings
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "DragonConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("DRAGON_ENVIRONMENT", "development"),
            debug=os.getenv("DRAGON_DEBUG", "false").lower() == "true",
            fleet=FleetConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "DragonConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "DragonConfig":
        """Create config from dictionary; file values override the environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("fleet", "logging"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Unknown {section} setting ignored: {key}")

        if "settings" in data:
            config.settings.update(data["settings"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "fleet": {
                "history_limit": self.fleet.history_limit,
                "verify_consistency": self.fleet.verify_consistency,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "log_file": self.logging.log_file,
            },
            "settings": dict(self.settings),
        }


def configure_logging(config: LoggingConfig) -> None:
    """Apply logging level, format and optional file handler."""
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.WARNING),
        format=config.format,
        handlers=handlers,
        force=True,
    )


# Global config instance
_config: Optional[DragonConfig] = None


def load_config(filepath: str = None) -> DragonConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        DragonConfig instance
    """
    global _config

    if filepath:
        _config = DragonConfig.from_file(filepath)
    else:
        default_paths = [
            "./dragonfleet.json",
            "./config/dragonfleet.json",
            os.path.expanduser("~/.dragonfleet/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = DragonConfig.from_file(path)
                return _config

        _config = DragonConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> DragonConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None
