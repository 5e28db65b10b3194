"""
Configuration management for the GAQ view helpers.
Handles loading, validating, and providing access to analytics and server settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


PLACEHOLDER_TRACKER = "UA-xxxxx-x"


@dataclass
class AnalyticsConfig:
    """Analytics tracker settings."""
    tracker: Optional[str]
    tracker_name: Optional[str] = None
    local: bool = False
    ssl: bool = False

    def __post_init__(self):
        # Validation and rendering both see the stripped values
        if isinstance(self.tracker, str):
            self.tracker = self.tracker.strip()
        if isinstance(self.tracker_name, str):
            self.tracker_name = self.tracker_name.strip() or None

    def is_valid_tracker(self) -> bool:
        """A tracker is valid unless it is unset, blank or the placeholder."""
        if not isinstance(self.tracker, str):
            return False
        return bool(self.tracker) and self.tracker != PLACEHOLDER_TRACKER


@dataclass
class AppConfig:
    """Demo server configuration settings."""
    host: str
    port: int
    debug: bool


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "web_app_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        self._config = self._get_default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "analytics": {
                "tracker": "",
                "tracker_name": None,
                "local": False,
                "ssl": False
            },
            "app": {
                "host": "127.0.0.1",
                "port": 5000,
                "debug": False
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # Analytics settings
        if os.getenv("GA_TRACKER"):
            self._config["analytics"]["tracker"] = os.getenv("GA_TRACKER").strip()

        if os.getenv("GA_TRACKER_NAME"):
            self._config["analytics"]["tracker_name"] = os.getenv("GA_TRACKER_NAME").strip()

        if os.getenv("GA_LOCAL"):
            self._config["analytics"]["local"] = os.getenv("GA_LOCAL").lower() == "true"

        if os.getenv("GA_SSL"):
            self._config["analytics"]["ssl"] = os.getenv("GA_SSL").lower() == "true"

        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

    def get_analytics_config(self) -> AnalyticsConfig:
        """Get analytics configuration."""
        analytics_config = self._config["analytics"]
        return AnalyticsConfig(
            tracker=analytics_config.get("tracker"),
            tracker_name=analytics_config.get("tracker_name") or None,
            local=bool(analytics_config.get("local", False)),
            ssl=bool(analytics_config.get("ssl", False))
        )

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_analytics_config() -> AnalyticsConfig:
    """Get analytics configuration."""
    return config_manager.get_analytics_config()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()
