"""
Configuration Manager - Load and persist backend settings
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "DEVTOOLS_CONFIG_DIR"

DEFAULT_CONFIG: dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8000},
    "cors": {"allowOrigins": ["*"]},
    "logging": {"level": "INFO"},
    "diff": {"maxTokens": 50_000},
    "hash": {"maxUploadBytes": 10 * 1024 * 1024},
}


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1. environment variable, 2. ~/.devtools_backend, 3. temp directory
        config_dir = os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.devtools_backend")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            tmp_dir = Path(tempfile.gettempdir()) / "devtools_backend"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() reloads from disk"""
        cls._instance = None

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling gaps from defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config: %s", e)
            return config

        if not isinstance(stored, dict):
            logger.error("Ignoring config file %s: top level is not an object", self._config_file)
            return config

        for section, values in stored.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return copy.deepcopy(DEFAULT_CONFIG)

    @property
    def config_file(self) -> Path:
        return self._config_file

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def get_setting(self, section: str, key: str, default=None):
        """Get a value from a config section"""
        values = self._config.get(section)
        if not isinstance(values, dict):
            return default
        return values.get(key, default)

    def get_int_setting(self, section: str, key: str, default: int) -> int:
        """Positive integer setting; hand-edited values like "2000" are coerced"""
        value = self.get_setting(section, key, default)
        try:
            number = int(value)
        except (TypeError, ValueError, OverflowError):
            number = 0
        if isinstance(value, bool) or number <= 0:
            logger.warning("Invalid %s.%s value %r, using %s", section, key, value, default)
            return default
        return number
