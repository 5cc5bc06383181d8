"""
Configuration management for DatePick.

Handles loading, validation, and saving of application configuration.
"""

import copy
import json
import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict

from config.constants import (
    MAX_YEAR_ROW_HEIGHT,
    MAX_YEAR_SPAN,
    MIN_YEAR_ROW_HEIGHT,
    VALID_THEME_SETTINGS,
)
from core.date_picker.date_model import parse

APP_DIR_NAME = ".datepick"


def get_app_dir() -> Path:
    """Return the root directory for DatePick user data."""
    return Path.home() / APP_DIR_NAME


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_default_config_version() -> str:
    """Return the application version defined in the default config."""
    default_config_path = Path(__file__).parent / "default_config.json"

    try:
        with open(default_config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except FileNotFoundError:
        logger.error("Default configuration file not found: %s", default_config_path)
        return "0.0.0"
    except json.JSONDecodeError as exc:
        logger.error(
            "Invalid JSON in default configuration file %s: %s",
            default_config_path,
            exc
        )
        return "0.0.0"

    version = data.get("version")
    if isinstance(version, str) and version.strip():
        return version.strip()

    logger.warning(
        "Default configuration missing valid 'version'; falling back to 0.0.0"
    )
    return "0.0.0"


def _is_canonical_date(value: str) -> bool:
    return parse(value) == value


class ConfigManager:
    """Manages application configuration with validation and persistence."""

    def __init__(self):
        """Initialize the configuration manager."""
        self.default_config_path = (
            Path(__file__).parent / "default_config.json"
        )
        self.user_config_dir = get_app_dir()
        self.user_config_path = self.user_config_dir / "app_config.json"
        self._config: Dict[str, Any] = {}
        self._default_config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from user config or default config."""
        try:
            logger.info(
                f"Loading default configuration from "
                f"{self.default_config_path}"
            )
            with open(self.default_config_path, 'r', encoding='utf-8') as f:
                self._default_config = json.load(f)

            user_config: Dict[str, Any] = {}
            if self.user_config_path.exists():
                logger.info(
                    f"Loading user configuration from "
                    f"{self.user_config_path}"
                )
                with open(self.user_config_path, 'r', encoding='utf-8') as f:
                    user_config = json.load(f)

            self._config = self._deep_merge(self._default_config, user_config)

            self._validate_config()
            logger.info("Configuration loaded and validated successfully")

        except FileNotFoundError as e:
            logger.error(f"Configuration file not found: {e}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file: {e}")
            raise
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise

    def _validate_config(self) -> None:
        """Validate required configuration fields and types."""
        required_fields = {
            "version": str,
            "date_picker": dict,
            "ui": dict,
        }

        for field, expected_type in required_fields.items():
            if field not in self._config:
                raise ValueError(
                    f"Missing required configuration field: {field}"
                )
            if not isinstance(self._config[field], expected_type):
                raise TypeError(
                    f"Configuration field '{field}' must be of type "
                    f"{expected_type.__name__}, got "
                    f"{type(self._config[field]).__name__}"
                )

        self._validate_date_picker_config()
        self._validate_ui_config()

    def _validate_date_picker_config(self) -> None:
        """Validate date picker configuration."""
        picker_config = self._config["date_picker"]

        for flag in ("show_today", "show_clear", "with_icon"):
            if flag in picker_config and not isinstance(picker_config[flag], bool):
                raise TypeError(f"date_picker.{flag} must be a boolean")

        for span in ("years_ahead", "years_back"):
            if span not in picker_config:
                continue
            value = picker_config[span]
            if (isinstance(value, bool) or not isinstance(value, int) or
                    not (0 <= value <= MAX_YEAR_SPAN)):
                raise ValueError(
                    f"date_picker.{span} must be an integer between 0 and "
                    f"{MAX_YEAR_SPAN}"
                )

        if "year_row_height" in picker_config:
            row_height = picker_config["year_row_height"]
            if (isinstance(row_height, bool) or not isinstance(row_height, int) or
                    not (MIN_YEAR_ROW_HEIGHT <= row_height <= MAX_YEAR_ROW_HEIGHT)):
                raise ValueError(
                    f"date_picker.year_row_height must be an integer between "
                    f"{MIN_YEAR_ROW_HEIGHT} and {MAX_YEAR_ROW_HEIGHT}"
                )

        if "placeholder" in picker_config:
            if not isinstance(picker_config["placeholder"], str):
                raise TypeError("date_picker.placeholder must be a string")

        for bound in ("min", "max"):
            value = picker_config.get(bound)
            if value in (None, ""):
                continue
            if not isinstance(value, str) or not _is_canonical_date(value):
                raise ValueError(
                    f"date_picker.{bound} must be a date in YYYY-MM-DD form"
                )

        minimum = picker_config.get("min")
        maximum = picker_config.get("max")
        if minimum and maximum and minimum > maximum:
            raise ValueError("date_picker.min must not be after date_picker.max")

    def _validate_ui_config(self) -> None:
        """Validate UI configuration."""
        ui_config = self._config["ui"]
        if "theme" in ui_config and ui_config["theme"] not in VALID_THEME_SETTINGS:
            raise ValueError(f"ui.theme must be one of {list(VALID_THEME_SETTINGS)}")

        for field in ("window_width", "window_height"):
            if field not in ui_config:
                continue
            value = ui_config[field]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"ui.{field} must be a positive integer")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "date_picker.min").

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key.

        Supports nested keys using dot notation (e.g., "date_picker.min").

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def save(self) -> None:
        """Save the current configuration to the user config file."""
        try:
            self.user_config_dir.mkdir(parents=True, exist_ok=True)

            # Validate before saving
            self._validate_config()

            with open(self.user_config_path, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)

            try:
                os.chmod(self.user_config_path, 0o600)
                logger.debug("Set secure permissions for config file")
            except OSError as e:
                logger.warning(f"Could not set file permissions: {e}")

            logger.info(f"Configuration saved to {self.user_config_path}")

        except Exception as e:
            logger.error(f"Error saving configuration: {e}")
            raise

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._load_config()

    def get_defaults(self) -> Mapping[str, Any]:
        """Return an immutable view of the default configuration."""
        return self._deep_freeze(self._default_config)

    @classmethod
    def _deep_merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two dictionaries without mutating inputs."""
        result: Dict[str, Any] = {}

        for key, base_value in base.items():
            if key in override:
                override_value = override[key]
                if isinstance(base_value, dict) and isinstance(override_value, dict):
                    result[key] = cls._deep_merge(base_value, override_value)
                else:
                    result[key] = cls._clone_value(override_value)
            else:
                result[key] = cls._clone_value(base_value)

        for key, override_value in override.items():
            if key not in base:
                result[key] = cls._clone_value(override_value)

        return result

    @classmethod
    def _clone_value(cls, value: Any) -> Any:
        """Return a deep copy of supported container types."""
        if isinstance(value, dict):
            return {k: cls._clone_value(v) for k, v in value.items()}
        if isinstance(value, list):
            return [cls._clone_value(v) for v in value]
        return copy.deepcopy(value)

    @classmethod
    def _deep_freeze(cls, value: Any) -> Any:
        """Create an immutable representation of nested configuration data."""
        if isinstance(value, dict):
            frozen = {k: cls._deep_freeze(v) for k, v in value.items()}
            return MappingProxyType(frozen)
        if isinstance(value, list):
            return tuple(cls._deep_freeze(v) for v in value)
        return value
