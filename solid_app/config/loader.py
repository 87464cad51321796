"""Configuration loader with layered parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, ShapeParams, TaxParams, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

SETTINGS_FILE = "settings.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    @property
    def settings_file(self) -> Path:
        return self.config_dir / SETTINGS_FILE

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the settings file, empty if it is missing."""
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("Settings file is not valid YAML", source=str(self.settings_file))
            raise ConfigurationError(
                f"Cannot parse settings file: {e}",
                source=str(self.settings_file),
            ) from e

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            logger.warning(
                "Settings file is not a mapping",
                source=str(self.settings_file),
                document_type=type(file_config).__name__,
            )
            raise ConfigurationError(
                f"Settings file must contain a mapping, got {type(file_config).__name__}",
                source=str(self.settings_file),
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with layered precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Settings file
        3. Defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build a DefaultConfig."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            logger.warning(
                "Configuration validation failed",
                source=str(self.settings_file),
                error_count=len(errors),
            )
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)",
                errors=errors,
                source=str(self.settings_file),
            )

        return DefaultConfig(
            tax=TaxParams(**config["tax"]),
            shapes=ShapeParams(**config["shapes"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(config_dir: Optional[Path] = None,
                overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
    """Load the validated configuration from ``config_dir``."""
    return ConfigLoader.create(config_dir).load(overrides)
