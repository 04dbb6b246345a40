"""Configuration loader with layered parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import ControllerParams, DefaultConfig, LoggingParams, get_default_config
from .validation import ConfigValidator

CONFIG_FILE_NAME = "oven.yaml"


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
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from oven.yaml, empty if the file is absent."""
        config_file = self.config_dir / CONFIG_FILE_NAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{CONFIG_FILE_NAME} must contain a mapping at the top level",
                context={"config_file": str(config_file)}
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration layers.

        Priority order:
        1. Explicit overrides (highest priority)
        2. oven.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = asdict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)",
                errors=errors,
                context={"config_dir": str(self.config_dir)}
            )

        return config

    def controller_params(self, overrides: Optional[dict[str, Any]] = None) -> ControllerParams:
        """Build validated ControllerParams."""
        config = self.merge_config(overrides)
        return ControllerParams(**config["controller"])

    def logging_params(self, overrides: Optional[dict[str, Any]] = None) -> LoggingParams:
        """Build validated LoggingParams."""
        config = self.merge_config(overrides)
        return LoggingParams(**config["logging"])

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
