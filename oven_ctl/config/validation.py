"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import ControllerParams, LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_controller_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate controller parameters."""
        errors = []

        if "initial_heatup_hold_time" in params:
            value = params["initial_heatup_hold_time"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="initial_heatup_hold_time",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_known_fields(section: str, params: dict[str, Any],
                              known: tuple[str, ...]) -> list[ValidationError]:
        """Flag keys that do not belong to a configuration section."""
        return [
            ValidationError(
                field=f"{section}.{key}",
                message="Unknown configuration field",
                value=value
            )
            for key, value in params.items() if key not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("controller", "logging"):
            if section in config and not isinstance(config[section], dict):
                return [ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                )]

        if "controller" in config:
            errors.extend(ConfigValidator.validate_known_fields(
                "controller", config["controller"],
                tuple(f.name for f in fields(ControllerParams))
            ))
            errors.extend(ConfigValidator.validate_controller_params(config["controller"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_known_fields(
                "logging", config["logging"],
                tuple(f.name for f in fields(LoggingParams))
            ))
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
