"""Default configuration parameters for the oven controller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ControllerParams:
    """Program execution parameters."""
    initial_heatup_hold_time: int = 0        # 0 = reach temperature, no hold


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    controller: ControllerParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        controller=ControllerParams(),
        logging=LoggingParams(),
    )
