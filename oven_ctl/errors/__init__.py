"""
Error classification for the oven controller.

This module provides the exception hierarchy raised by the controller, by
program normalization and configuration loading, and by heating modules.
"""

from .controller import (
    OvenControlError,
    InvalidArgumentError,
    OvenFailure,
    ProgramFormatError,
    ConfigurationError,
)
from .hardware import HeatingFailure

__all__ = [
    # Controller Errors
    "OvenControlError",
    "InvalidArgumentError",
    "OvenFailure",
    "ProgramFormatError",
    "ConfigurationError",
    # Hardware Errors
    "HeatingFailure",
]
