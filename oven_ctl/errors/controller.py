"""
Controller error classifications.

OvenFailure is the only runtime error the controller surfaces to callers.
The remaining classes cover bad call arguments, malformed program data and
invalid configuration, all raised before any actuator is touched.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class OvenControlError(Exception):
    """Base class for errors raised by the oven controller package."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidArgumentError(OvenControlError, ValueError):
    """A required argument was missing."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument


class OvenFailure(OvenControlError):
    """Program execution aborted because an actuator could not be commanded."""

    def __init__(self, message: str, phase: Optional[str] = None,
                 stage_index: Optional[int] = None,
                 heat_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.phase = phase
        self.stage_index = stage_index
        self.heat_type = heat_type


class ProgramFormatError(OvenControlError, ValueError):
    """Raw program data could not be turned into a BakingProgram."""

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value


class ConfigurationError(OvenControlError):
    """Configuration values failed validation."""

    def __init__(self, message: str, errors: Optional[List["ValidationError"]] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
