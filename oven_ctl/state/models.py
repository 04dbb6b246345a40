"""
Controller state data models.

This module defines the lifecycle states of a program run and the immutable
record of a single actuator command.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..program.models import HeatingSettings


class OvenState(str, Enum):
    """Lifecycle states of a program run."""
    IDLE = "idle"
    INITIAL_HEATUP = "initial_heatup"
    RUNNING_STAGE = "running_stage"
    FINISHING = "finishing"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (OvenState.DONE, OvenState.FAILED)


@dataclass(frozen=True)
class ActuatorCommand:
    """A single command received by an actuator."""
    actuator: str                                  # "heating_module" or "fan"
    command: str                                   # e.g. "grill", "on"
    settings: Optional[HeatingSettings] = None     # None for fan commands
