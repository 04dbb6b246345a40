"""
Errors reported by actuator implementations.

Heating modules raise these when they cannot satisfy the requested settings.
The controller never lets them escape; they are wrapped into OvenFailure.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..program.models import HeatingSettings, HeatType


class HeatingFailure(Exception):
    """The heating module could not apply the requested settings."""

    def __init__(self, message: str, settings: Optional["HeatingSettings"] = None,
                 heat_type: Optional["HeatType"] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.settings = settings
        self.heat_type = heat_type
        self.context = context or {}
