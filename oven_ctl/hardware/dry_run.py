"""Dry-run actuators that log and journal commands instead of driving hardware."""

from typing import Iterable, Optional

from ..errors import HeatingFailure
from ..logging.config import get_hardware_logger, log_actuator_command
from ..program.models import HeatingSettings, HeatType
from ..state.models import ActuatorCommand
from .base import Fan, HeatingModule


class CommandJournal:
    """Ordered record of commands received by one or more actuators."""

    def __init__(self) -> None:
        self._commands: list[ActuatorCommand] = []

    def record(self, command: ActuatorCommand) -> None:
        self._commands.append(command)

    @property
    def commands(self) -> list[ActuatorCommand]:
        return list(self._commands)

    def names(self) -> list[str]:
        """Commands as "actuator.command" strings, in the order received."""
        return [f"{c.actuator}.{c.command}" for c in self._commands]

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)


class DryRunHeatingModule(HeatingModule):
    """Heating module stand-in.

    Commands for heat types listed in ``fail_on`` raise HeatingFailure
    after being journalled.
    """

    def __init__(self, journal: Optional[CommandJournal] = None,
                 fail_on: Iterable[HeatType] = ()):
        self.journal = journal if journal is not None else CommandJournal()
        self.fail_on = frozenset(fail_on)
        self.logger = get_hardware_logger(__name__)

    def heater(self, settings: HeatingSettings) -> None:
        self._apply(HeatType.HEATER, "heater", settings)

    def termal_circuit(self, settings: HeatingSettings) -> None:
        self._apply(HeatType.THERMO_CIRCULATION, "termal_circuit", settings)

    def grill(self, settings: HeatingSettings) -> None:
        self._apply(HeatType.GRILL, "grill", settings)

    def _apply(self, heat_type: HeatType, command: str, settings: HeatingSettings) -> None:
        self.journal.record(ActuatorCommand("heating_module", command, settings))
        log_actuator_command(self.logger, "heating_module", command, settings)

        if heat_type in self.fail_on:
            self.logger.warning(
                "Simulated heating failure",
                command=command,
                heat_type=heat_type.value
            )
            raise HeatingFailure(
                f"Simulated {heat_type.value} failure",
                settings=settings,
                heat_type=heat_type
            )


class DryRunFan(Fan):
    """Fan stand-in that tracks whether it is running."""

    def __init__(self, journal: Optional[CommandJournal] = None):
        self.journal = journal if journal is not None else CommandJournal()
        self.running = False
        self.logger = get_hardware_logger(__name__)

    def on(self) -> None:
        self.running = True
        self.journal.record(ActuatorCommand("fan", "on"))
        log_actuator_command(self.logger, "fan", "on")

    def off(self) -> None:
        self.running = False
        self.journal.record(ActuatorCommand("fan", "off"))
        log_actuator_command(self.logger, "fan", "off")
