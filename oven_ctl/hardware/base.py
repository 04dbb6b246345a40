"""Base classes for the actuators driven by the oven controller."""

from abc import ABC, abstractmethod

from ..program.models import HeatingSettings


class HeatingModule(ABC):
    """Heating module with three independent heating commands.

    Each command returns nothing on success and raises HeatingFailure when
    the requested settings cannot be applied.
    """

    @abstractmethod
    def heater(self, settings: HeatingSettings) -> None:
        """Heat with the main heating element."""
        pass

    @abstractmethod
    def termal_circuit(self, settings: HeatingSettings) -> None:
        """Heat with thermo-circulation."""
        pass

    @abstractmethod
    def grill(self, settings: HeatingSettings) -> None:
        """Heat with the grill element."""
        pass


class Fan(ABC):
    """Circulation fan. Commands have no failure mode."""

    @abstractmethod
    def on(self) -> None:
        pass

    @abstractmethod
    def off(self) -> None:
        pass
