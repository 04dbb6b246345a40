"""
Baking program data models.

This module defines immutable data structures describing a baking program:
its ordered stages, the heating mode of each stage and the settings handed
to the heating module for a single command.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class HeatType(str, Enum):
    """Heating mode used during a stage."""
    HEATER = "heater"
    THERMO_CIRCULATION = "thermo_circulation"
    GRILL = "grill"


@dataclass(frozen=True)
class HeatingSettings:
    """Settings passed to the heating module for one command."""
    temperature: int        # Degrees
    time: int               # Seconds, 0 = reach temperature without holding

    @classmethod
    def from_stage(cls, stage: "ProgramStage") -> "HeatingSettings":
        """Build settings from a program stage."""
        return cls(temperature=stage.target_temp, time=stage.stage_time)


@dataclass(frozen=True)
class ProgramStage:
    """One phase of a baking program."""
    target_temp: int
    stage_time: int
    heat: HeatType

    def __post_init__(self) -> None:
        # Accept plain strings such as "grill"; unknown values raise ValueError
        object.__setattr__(self, "heat", HeatType(self.heat))

    @staticmethod
    def builder() -> "ProgramStageBuilder":
        return ProgramStageBuilder()


@dataclass(frozen=True)
class BakingProgram:
    """A complete baking program.

    Stages run in the order given. Any iterable passed as ``stages`` is
    frozen into a tuple so the order cannot change after construction.
    """
    initial_temp: int
    stages: tuple[ProgramStage, ...]
    cool_at_finish: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "stages", tuple(self.stages))
        if not self.stages:
            raise ValueError("BakingProgram requires at least one stage")

    @staticmethod
    def builder() -> "BakingProgramBuilder":
        return BakingProgramBuilder()


class ProgramStageBuilder:
    """Fluent builder for ProgramStage."""

    def __init__(self) -> None:
        self._target_temp: Optional[int] = None
        self._stage_time: Optional[int] = None
        self._heat: Optional[HeatType] = None

    def with_target_temp(self, target_temp: int) -> "ProgramStageBuilder":
        self._target_temp = target_temp
        return self

    def with_stage_time(self, stage_time: int) -> "ProgramStageBuilder":
        self._stage_time = stage_time
        return self

    def with_heat(self, heat: HeatType) -> "ProgramStageBuilder":
        self._heat = heat
        return self

    def build(self) -> ProgramStage:
        missing = [
            name for name, value in (
                ("target_temp", self._target_temp),
                ("stage_time", self._stage_time),
                ("heat", self._heat),
            ) if value is None
        ]
        if missing:
            raise ValueError(f"ProgramStage is missing required fields: {', '.join(missing)}")

        return ProgramStage(
            target_temp=self._target_temp,
            stage_time=self._stage_time,
            heat=self._heat,
        )


class BakingProgramBuilder:
    """Fluent builder for BakingProgram."""

    def __init__(self) -> None:
        self._initial_temp = 0
        self._stages: Optional[tuple[ProgramStage, ...]] = None
        self._cool_at_finish = False

    def with_initial_temp(self, initial_temp: int) -> "BakingProgramBuilder":
        self._initial_temp = initial_temp
        return self

    def with_stages(self, stages: Iterable[ProgramStage]) -> "BakingProgramBuilder":
        self._stages = tuple(stages)
        return self

    def with_cool_at_finish(self, cool_at_finish: bool) -> "BakingProgramBuilder":
        self._cool_at_finish = cool_at_finish
        return self

    def build(self) -> BakingProgram:
        if self._stages is None:
            raise ValueError("BakingProgram is missing required field: stages")
        if not self._stages:
            raise ValueError("BakingProgram requires at least one stage")

        return BakingProgram(
            initial_temp=self._initial_temp,
            stages=self._stages,
            cool_at_finish=self._cool_at_finish,
        )
