"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict
from unittest.mock import Mock

from oven_ctl.hardware.base import Fan, HeatingModule
from oven_ctl.oven import Oven
from oven_ctl.program.models import BakingProgram, HeatType, ProgramStage


@pytest.fixture
def heating_module() -> Mock:
    """Heating module mock restricted to the HeatingModule interface."""
    return Mock(spec=HeatingModule)


@pytest.fixture
def fan() -> Mock:
    """Fan mock restricted to the Fan interface."""
    return Mock(spec=Fan)


@pytest.fixture
def actuators(heating_module: Mock, fan: Mock) -> Mock:
    """Parent mock recording heating module and fan calls in a single order."""
    manager = Mock()
    manager.attach_mock(heating_module, "heating_module")
    manager.attach_mock(fan, "fan")
    return manager


@pytest.fixture
def oven(heating_module: Mock, fan: Mock) -> Oven:
    """Oven wired to the actuator mocks."""
    return Oven(heating_module, fan)


@pytest.fixture
def standard_stage() -> ProgramStage:
    """Heater stage at 180 degrees for two minutes."""
    return ProgramStage.builder() \
        .with_target_temp(180) \
        .with_stage_time(120) \
        .with_heat(HeatType.HEATER) \
        .build()


@pytest.fixture
def standard_program(standard_stage: ProgramStage) -> BakingProgram:
    """Single heater stage, no initial heat-up, no cooling."""
    return BakingProgram.builder() \
        .with_cool_at_finish(False) \
        .with_initial_temp(0) \
        .with_stages([standard_stage]) \
        .build()


@pytest.fixture
def multi_stage_program() -> BakingProgram:
    """Grill, thermo-circulation and heater stages with heat-up and cooling."""
    return BakingProgram(
        initial_temp=30,
        stages=(
            ProgramStage(target_temp=180, stage_time=60, heat=HeatType.GRILL),
            ProgramStage(target_temp=60, stage_time=120, heat=HeatType.THERMO_CIRCULATION),
            ProgramStage(target_temp=30, stage_time=120, heat=HeatType.HEATER),
        ),
        cool_at_finish=True,
    )


@pytest.fixture
def raw_program() -> Dict[str, Any]:
    """Raw program mapping as it would arrive from JSON or YAML."""
    return {
        "initial_temp": 30,
        "cool_at_finish": True,
        "stages": [
            {"target_temp": 180, "stage_time": 60, "heat": "grill"},
            {"target_temp": 60, "stage_time": 120, "heat": "thermo_circulation"},
            {"target_temp": 30, "stage_time": 120, "heat": "heater"},
        ],
    }


def single_stage_program(heat: HeatType, cool_at_finish: bool,
                         initial_temp: int = 0) -> BakingProgram:
    """One-stage program with the given heat type."""
    return BakingProgram(
        initial_temp=initial_temp,
        stages=(ProgramStage(target_temp=1, stage_time=1, heat=heat),),
        cool_at_finish=cool_at_finish,
    )


@pytest.fixture
def make_program():
    """Factory for single-stage programs."""
    return single_stage_program
