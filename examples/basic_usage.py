#!/usr/bin/env python3
"""
Basic Usage Example - Oven Program Controller

This script runs a three-stage baking program against the dry-run actuators
and prints the commands the oven issued. It shows how to:
- Load controller and logging configuration
- Build a program from raw data
- Run it and inspect the command journal
- Handle a heating failure

Run: python examples/basic_usage.py
"""

from typing import Any, Dict

from oven_ctl.config.loader import ConfigLoader
from oven_ctl.errors import OvenFailure
from oven_ctl.hardware.dry_run import CommandJournal, DryRunFan, DryRunHeatingModule
from oven_ctl.logging.config import configure_from_params
from oven_ctl.oven import Oven
from oven_ctl.program.models import HeatType
from oven_ctl.program.normalizer import ProgramNormalizer


def create_sample_program() -> Dict[str, Any]:
    """Create a sample program: grill, then fan-assisted bake, then heater."""
    return {
        "initial_temp": 30,
        "cool_at_finish": True,
        "stages": [
            {"target_temp": 180, "stage_time": 60, "heat": "grill"},
            {"target_temp": 60, "stage_time": 120, "heat": "thermo_circulation"},
            {"target_temp": 30, "stage_time": 120, "heat": "heater"},
        ],
    }


def print_journal(journal: CommandJournal) -> None:
    """Print the commands received by the actuators."""
    for number, command in enumerate(journal.commands, start=1):
        line = f"  {number:2d}. {command.actuator}.{command.command}"
        if command.settings:
            line += f"  ({command.settings.temperature}°, {command.settings.time}s)"
        print(line)


def main():
    """Main demonstration function."""
    loader = ConfigLoader.create()
    configure_from_params(loader.logging_params({"logging": {"level": "WARNING"}}))
    params = loader.controller_params()

    program = ProgramNormalizer().normalize(create_sample_program())

    print("1. Running program with working actuators...")
    journal = CommandJournal()
    oven = Oven(DryRunHeatingModule(journal), DryRunFan(journal), params)
    oven.run_program(program)
    print_journal(journal)
    print(f"   Final state: {oven.state.value}")
    print()

    print("2. Running program with a broken thermo-circulation element...")
    journal = CommandJournal()
    heating = DryRunHeatingModule(journal, fail_on=[HeatType.THERMO_CIRCULATION])
    oven = Oven(heating, DryRunFan(journal), params)
    try:
        oven.run_program(program)
    except OvenFailure as e:
        print(f"   Program aborted: {e} (stage {e.stage_index}, {e.heat_type})")
    print_journal(journal)
    print(f"   Final state: {oven.state.value}")


if __name__ == "__main__":
    main()
