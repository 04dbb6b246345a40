"""Integration tests running programs against the dry-run actuators."""

import pytest
from pathlib import Path
from typing import Any, Dict

from oven_ctl.config.loader import ConfigLoader
from oven_ctl.errors import OvenFailure
from oven_ctl.hardware.dry_run import CommandJournal, DryRunFan, DryRunHeatingModule
from oven_ctl.oven import Oven
from oven_ctl.program.models import HeatingSettings, HeatType
from oven_ctl.program.normalizer import ProgramNormalizer
from oven_ctl.state.models import OvenState


@pytest.mark.integration
class TestFullProgram:
    """Integration tests for the complete program pipeline."""

    def setup_method(self):
        self.journal = CommandJournal()
        self.fan = DryRunFan(self.journal)

    def test_raw_program_to_commands(self, raw_program: Dict[str, Any]) -> None:
        oven = Oven(DryRunHeatingModule(self.journal), self.fan)

        oven.run_program(ProgramNormalizer().normalize(raw_program))

        assert self.journal.names() == [
            "heating_module.heater",
            "fan.on",
            "heating_module.grill",
            "fan.on",
            "heating_module.termal_circuit",
            "fan.off",
            "fan.on",
            "heating_module.heater",
            "fan.on",
        ]
        assert self.fan.running is True
        assert oven.state == OvenState.DONE

    def test_failure_leaves_fan_as_last_set(self, raw_program: Dict[str, Any]) -> None:
        heating = DryRunHeatingModule(self.journal, fail_on=[HeatType.THERMO_CIRCULATION])
        oven = Oven(heating, self.fan)

        with pytest.raises(OvenFailure):
            oven.run_program(ProgramNormalizer().normalize(raw_program))

        assert self.journal.names()[-1] == "heating_module.termal_circuit"
        assert self.fan.running is True
        assert oven.state == OvenState.FAILED

    def test_configured_controller(self, tmp_path: Path, raw_program: Dict[str, Any]) -> None:
        (tmp_path / "oven.yaml").write_text("controller:\n  initial_heatup_hold_time: 45\n")
        params = ConfigLoader.create(tmp_path).controller_params()
        oven = Oven(DryRunHeatingModule(self.journal), self.fan, params)

        oven.run_program(ProgramNormalizer().normalize(raw_program))

        assert self.journal.commands[0].settings == HeatingSettings(temperature=30, time=45)
