"""Tests for logging integration in the controller."""

import pytest
from unittest.mock import Mock

from oven_ctl.errors import HeatingFailure, OvenFailure
from oven_ctl.logging.config import (
    configure_logging, get_controller_logger, log_actuator_command, log_state_transition
)
from oven_ctl.program.models import HeatingSettings, HeatType


class TestLoggingIntegration:
    """Test logging of state transitions, actuator commands and failures."""

    def setup_method(self):
        """Set up test environment with logging capture."""
        configure_logging(level="DEBUG", format_json=True)

        self.log_messages = []
        self.mock_logger = Mock()

        def capture(level):
            def _capture(message, **kwargs):
                self.log_messages.append({
                    'message': message,
                    'level': level,
                    'kwargs': kwargs
                })
            return _capture

        self.mock_logger.info = capture('info')
        self.mock_logger.debug = capture('debug')
        self.mock_logger.warning = capture('warning')
        self.mock_logger.error = capture('error')
        self.mock_logger.bind.return_value = self.mock_logger

    def test_log_state_transition(self):
        log_state_transition(
            self.mock_logger, "run-1", "idle", "running_stage", "stage_start",
            context={"stage_index": 0}
        )

        self.mock_logger.bind.assert_any_call(
            program_id="run-1",
            from_state="idle",
            to_state="running_stage",
            trigger="stage_start",
        )
        self.mock_logger.bind.assert_any_call(context={"stage_index": 0})
        assert self.log_messages == [
            {'message': 'State transition', 'level': 'info', 'kwargs': {}}
        ]

    def test_log_actuator_command_with_settings(self):
        log_actuator_command(
            self.mock_logger, "heating_module", "grill",
            HeatingSettings(temperature=200, time=30), stage_index=2
        )

        self.mock_logger.bind.assert_any_call(
            actuator="heating_module", command="grill", stage_index=2
        )
        self.mock_logger.bind.assert_any_call(temperature=200, time=30)
        assert self.log_messages[0]['level'] == 'debug'

    def test_log_actuator_command_without_settings(self):
        log_actuator_command(self.mock_logger, "fan", "off")

        assert self.mock_logger.bind.call_count == 1

    def test_controller_logs_run(self, oven, multi_stage_program):
        oven.logger = self.mock_logger

        oven.run_program(multi_stage_program)

        messages = [m['message'] for m in self.log_messages]
        assert messages[0] == "Program started"
        assert messages[-1] == "Program completed"
        assert messages.count("State transition") == 6
        # heat-up, three stage commands, four fan on, one fan off
        assert messages.count("Actuator command") == 9

    def test_controller_logs_failure(self, oven, heating_module, make_program):
        oven.logger = self.mock_logger
        heating_module.termal_circuit.side_effect = HeatingFailure("fan-assisted element fault")

        with pytest.raises(OvenFailure):
            oven.run_program(make_program(HeatType.THERMO_CIRCULATION, True))

        errors = [m for m in self.log_messages if m['level'] == 'error']
        assert len(errors) == 1
        assert errors[0]['kwargs']['heat_type'] == "thermo_circulation"
        assert errors[0]['kwargs']['stage_index'] == 0
        assert errors[0]['kwargs']['error'] == "fan-assisted element fault"

    def test_controller_logger_binding(self):
        logger = get_controller_logger("oven_ctl.test")
        assert logger is not None
