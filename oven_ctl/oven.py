"""
Oven program controller.

Executes a BakingProgram by driving the fan and the heating module in a
fixed order:

    initial heat-up → per stage: fan on → heating command
    (→ fan off for thermo-circulation) → fan on if cooling at finish

Any HeatingFailure aborts the run and is re-raised as OvenFailure.
"""

import itertools
from typing import Optional

from .config.defaults import ControllerParams
from .errors import HeatingFailure, InvalidArgumentError, OvenFailure
from .hardware.base import Fan, HeatingModule
from .logging.config import get_controller_logger, log_actuator_command, log_state_transition
from .program.models import BakingProgram, HeatingSettings, HeatType, ProgramStage
from .state.models import OvenState

_run_ids = itertools.count(1)


class Oven:
    """
    Controller for a single oven.

    Holds the heating module and fan for its lifetime. Not safe for
    concurrent run_program calls; callers must serialize them.
    """

    def __init__(self, heating_module: HeatingModule, fan: Fan,
                 params: Optional[ControllerParams] = None) -> None:
        if heating_module is None:
            raise InvalidArgumentError("heating_module must not be None", argument="heating_module")
        if fan is None:
            raise InvalidArgumentError("fan must not be None", argument="fan")

        self.heating_module = heating_module
        self.fan = fan
        self.params = params or ControllerParams()
        self.logger = get_controller_logger(__name__)

        self._state = OvenState.IDLE
        self._run_id = "idle"

    @property
    def state(self) -> OvenState:
        """State reached by the most recent run.

        FAILED after any exception escaping run_program, including
        collaborator errors that are not HeatingFailure.
        """
        return self._state

    def run_program(self, program: BakingProgram) -> None:
        """
        Execute a baking program.

        Args:
            program: Program to run; never modified

        Raises:
            InvalidArgumentError: If program is None
            OvenFailure: If the heating module fails during any phase
        """
        if program is None:
            raise InvalidArgumentError("program must not be None", argument="program")

        self._run_id = f"run-{next(_run_ids)}"
        self._state = OvenState.IDLE
        self.logger.info(
            "Program started",
            program_id=self._run_id,
            stage_count=len(program.stages),
            initial_temp=program.initial_temp,
            cool_at_finish=program.cool_at_finish
        )

        try:
            self._execute(program)
        except OvenFailure:
            raise
        except Exception as exc:
            # Collaborator errors other than HeatingFailure propagate unchanged
            self.logger.error(
                "Unexpected error, aborting program",
                program_id=self._run_id,
                from_state=self._state.value,
                error=str(exc)
            )
            self._transition(OvenState.FAILED, "unexpected_error")
            raise

        self._transition(OvenState.DONE, "program_complete")
        self.logger.info("Program completed", program_id=self._run_id)

    def _execute(self, program: BakingProgram) -> None:
        # Optional heat-up before the first stage
        if program.initial_temp != 0:
            self._transition(OvenState.INITIAL_HEATUP, "initial_temp_set",
                             {"initial_temp": program.initial_temp})
            self._initial_heatup(program.initial_temp)

        # Stages run strictly in program order
        for index, stage in enumerate(program.stages):
            self._transition(OvenState.RUNNING_STAGE, "stage_start", {
                "stage_index": index,
                "heat": stage.heat.value,
                "target_temp": stage.target_temp,
                "stage_time": stage.stage_time
            })
            self._run_stage(index, stage)

        # Cooling is the last command of the run
        if program.cool_at_finish:
            self._transition(OvenState.FINISHING, "cool_at_finish")
            self._fan_on()

    def _initial_heatup(self, initial_temp: int) -> None:
        settings = HeatingSettings(
            temperature=initial_temp,
            time=self.params.initial_heatup_hold_time
        )
        log_actuator_command(self.logger, "heating_module", "heater", settings)

        try:
            self.heating_module.heater(settings)
        except HeatingFailure as exc:
            raise self._failure(exc, phase=OvenState.INITIAL_HEATUP.value,
                                heat_type=HeatType.HEATER) from exc

    def _run_stage(self, index: int, stage: ProgramStage) -> None:
        # Fan runs for every heating mode
        self._fan_on(index)

        settings = HeatingSettings.from_stage(stage)
        try:
            if stage.heat == HeatType.HEATER:
                log_actuator_command(self.logger, "heating_module", "heater", settings, index)
                self.heating_module.heater(settings)
            elif stage.heat == HeatType.THERMO_CIRCULATION:
                log_actuator_command(self.logger, "heating_module", "termal_circuit", settings, index)
                self.heating_module.termal_circuit(settings)
            elif stage.heat == HeatType.GRILL:
                log_actuator_command(self.logger, "heating_module", "grill", settings, index)
                self.heating_module.grill(settings)
        except HeatingFailure as exc:
            raise self._failure(exc, phase=OvenState.RUNNING_STAGE.value,
                                heat_type=stage.heat, stage_index=index) from exc

        # Reached only on success; a failed command leaves the fan running
        if stage.heat == HeatType.THERMO_CIRCULATION:
            log_actuator_command(self.logger, "fan", "off", stage_index=index)
            self.fan.off()

    def _fan_on(self, stage_index: Optional[int] = None) -> None:
        log_actuator_command(self.logger, "fan", "on", stage_index=stage_index)
        self.fan.on()

    def _failure(self, exc: HeatingFailure, phase: str, heat_type: HeatType,
                 stage_index: Optional[int] = None) -> OvenFailure:
        """Log a heating failure and build the OvenFailure that replaces it."""
        self.logger.error(
            "Heating failure, aborting program",
            program_id=self._run_id,
            phase=phase,
            stage_index=stage_index,
            heat_type=heat_type.value,
            error=str(exc)
        )
        self._transition(OvenState.FAILED, "heating_failure", {"phase": phase})

        return OvenFailure(
            "Oven program aborted: heating module failure",
            phase=phase,
            stage_index=stage_index,
            heat_type=heat_type.value,
            context={"program_id": self._run_id, "cause": str(exc)}
        )

    def _transition(self, new_state: OvenState, trigger: str,
                    context: Optional[dict] = None) -> None:
        log_state_transition(
            self.logger,
            program_id=self._run_id,
            from_state=self._state.value,
            to_state=new_state.value,
            trigger=trigger,
            context=context
        )
        self._state = new_state
