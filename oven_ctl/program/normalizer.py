"""
Program data normalization for converting raw program data to BakingProgram.

This module handles field name standardization (snake_case and camelCase
keys are both accepted), heat type parsing and type checking of raw program
mappings such as those decoded from JSON or YAML.
"""

from typing import Any, Mapping, Optional

from ..errors import ProgramFormatError
from ..logging.config import get_logger
from .models import BakingProgram, HeatType, ProgramStage

logger = get_logger(__name__)

FIELD_ALIASES = {
    "initialTemp": "initial_temp",
    "coolAtFinish": "cool_at_finish",
    "targetTemp": "target_temp",
    "stageTime": "stage_time",
}


class ProgramNormalizer:
    """
    Program data normalization pipeline.

    Turns a raw mapping into an immutable BakingProgram, raising
    ProgramFormatError on the first field that cannot be interpreted.
    """

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """
        Initialize program normalizer.

        Args:
            config: Normalization configuration dict
        """
        self.config = config or {}
        self.logger = logger

    def normalize(self, data: Mapping[str, Any]) -> BakingProgram:
        """
        Normalize a baking program from raw format.

        Args:
            data: Raw program mapping

        Returns:
            Normalized BakingProgram

        Raises:
            ProgramFormatError: If a field is missing or has the wrong type
        """
        if not isinstance(data, Mapping):
            raise ProgramFormatError(
                "Program data must be a mapping",
                raw_value=data
            )

        fields = self._standardize_keys(data)

        initial_temp = self._require_int(fields, "initial_temp", default=0)
        cool_at_finish = fields.get("cool_at_finish", False)
        if not isinstance(cool_at_finish, bool):
            raise ProgramFormatError(
                "cool_at_finish must be a boolean",
                field="cool_at_finish",
                raw_value=cool_at_finish
            )

        raw_stages = fields.get("stages")
        if not isinstance(raw_stages, (list, tuple)) or not raw_stages:
            raise ProgramFormatError(
                "stages must be a non-empty list",
                field="stages",
                raw_value=raw_stages
            )

        stages = [self.normalize_stage(raw, index) for index, raw in enumerate(raw_stages)]

        self.logger.debug(
            "Program normalized",
            stage_count=len(stages),
            initial_temp=initial_temp,
            cool_at_finish=cool_at_finish
        )

        return BakingProgram(
            initial_temp=initial_temp,
            stages=tuple(stages),
            cool_at_finish=cool_at_finish,
        )

    def normalize_stage(self, data: Any, index: int = 0) -> ProgramStage:
        """Normalize a single stage mapping."""
        if not isinstance(data, Mapping):
            raise ProgramFormatError(
                f"Stage {index} must be a mapping",
                field=f"stages[{index}]",
                raw_value=data
            )

        fields = self._standardize_keys(data)

        return ProgramStage(
            target_temp=self._require_int(fields, "target_temp", prefix=f"stages[{index}]."),
            stage_time=self._require_int(fields, "stage_time", prefix=f"stages[{index}]."),
            heat=self.parse_heat_type(fields.get("heat"), field=f"stages[{index}].heat"),
        )

    @staticmethod
    def parse_heat_type(value: Any, field: str = "heat") -> HeatType:
        """Parse a heat type from an enum member, its value or its name."""
        if isinstance(value, HeatType):
            return value

        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for heat_type in HeatType:
                if key == heat_type.value:
                    return heat_type

        raise ProgramFormatError(
            f"Unknown heat type: {value!r}",
            field=field,
            raw_value=value
        )

    def _standardize_keys(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {FIELD_ALIASES.get(key, key): value for key, value in data.items()}

    def _require_int(self, fields: dict[str, Any], name: str,
                     default: Optional[int] = None, prefix: str = "") -> int:
        value = fields.get(name, default)

        if value is None:
            raise ProgramFormatError(
                f"Missing required field: {prefix}{name}",
                field=f"{prefix}{name}"
            )

        if not isinstance(value, int) or isinstance(value, bool):
            raise ProgramFormatError(
                f"{prefix}{name} must be an integer",
                field=f"{prefix}{name}",
                raw_value=value
            )

        return value
