"""Calibration workflow: stages and the calibration state machine."""

from .stage import Stage, derive_stage, stage_hint
from .state import CalibrationState

__all__ = [
    "Stage",
    "derive_stage",
    "stage_hint",
    "CalibrationState",
]
