"""
Calibration workflow stages.

The stage is never stored; it is derived from whether an image is usable
and which of the two calibration points have been placed.
"""

from enum import Enum
from typing import Optional

from ..models.options import CalibrationOptions


class Stage(Enum):
    """
    Progress of a calibration session.

    - NO_IMAGE: nothing to click on yet (or the image failed to load)
    - IMAGE_LOADED: waiting for the center (Brahmasthan)
    - CENTER_SET: waiting for the reference point
    - CALIBRATED: both points placed, zones can be laid out
    """
    NO_IMAGE = "no_image"
    IMAGE_LOADED = "image_loaded"
    CENTER_SET = "center_set"
    CALIBRATED = "calibrated"

    @property
    def step(self) -> int:
        """Status step shown in the UI (1: upload/center, 2: reference, 3: done)."""
        return _STEPS[self]


_STEPS = {
    Stage.NO_IMAGE: 1,
    Stage.IMAGE_LOADED: 1,
    Stage.CENTER_SET: 2,
    Stage.CALIBRATED: 3,
}


def derive_stage(image_loaded: bool, has_center: bool, has_reference: bool) -> Stage:
    """Pure mapping from ``(image_loaded, center, reference)`` to a stage."""
    if not image_loaded:
        return Stage.NO_IMAGE
    if not has_center:
        return Stage.IMAGE_LOADED
    if not has_reference:
        return Stage.CENTER_SET
    return Stage.CALIBRATED


def stage_hint(stage: Stage, options: Optional[CalibrationOptions] = None) -> str:
    """Instruction shown to the user for a stage."""
    if stage is Stage.NO_IMAGE:
        return "Please upload a floor plan image to begin."
    if stage is Stage.IMAGE_LOADED:
        return "Click on the center of your floor plan (Brahmasthan)."
    if stage is Stage.CENTER_SET:
        if options is None:
            options = CalibrationOptions()
        return (
            f"Click on a point to set as {options.offset_degrees:g}° "
            f"{options.rotation_direction.label} from North. Use the grid for precision."
        )
    return "Analysis complete. Use calibration settings to fine-tune."
