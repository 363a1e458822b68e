"""Application settings for a Vastu Align session.

This module provides a settings store that:
- Holds user preferences in memory for the lifetime of a session
- Provides defaults used by the calibration engine and the presentation layer
- Converts raw input (free text, toggles) to the correct type
- Validates and clamps values, falling back to defaults instead of raising
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..core.models.options import (
    CalibrationOptions,
    RotationDirection,
    coerce_offset_degrees,
    coerce_rotation_direction,
    coerce_snap_enabled,
    coerce_snap_interval,
)


# =============================================================================
# Type conversion helpers
# =============================================================================

def _to_float(v: Any) -> float:
    """Robust float conversion."""
    return float(v)


def _to_direction(v: Any) -> str:
    """Rotation direction as its stored string value ("cw" / "acw")."""
    return coerce_rotation_direction(v).value


# =============================================================================
# Validators / Clamps
# =============================================================================

def _clamp(min_val: float, max_val: float) -> Callable[[float], float]:
    """Return a clamping function for numeric values."""
    def clamp(v: float) -> float:
        return max(min_val, min(max_val, v))
    return clamp


# Format: key -> (converter, validator_or_None)
VALIDATORS: Dict[str, Tuple[Callable, Optional[Callable]]] = {
    # Calibration - fall back rather than raise
    "offset_degrees": (coerce_offset_degrees, None),
    "snap_interval_degrees": (coerce_snap_interval, None),
    "rotation_direction": (_to_direction, None),
    "snap_enabled": (coerce_snap_enabled, None),

    # Presentation - numeric ranges
    "label_radius_fraction": (_to_float, _clamp(0.05, 0.5)),
    "spoke_radius_factor": (_to_float, _clamp(1.0, 10.0)),
    "image_fit_margin": (_to_float, _clamp(0.1, 1.0)),
    "image_alpha": (_to_float, _clamp(0.0, 1.0)),
}


# =============================================================================
# Defaults dataclass
# =============================================================================

@dataclass(frozen=True)
class _Defaults:
    """Default values for all settings."""

    # Calibration
    offset_degrees: float = 0.0
    snap_interval_degrees: float = 2.0
    rotation_direction: str = "cw"          # cw, acw
    snap_enabled: bool = True

    # Presentation
    label_radius_fraction: float = 0.44
    spoke_radius_factor: float = 2.0
    image_fit_margin: float = 0.95
    image_alpha: float = 0.8


# =============================================================================
# Main settings class
# =============================================================================

class AppSettings:
    """
    Validated in-memory settings for one session.

    Features:
    - Type-safe: converts free-text input back to the correct types
    - Validated: clamps numeric values to safe ranges
    - Forgiving: unusable input yields the default instead of an error

    Usage:
        settings = AppSettings()
        settings.set("offset_degrees", "30")
        settings.get("offset_degrees")      # 30.0
        settings.set("snap_interval_degrees", "abc")
        settings.get("snap_interval_degrees")  # 2.0
        settings.reset()
    """

    DEFAULTS = _Defaults()

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = self._defaults_dict()
        for key, value in (values or {}).items():
            self.set(key, value)

    @classmethod
    def _defaults_dict(cls) -> Dict[str, Any]:
        """Get defaults as a dictionary."""
        return cls.DEFAULTS.__dict__.copy()

    @classmethod
    def _convert_and_validate(cls, key: str, raw_value: Any, default: Any) -> Any:
        """
        Convert raw value to correct type and validate/clamp.

        Args:
            key: Setting key
            raw_value: Raw input (may be wrong type)
            default: Default value returned when conversion fails

        Returns:
            Converted and validated value
        """
        converter, validator = VALIDATORS[key]
        try:
            value = converter(raw_value)
            if validator is not None:
                value = validator(value)
            return value
        except (ValueError, TypeError):
            return default

    def _check_key(self, key: str) -> None:
        if key not in self._values:
            raise KeyError(f"Unknown setting key: {key}")

    def get(self, key: str) -> Any:
        """
        Get a setting value.

        Raises:
            KeyError: If the key is not a valid setting
        """
        self._check_key(key)
        return self._values[key]

    def set(self, key: str, value: Any) -> Any:
        """
        Set a setting value, converting and validating it first.

        Returns:
            The value actually stored

        Raises:
            KeyError: If the key is not a valid setting
        """
        self._check_key(key)
        validated = self._convert_and_validate(key, value, self.get_default(key))
        self._values[key] = validated
        return validated

    def reset(self, key: Union[str, None] = None) -> None:
        """
        Reset setting(s) to default values.

        Args:
            key: Setting key to reset, or None to reset all settings

        Raises:
            KeyError: If the key is not a valid setting
        """
        if key is None:
            self._values = self._defaults_dict()
            return
        self._check_key(key)
        self._values[key] = self.get_default(key)

    def all(self) -> Dict[str, Any]:
        """Get all settings as a dictionary."""
        return dict(self._values)

    @classmethod
    def keys(cls) -> list:
        """Get all setting keys."""
        return list(cls._defaults_dict().keys())

    def is_default(self, key: str) -> bool:
        """Check if a setting has its default value."""
        return self.get(key) == self.get_default(key)

    @classmethod
    def get_default(cls, key: str) -> Any:
        """Get the default value for a setting."""
        defaults = cls._defaults_dict()
        if key not in defaults:
            raise KeyError(f"Unknown setting key: {key}")
        return defaults[key]

    def calibration_options(self) -> CalibrationOptions:
        """Calibration options built from the current settings."""
        return CalibrationOptions(
            offset_degrees=self.get("offset_degrees"),
            rotation_direction=RotationDirection(self.get("rotation_direction")),
            snap_interval_degrees=self.get("snap_interval_degrees"),
            snap_enabled=self.get("snap_enabled"),
        )
