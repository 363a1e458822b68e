"""
Point class for calibration geometry.

Conventions:
- Coordinates: canvas pixel space, x to the right, y downwards
- Units: pixels (float), no conversion between viewport and canvas is done here
- Points are immutable once recorded
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Tuple


@dataclass(frozen=True)
class Point:
    """
    A position picked on the canvas.

    Attributes:
        x: Horizontal pixel coordinate (grows to the right)
        y: Vertical pixel coordinate (grows downwards)
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce coordinates to float and reject non-finite values."""
        x = float(self.x)
        y = float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point coordinates must be finite, got ({x}, {y})")
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as an ``(x, y)`` tuple."""
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> 'Point':
        """Return a new point shifted by ``(dx, dy)``."""
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point':
        """
        Create a Point from a dictionary.

        Args:
            data: Dictionary with ``x`` and ``y`` keys

        Returns:
            New Point instance

        Raises:
            KeyError: If required fields are missing
            ValueError: If data is invalid
        """
        return cls(x=float(data["x"]), y=float(data["y"]))

    def __repr__(self) -> str:
        """Return string representation of the point."""
        return f"Point(x={self.x:.3f}, y={self.y:.3f})"
