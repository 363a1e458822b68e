"""Canvas size and image placement.

Pointer coordinates, calibration points and draw commands all share the
canvas pixel space described here.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FIT_MARGIN = 0.95
DEFAULT_LABEL_RADIUS_FRACTION = 0.44
DEFAULT_SPOKE_RADIUS_FACTOR = 2.0


@dataclass(frozen=True)
class ImagePlacement:
    """Where the image is drawn on the canvas."""

    x: float
    y: float
    scale: float
    width: float
    height: float


@dataclass(frozen=True)
class Viewport:
    """
    Canvas the overlay is drawn on.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        fit_margin: Fraction of the canvas the fitted image may fill
        label_radius_fraction: Label distance as a fraction of the smaller side
        spoke_radius_factor: Spoke length as a multiple of the larger side
    """

    width: float
    height: float
    fit_margin: float = DEFAULT_FIT_MARGIN
    label_radius_fraction: float = DEFAULT_LABEL_RADIUS_FRACTION
    spoke_radius_factor: float = DEFAULT_SPOKE_RADIUS_FACTOR

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")

    @property
    def spoke_radius(self) -> float:
        """Length of radial lines; long enough to leave the canvas from any center."""
        return max(self.width, self.height) * self.spoke_radius_factor

    @property
    def label_radius(self) -> float:
        return min(self.width, self.height) * self.label_radius_fraction

    def fit_image(self, image_width: float, image_height: float) -> ImagePlacement:
        """Scale an image to fit the canvas, preserving aspect ratio, centred."""
        if image_width <= 0 or image_height <= 0:
            raise ValueError(f"Image size must be positive, got {image_width}x{image_height}")
        scale = min(self.width / image_width, self.height / image_height) * self.fit_margin
        width = image_width * scale
        height = image_height * scale
        return ImagePlacement(
            x=(self.width - width) / 2,
            y=(self.height - height) / 2,
            scale=scale,
            width=width,
            height=height,
        )
