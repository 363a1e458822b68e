"""Export of the overlay (renderer-independent)."""

from .svg_report import (
    EXPORT_BACKGROUND,
    default_export_filename,
    render_svg_report,
    save_svg_report,
)

__all__ = [
    "EXPORT_BACKGROUND",
    "default_export_filename",
    "render_svg_report",
    "save_svg_report",
]
