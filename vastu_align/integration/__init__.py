"""Front-end integration: validated settings and the session controller."""

from .settings import AppSettings, VALIDATORS
from .session import VastuSession

__all__ = [
    "AppSettings",
    "VALIDATORS",
    "VastuSession",
]
