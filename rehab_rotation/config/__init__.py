"""Rehab Rotation Config"""

from .settings import RehabRotationSettings, settings

__all__ = [
    "RehabRotationSettings",
    "settings",
]
