"""Keyframe optimization and light remapping for rhythm game difficulties."""

from .animation import Keyframe, OptimizeSettings, optimize_animation, optimize_points
from .difficulty import Difficulty, OptimizeReport
from .lighting import BaseLightRemapper, LightEvent, LightRemapper, apply, solve

__all__ = [
    "Keyframe",
    "OptimizeSettings",
    "optimize_animation",
    "optimize_points",
    "Difficulty",
    "OptimizeReport",
    "BaseLightRemapper",
    "LightEvent",
    "LightRemapper",
    "apply",
    "solve",
]
