"""Optimization of whole animation dicts."""

from typing import Any

from ..constants import DEFAULT_PASSES
from .keyframe import is_keyframe_array, keyframes_from_raw, keyframes_to_raw
from .optimizer import OptimizeSettings, optimize_points


def optimize_keyframe_array(
    raw_points: list[list[Any]],
    settings: OptimizeSettings | None = None,
    passes: int = DEFAULT_PASSES,
) -> int:
    """Optimize a raw keyframe array in place. Returns the number of removed keyframes."""
    keyframes = keyframes_from_raw(raw_points)
    optimize_points(keyframes, settings, passes)
    removed = len(raw_points) - len(keyframes)
    raw_points[:] = keyframes_to_raw(keyframes)
    return removed


def optimize_animation(
    animation: dict[str, Any] | None,
    settings: OptimizeSettings | None = None,
    passes: int = DEFAULT_PASSES,
    skip_keys: tuple[str, ...] = (),
) -> int:
    """
    Optimize every keyframe array of an animation dict in place.

    Static values and point definition names are left alone.

    Args:
        animation: Property name to value mapping, e.g. ``{"_position": [[...], ...]}``
        settings: Optimizer settings
        passes: Number of sweeps per curve
        skip_keys: Properties that are never keyframe data

    Returns:
        Number of keyframes removed across all properties
    """
    if not animation:
        return 0

    removed = 0
    for key, value in animation.items():
        if key in skip_keys or not is_keyframe_array(value):
            continue
        removed += optimize_keyframe_array(value, settings, passes)
    return removed


def count_keyframes(animation: dict[str, Any] | None, skip_keys: tuple[str, ...] = ()) -> int:
    if not animation:
        return 0
    return sum(
        len(value)
        for key, value in animation.items()
        if key not in skip_keys and is_keyframe_array(value)
    )
