"""Redundancy predicates over consecutive keyframes.

Each predicate looks at two points (A, B) or three points (A, B, C) and returns
True when the examined point is redundant: B for two points, the middle point
for three. None of them mutate the keyframes.
"""

from dataclasses import dataclass
from typing import Sequence

from ..constants import (
    SIMILAR_DIFFERENCE_THRESHOLD,
    SIMILAR_TIME_DIFFERENCE_THRESHOLD,
    SLOPE_DIFFERENCE_THRESHOLD,
    SLOPE_TIME_DIFFERENCE_THRESHOLD,
    SLOPE_Y_INTERCEPT_DIFFERENCE_THRESHOLD,
)
from .keyframe import Keyframe


@dataclass(frozen=True, slots=True)
class SlopeComparison:
    """Outcome of comparing the A->B and A->C slopes of three points."""
    similar: bool
    skip: bool = False


def _check_arity(first: Sequence[float], second: Sequence[float]) -> None:
    if len(first) != len(second):
        raise ValueError(
            f"Arrays are not matching lengths. First: {len(first)} Second: {len(second)}"
        )


def are_values_identical(first: Sequence[float], second: Sequence[float]) -> bool:
    _check_arity(first, second)
    return all(a == b for a, b in zip(first, second))


def are_floats_similar(first: Sequence[float], second: Sequence[float], threshold: float) -> bool:
    """
    Check that every channel differs by strictly less than ``threshold``.

    A zero threshold never reports similarity.

    Raises:
        ValueError: If the sequences have different lengths
    """
    _check_arity(first, second)
    return all(abs(a - b) < threshold for a, b in zip(first, second))


def are_points_similar(
    a: Keyframe,
    b: Keyframe,
    difference_threshold: float,
    time_difference_threshold: float,
) -> bool:
    return (
        are_floats_similar(a.values, b.values, difference_threshold)
        and abs(a.time - b.time) < time_difference_threshold
    )


def _same_interpolation(a: Keyframe, b: Keyframe) -> bool:
    return a.easing == b.easing and a.spline == b.spline


def slopes_between(a: Keyframe, b: Keyframe) -> list[float]:
    """
    Per-channel slope of the segment a->b with value as x and time as y.

    Zero-length segments (equal time or equal value) give a slope of 0.
    """
    _check_arity(a.values, b.values)
    y_diff = b.time - a.time
    slopes = []
    for value_a, value_b in zip(a.values, b.values):
        x_diff = value_b - value_a
        if x_diff == 0 or y_diff == 0:
            slopes.append(0.0)
        else:
            slopes.append(y_diff / x_diff)
    return slopes


def y_intercepts(point: Keyframe, slopes: Sequence[float]) -> list[float]:
    """Per-channel intercept ``b = y - m * x`` of lines through ``point``."""
    _check_arity(point.values, slopes)
    return [point.time - slope * value for slope, value in zip(slopes, point.values)]


def compare_points_slope(
    start: Keyframe,
    middle: Keyframe,
    end: Keyframe,
    time_difference_threshold: float,
    difference_threshold: float,
    y_intercept_difference_threshold: float,
) -> SlopeComparison:
    """
    Compare the slope from ``start`` to ``middle`` against ``start`` to ``end``.

    Args:
        start: First point (A)
        middle: Point being tested (B)
        end: Last point (C)
        time_difference_threshold: Points at most this far apart in time are skipped
        difference_threshold: Max per-channel slope difference
        y_intercept_difference_threshold: Max per-channel intercept difference

    Returns:
        The comparison; ``skip`` is set when the triple is inconclusive
    """
    if (
        abs(start.time - end.time) <= time_difference_threshold
        or abs(start.time - middle.time) <= time_difference_threshold
        or abs(middle.time - end.time) <= time_difference_threshold
    ):
        return SlopeComparison(similar=False, skip=True)

    if not _same_interpolation(middle, end):
        return SlopeComparison(similar=False, skip=True)

    # Identical values held over a long gap are a keyframe pause
    if abs(end.time - middle.time) > difference_threshold and are_floats_similar(
        end.values, middle.values, difference_threshold
    ):
        return SlopeComparison(similar=False, skip=True)

    end_slopes = slopes_between(start, end)
    middle_slopes = slopes_between(start, middle)
    middle_intercepts = y_intercepts(middle, middle_slopes)
    end_intercepts = y_intercepts(end, end_slopes)

    similar = are_floats_similar(
        middle_intercepts, end_intercepts, y_intercept_difference_threshold
    ) and are_floats_similar(middle_slopes, end_slopes, difference_threshold)
    return SlopeComparison(similar=similar)


def optimize_duplicates(a: Keyframe, b: Keyframe, c: Keyframe | None = None) -> bool:
    """Exact duplicates. Time is ignored."""
    if c is None:
        return are_values_identical(a.values, b.values)
    return are_values_identical(a.values, b.values) and are_values_identical(b.values, c.values)


def optimize_similar_points(
    a: Keyframe,
    b: Keyframe,
    c: Keyframe | None = None,
    difference_threshold: float = SIMILAR_DIFFERENCE_THRESHOLD,
    time_difference_threshold: float = SIMILAR_TIME_DIFFERENCE_THRESHOLD,
) -> bool:
    """Near duplicates in both value and time, with matching easing and spline."""
    if not _same_interpolation(a, b) or (c is not None and not _same_interpolation(b, c)):
        return False

    if c is None:
        return are_points_similar(a, b, difference_threshold, time_difference_threshold)

    return are_points_similar(
        a, b, difference_threshold, time_difference_threshold
    ) and are_points_similar(b, c, difference_threshold, time_difference_threshold)


def optimize_similar_points_slope(
    a: Keyframe,
    b: Keyframe,
    c: Keyframe | None = None,
    difference_threshold: float = SLOPE_DIFFERENCE_THRESHOLD,
    time_difference_threshold: float = SLOPE_TIME_DIFFERENCE_THRESHOLD,
    y_intercept_difference_threshold: float = SLOPE_Y_INTERCEPT_DIFFERENCE_THRESHOLD,
) -> bool:
    """Middle point lying on the line through its neighbours. Needs three points."""
    if c is None:
        return False

    if not _same_interpolation(a, b) or not _same_interpolation(b, c):
        return False

    comparison = compare_points_slope(
        a,
        b,
        c,
        time_difference_threshold=time_difference_threshold,
        difference_threshold=difference_threshold,
        y_intercept_difference_threshold=y_intercept_difference_threshold,
    )
    return comparison.similar
