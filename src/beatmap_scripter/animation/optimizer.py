"""Keyframe reduction for animation curves."""

from dataclasses import dataclass, field

from ..constants import (
    DEFAULT_PASSES,
    SIMILAR_DIFFERENCE_THRESHOLD,
    SIMILAR_TIME_DIFFERENCE_THRESHOLD,
    SLOPE_DIFFERENCE_THRESHOLD,
    SLOPE_TIME_DIFFERENCE_THRESHOLD,
    SLOPE_Y_INTERCEPT_DIFFERENCE_THRESHOLD,
)
from .keyframe import Keyframe
from .similarity import (
    optimize_duplicates,
    optimize_similar_points,
    optimize_similar_points_slope,
)


@dataclass(frozen=True, slots=True)
class DuplicatesSettings:
    active: bool = True


@dataclass(frozen=True, slots=True)
class SimilarPointsSettings:
    active: bool = True
    difference_threshold: float = SIMILAR_DIFFERENCE_THRESHOLD
    time_difference_threshold: float = SIMILAR_TIME_DIFFERENCE_THRESHOLD


@dataclass(frozen=True, slots=True)
class SimilarPointsSlopeSettings:
    active: bool = True
    difference_threshold: float = SLOPE_DIFFERENCE_THRESHOLD
    time_difference_threshold: float = SLOPE_TIME_DIFFERENCE_THRESHOLD
    y_intercept_difference_threshold: float = SLOPE_Y_INTERCEPT_DIFFERENCE_THRESHOLD


@dataclass(frozen=True, slots=True)
class OptimizeSettings:
    """Which redundancy checks run, and their thresholds."""

    optimize: bool = True
    optimize_duplicates: DuplicatesSettings = field(default_factory=DuplicatesSettings)
    optimize_similar_points: SimilarPointsSettings = field(default_factory=SimilarPointsSettings)
    optimize_similar_points_slope: SimilarPointsSlopeSettings = field(
        default_factory=SimilarPointsSlopeSettings
    )

    @property
    def any_active(self) -> bool:
        return (
            self.optimize_duplicates.active
            or self.optimize_similar_points.active
            or self.optimize_similar_points_slope.active
        )


def _redundancy_votes(
    settings: OptimizeSettings, a: Keyframe, b: Keyframe, c: Keyframe | None
) -> list[bool]:
    """Evaluate every active check; one vote per active check."""
    votes: list[bool] = []
    if settings.optimize_duplicates.active:
        votes.append(optimize_duplicates(a, b, c))
    if settings.optimize_similar_points.active:
        similar = settings.optimize_similar_points
        votes.append(
            optimize_similar_points(
                a,
                b,
                c,
                difference_threshold=similar.difference_threshold,
                time_difference_threshold=similar.time_difference_threshold,
            )
        )
    if settings.optimize_similar_points_slope.active:
        slope = settings.optimize_similar_points_slope
        votes.append(
            optimize_similar_points_slope(
                a,
                b,
                c,
                difference_threshold=slope.difference_threshold,
                time_difference_threshold=slope.time_difference_threshold,
                y_intercept_difference_threshold=slope.y_intercept_difference_threshold,
            )
        )
    return votes


def _sweep(points: list[Keyframe], settings: OptimizeSettings) -> None:
    """One left-to-right pass, removing in place."""
    if len(points) == 2:
        if any(_redundancy_votes(settings, points[0], points[1], None)):
            del points[1]
        return

    i = 1
    while i < len(points) - 1:
        votes = _redundancy_votes(settings, points[i - 1], points[i], points[i + 1])
        if votes and all(votes):
            # Stay on the same index: the next point is now the middle of a new triple
            del points[i]
        else:
            i += 1


def optimize_points(
    points: list[Keyframe],
    settings: OptimizeSettings | None = None,
    passes: int = DEFAULT_PASSES,
) -> list[Keyframe]:
    """
    Remove redundant keyframes from a curve.

    The list is sorted by time and shrunk in place; keyframes are never added
    or modified. Two points drop the second one when any active check flags it.
    For longer curves an interior point is dropped only when every active check
    flags it.

    Args:
        points: Keyframes of one curve
        settings: Checks and thresholds to use, defaults to ``OptimizeSettings()``
        passes: Number of full sweeps over the curve

    Returns:
        The same list object
    """
    settings = settings or OptimizeSettings()
    if not settings.optimize:
        return points

    points.sort(key=lambda point: point.time)

    if len(points) < 2 or not settings.any_active:
        return points

    for _ in range(passes):
        before = len(points)
        _sweep(points, settings)
        if len(points) == before:
            break

    return points
