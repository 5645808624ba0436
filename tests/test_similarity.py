"""Tests for the keyframe redundancy predicates."""

import pytest

from beatmap_scripter.animation import (
    Keyframe,
    compare_points_slope,
    optimize_duplicates,
    optimize_similar_points,
    optimize_similar_points_slope,
)
from beatmap_scripter.animation.similarity import (
    are_floats_similar,
    slopes_between,
    y_intercepts,
)


def kf(time: float, *values: float, easing: str | None = None, spline: str | None = None) -> Keyframe:
    return Keyframe(time=time, values=tuple(values), easing=easing, spline=spline)


class TestDuplicates:
    """Tests for the exact duplicate check."""

    def test_two_identical_points(self) -> None:
        assert optimize_duplicates(kf(0, 1, 2), kf(5, 1, 2))

    def test_two_different_points(self) -> None:
        assert not optimize_duplicates(kf(0, 1, 2), kf(5, 1, 2.0001))

    def test_three_points_ignore_time(self) -> None:
        """The middle point goes when all three have the same values."""
        assert optimize_duplicates(kf(0, 0, 0), kf(0.5, 0, 0), kf(1, 0, 0))
        assert not optimize_duplicates(kf(0, 0, 0), kf(0.5, 0, 0), kf(1, 0, 1))

    def test_mismatched_arity_fails(self) -> None:
        with pytest.raises(ValueError, match="not matching lengths"):
            optimize_duplicates(kf(0, 1), kf(1, 1, 1))


class TestSimilarPoints:
    """Tests for the near duplicate check."""

    def test_threshold_is_exclusive(self) -> None:
        """A difference equal to the threshold is not similar."""
        assert are_floats_similar([0.0], [0.4], 0.5)
        assert not are_floats_similar([0.0], [0.5], 0.5)

    def test_zero_threshold_is_never_similar(self) -> None:
        assert not are_floats_similar([1.0, 2.0], [1.0, 2.0], 0)

    def test_mismatched_arity_fails(self) -> None:
        with pytest.raises(ValueError):
            are_floats_similar([0.0, 1.0], [0.0], 1)

    def test_two_close_points(self) -> None:
        assert optimize_similar_points(kf(0, 0), kf(0.01, 0.5))

    def test_time_gap_breaks_similarity(self) -> None:
        assert not optimize_similar_points(kf(0, 0), kf(0.03, 0.5))

    def test_different_easing_is_kept(self) -> None:
        assert not optimize_similar_points(kf(0, 0), kf(0.01, 0, easing="easeInSine"))

    def test_three_points_need_both_pairs(self) -> None:
        assert optimize_similar_points(kf(0, 0), kf(0.02, 0.1), kf(0.04, 0.2))
        assert not optimize_similar_points(kf(0, 0), kf(0.02, 0.1), kf(0.1, 0.2))

    def test_three_points_check_spline(self) -> None:
        assert not optimize_similar_points(
            kf(0, 0), kf(0.02, 0.1), kf(0.04, 0.2, spline="splineCatmullRom")
        )

    def test_custom_thresholds(self) -> None:
        assert optimize_similar_points(
            kf(0, 0), kf(0.5, 3), difference_threshold=5, time_difference_threshold=1
        )


class TestSimilarPointsSlope:
    """Tests for the collinear slope check."""

    def test_collinear_middle_point_is_redundant(self) -> None:
        assert optimize_similar_points_slope(kf(0, 0), kf(0.5, 1), kf(1, 2))

    def test_bent_middle_point_is_kept(self) -> None:
        assert not optimize_similar_points_slope(kf(0, 0), kf(0.5, 1.5), kf(1, 2))

    def test_needs_three_points(self) -> None:
        assert not optimize_similar_points_slope(kf(0, 0), kf(0.5, 1))

    def test_different_easing_is_kept(self) -> None:
        assert not optimize_similar_points_slope(
            kf(0, 0), kf(0.5, 1), kf(1, 2, easing="easeOutCubic")
        )

    def test_points_close_in_time_are_skipped(self) -> None:
        comparison = compare_points_slope(kf(0, 0), kf(0.01, 1), kf(1, 2), 0.025, 0.03, 0.5)

        assert comparison.skip
        assert not comparison.similar

    def test_keyframe_pause_is_kept(self) -> None:
        """Identical values over a long gap mark a deliberate hold."""
        comparison = compare_points_slope(kf(0, 0), kf(0.5, 1), kf(1.5, 1), 0.025, 0.03, 0.5)

        assert comparison.skip
        assert not comparison.similar

    def test_multi_channel_collinear(self) -> None:
        assert optimize_similar_points_slope(kf(0, 0, 10), kf(1, 2, 8), kf(2, 4, 6))


def test_zero_length_segments_have_zero_slope():
    """Equal time or equal value gives a slope of 0 instead of dividing by zero."""
    assert slopes_between(kf(0, 1, 2), kf(1, 1, 4)) == [0.0, 0.5]
    assert slopes_between(kf(1, 1), kf(1, 3)) == [0.0]


def test_y_intercepts():
    assert y_intercepts(kf(2, 1), [0.5]) == [1.5]
