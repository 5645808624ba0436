"""Tests for keyframe wrapping."""

import pytest

from beatmap_scripter.animation import Keyframe, is_keyframe_array, keyframes_from_raw, keyframes_to_raw


def test_from_raw_splits_values_time_and_tags():
    """The last number is the time, trailing strings are easing/spline/flags."""
    keyframe = Keyframe.from_raw([1, 2, 3, 0.5, "easeInOutSine", "splineCatmullRom", "lerpHSV"])

    assert keyframe.values == (1, 2, 3)
    assert keyframe.time == 0.5
    assert keyframe.easing == "easeInOutSine"
    assert keyframe.spline == "splineCatmullRom"
    assert keyframe.flags == ("lerpHSV",)


def test_to_raw_restores_layout():
    """to_raw should write the same layout that from_raw reads."""
    raw = [0, 1, 0.25, "easeOutQuad"]

    assert Keyframe.from_raw(raw).to_raw() == raw


def test_single_channel_keyframe():
    """A point with one value and a time is valid."""
    keyframe = Keyframe.from_raw([0.3, 1])

    assert keyframe.values == (0.3,)
    assert keyframe.time == 1
    assert keyframe.easing is None


def test_from_raw_rejects_points_without_value():
    """A single number cannot hold both a value and a time."""
    with pytest.raises(ValueError):
        Keyframe.from_raw([1])


def test_from_raw_rejects_unknown_elements():
    with pytest.raises(ValueError):
        Keyframe.from_raw([0, None, 1])


def test_is_keyframe_array():
    """Only lists of point lists are keyframe arrays."""
    assert is_keyframe_array([[0, 0, 0, 0], [1, 1, 1, 1]])
    assert not is_keyframe_array([0, 0, 0])
    assert not is_keyframe_array("myPointDefinition")
    assert not is_keyframe_array([])


def test_array_conversion():
    raw = [[0, 0], [1, 0.5, "easeInSine"], [0, 1]]

    keyframes = keyframes_from_raw(raw)

    assert [keyframe.time for keyframe in keyframes] == [0, 0.5, 1]
    assert keyframes_to_raw(keyframes) == raw
