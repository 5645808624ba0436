"""Tests for the curve preview renderer."""

from beatmap_scripter.animation import Keyframe
from beatmap_scripter.constants import (
    PREVIEW_BACKGROUND_COLOR,
    PREVIEW_CHANNEL_COLORS,
    PREVIEW_ORIGINAL_COLOR,
    PREVIEW_PADDING,
)
from beatmap_scripter.preview import CurvePreview, render_curve_preview


def kf(time: float, *values: float) -> Keyframe:
    return Keyframe(time=time, values=tuple(values))


def image_colors(img) -> set:
    return {color for _count, color in img.getcolors(maxcolors=img.width * img.height)}


def test_render_has_requested_size():
    img = render_curve_preview([kf(0, 0), kf(1, 1)], [kf(0, 0), kf(1, 1)], width=200, height=100)

    assert img.size == (200, 100)
    assert img.mode == "RGB"


def test_render_draws_both_curves():
    """Dropped points leave the grey original visible next to the colored result."""
    original = [kf(0, 0, 1), kf(0.5, 1, 0), kf(1, 0, 1)]
    optimized = [original[0], original[2]]

    colors = image_colors(render_curve_preview(original, optimized))

    assert PREVIEW_BACKGROUND_COLOR in colors
    assert PREVIEW_ORIGINAL_COLOR in colors
    assert PREVIEW_CHANNEL_COLORS[0] in colors
    assert PREVIEW_CHANNEL_COLORS[1] in colors


def test_render_empty_curve():
    colors = image_colors(render_curve_preview([], [], width=50, height=50))

    assert PREVIEW_BACKGROUND_COLOR in colors


def test_to_pixel_maps_extremes_to_plot_corners():
    preview = CurvePreview([kf(0, -1), kf(2, 3)], [], width=100, height=60)

    assert preview.to_pixel(0, 3) == (PREVIEW_PADDING, PREVIEW_PADDING)
    assert preview.to_pixel(2, -1) == (100 - PREVIEW_PADDING, 60 - PREVIEW_PADDING)
