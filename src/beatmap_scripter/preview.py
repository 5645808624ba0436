"""Renderer for previewing keyframe reduction using Pillow."""

from typing import Sequence

from PIL import Image, ImageDraw

from .animation import Keyframe
from .constants import (
    PREVIEW_BACKGROUND_COLOR,
    PREVIEW_CHANNEL_COLORS,
    PREVIEW_GRID_COLOR,
    PREVIEW_HEIGHT,
    PREVIEW_ORIGINAL_COLOR,
    PREVIEW_PADDING,
    PREVIEW_POINT_RADIUS,
    PREVIEW_WIDTH,
)


class CurvePreview:
    """Plots every value channel of a curve against time."""

    def __init__(
        self,
        original: Sequence[Keyframe],
        optimized: Sequence[Keyframe],
        width: int = PREVIEW_WIDTH,
        height: int = PREVIEW_HEIGHT,
    ):
        """
        Initialize the preview.

        Args:
            original: Keyframes before optimizing
            optimized: Keyframes after optimizing
            width: Image width in pixels
            height: Image height in pixels
        """
        self.original = list(original)
        self.optimized = list(optimized)
        self.width = width
        self.height = height

        points = self.original + self.optimized
        times = [point.time for point in points] or [0.0]
        values = [value for point in points for value in point.values] or [0.0]
        self.min_time, self.max_time = min(times), max(times)
        self.min_value, self.max_value = min(values), max(values)

    def render(self) -> Image.Image:
        """
        Render the preview.

        Returns:
            RGB image with the original curve in grey and the optimized curve in color
        """
        img = Image.new("RGB", (self.width, self.height), PREVIEW_BACKGROUND_COLOR)
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw)
        self._draw_curve(draw, self.original, lambda _channel: PREVIEW_ORIGINAL_COLOR, markers=False)
        self._draw_curve(draw, self.optimized, _channel_color, markers=True)

        return img

    def to_pixel(self, time: float, value: float) -> tuple[float, float]:
        plot_width = self.width - 2 * PREVIEW_PADDING
        plot_height = self.height - 2 * PREVIEW_PADDING
        time_span = self.max_time - self.min_time or 1.0
        value_span = self.max_value - self.min_value or 1.0

        x = PREVIEW_PADDING + (time - self.min_time) / time_span * plot_width
        # Larger values are drawn higher up
        y = PREVIEW_PADDING + (1 - (value - self.min_value) / value_span) * plot_height
        return x, y

    def _draw_grid(self, draw: ImageDraw.ImageDraw) -> None:
        left, top = PREVIEW_PADDING, PREVIEW_PADDING
        right, bottom = self.width - PREVIEW_PADDING, self.height - PREVIEW_PADDING
        draw.rectangle([left, top, right, bottom], outline=PREVIEW_GRID_COLOR)

        if self.min_value < 0 < self.max_value:
            _, zero_y = self.to_pixel(self.min_time, 0)
            draw.line([(left, zero_y), (right, zero_y)], fill=PREVIEW_GRID_COLOR)

    def _draw_curve(self, draw, keyframes: list[Keyframe], color_for, markers: bool) -> None:
        if not keyframes:
            return

        for channel in range(len(keyframes[0].values)):
            color = color_for(channel)
            pixels = [
                self.to_pixel(keyframe.time, keyframe.values[channel])
                for keyframe in keyframes
                if channel < len(keyframe.values)
            ]
            if len(pixels) > 1:
                draw.line(pixels, fill=color, width=2)

            if markers:
                r = PREVIEW_POINT_RADIUS
                for x, y in pixels:
                    draw.ellipse([x - r, y - r, x + r, y + r], fill=color)


def _channel_color(channel: int) -> tuple[int, int, int]:
    return PREVIEW_CHANNEL_COLORS[channel % len(PREVIEW_CHANNEL_COLORS)]


def render_curve_preview(
    original: Sequence[Keyframe],
    optimized: Sequence[Keyframe],
    width: int = PREVIEW_WIDTH,
    height: int = PREVIEW_HEIGHT,
) -> Image.Image:
    """Render a before/after preview of one curve."""
    return CurvePreview(original, optimized, width, height).render()
