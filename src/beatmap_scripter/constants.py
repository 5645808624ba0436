"""Global constants for the application."""

# Optimizer settings
DEFAULT_PASSES = 1  # Full sweeps over a curve per optimize call

# Similar points (near-duplicate) thresholds
SIMILAR_DIFFERENCE_THRESHOLD = 1.0  # Max per-channel value difference
SIMILAR_TIME_DIFFERENCE_THRESHOLD = 0.03  # Max time difference between points

# Similar points by slope thresholds
SLOPE_DIFFERENCE_THRESHOLD = 0.03  # Max per-channel slope difference
SLOPE_TIME_DIFFERENCE_THRESHOLD = 0.025  # Points closer than this in time are skipped
SLOPE_Y_INTERCEPT_DIFFERENCE_THRESHOLD = 0.5  # Max per-channel intercept difference

# Document settings
DEFAULT_DECIMALS = 7  # Decimals kept on every number when saving

# Animation properties on custom events that are not keyframe data
CUSTOM_EVENT_RESERVED_KEYS = ("_track", "_duration", "_easing")
ANIMATED_CUSTOM_EVENT_TYPES = ("AnimateTrack", "AssignPathAnimation")

# Preview settings
PREVIEW_WIDTH = 640  # Width of the curve preview in pixels
PREVIEW_HEIGHT = 360  # Height of the curve preview in pixels
PREVIEW_PADDING = 16  # Padding around the plot area in pixels
PREVIEW_POINT_RADIUS = 3  # Radius of kept keyframe markers

# Colors
PREVIEW_BACKGROUND_COLOR = (13, 17, 23)
PREVIEW_GRID_COLOR = (48, 54, 61)
PREVIEW_ORIGINAL_COLOR = (110, 118, 129)  # Grey for the curve before optimizing
PREVIEW_CHANNEL_COLORS = (
    (255, 99, 71),  # Red
    (57, 211, 83),  # Green
    (88, 166, 255),  # Blue
    (240, 246, 252),  # Alpha / fourth channel
)
