"""Animation curves and keyframe reduction."""

from .keyframe import Keyframe, is_keyframe_array, keyframes_from_raw, keyframes_to_raw
from .optimizer import (
    DuplicatesSettings,
    OptimizeSettings,
    SimilarPointsSettings,
    SimilarPointsSlopeSettings,
    optimize_points,
)
from .similarity import (
    SlopeComparison,
    compare_points_slope,
    optimize_duplicates,
    optimize_similar_points,
    optimize_similar_points_slope,
)
from .track import count_keyframes, optimize_animation, optimize_keyframe_array

__all__ = [
    "Keyframe",
    "is_keyframe_array",
    "keyframes_from_raw",
    "keyframes_to_raw",
    "DuplicatesSettings",
    "OptimizeSettings",
    "SimilarPointsSettings",
    "SimilarPointsSlopeSettings",
    "optimize_points",
    "SlopeComparison",
    "compare_points_slope",
    "optimize_duplicates",
    "optimize_similar_points",
    "optimize_similar_points_slope",
    "count_keyframes",
    "optimize_animation",
    "optimize_keyframe_array",
]
