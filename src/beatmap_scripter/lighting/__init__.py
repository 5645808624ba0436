"""Lighting events and light ID remapping."""

from .light_event import LightEvent, LightID, demote_ids, promote_ids, transform_ids, wrap_event
from .light_map import apply, apply_light_map, solve, solve_light_map
from .light_remapper import BaseLightRemapper, LightRemapper, is_in_id

__all__ = [
    "LightEvent",
    "LightID",
    "demote_ids",
    "promote_ids",
    "transform_ids",
    "wrap_event",
    "apply",
    "apply_light_map",
    "solve",
    "solve_light_map",
    "BaseLightRemapper",
    "LightRemapper",
    "is_in_id",
]
