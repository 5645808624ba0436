"""In-memory difficulty document."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .animation import OptimizeSettings, count_keyframes, optimize_animation
from .constants import (
    ANIMATED_CUSTOM_EVENT_TYPES,
    CUSTOM_EVENT_RESERVED_KEYS,
    DEFAULT_DECIMALS,
    DEFAULT_PASSES,
)
from .lighting import BaseLightRemapper, LightEvent, wrap_event


@dataclass
class OptimizeReport:
    """Keyframe counts before and after optimizing a difficulty."""
    keyframes_before: int = 0
    keyframes_after: int = 0
    animations: int = 0

    @property
    def removed(self) -> int:
        return self.keyframes_before - self.keyframes_after


class Difficulty:
    """A difficulty's JSON with wrapped lighting events."""

    def __init__(self, json_data: dict[str, Any], path: str | Path | None = None):
        """
        Initialize the difficulty.

        Args:
            json_data: Parsed difficulty JSON (v2 underscore layout)
            path: File the difficulty was loaded from, used as the default save target
        """
        self.json = json_data
        self.path = Path(path) if path is not None else None
        self.json.setdefault("_notes", [])
        self.json.setdefault("_obstacles", [])
        self.json.setdefault("_events", [])
        self.events: list[LightEvent] = [wrap_event(event) for event in self.json["_events"]]

    @classmethod
    def load(cls, path: str | Path) -> "Difficulty":
        with open(path, "r") as f:
            return cls(json.load(f), path)

    def save(self, path: str | Path | None = None) -> Path:
        """
        Write the difficulty as compact JSON, with objects sorted by time.

        Raises:
            ValueError: If no path is given and the difficulty was not loaded from a file
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Output path not set")

        self.json["_events"] = [event.json for event in self.events]
        for objects in (self.notes, self.obstacles, self.json["_events"], self.custom_events):
            objects.sort(key=lambda obj: obj.get("_time", 0))

        with open(target, "w") as f:
            json.dump(self.json, f, separators=(",", ":"))
        return target

    @property
    def notes(self) -> list[dict[str, Any]]:
        return self.json["_notes"]

    @property
    def obstacles(self) -> list[dict[str, Any]]:
        return self.json["_obstacles"]

    @property
    def custom_data(self) -> dict[str, Any]:
        return self.json.setdefault("_customData", {})

    @property
    def custom_events(self) -> list[dict[str, Any]]:
        return self.json.get("_customData", {}).get("_customEvents", [])

    @property
    def point_definitions(self) -> list[dict[str, Any]]:
        return self.json.get("_customData", {}).get("_pointDefinitions", [])

    def point_definition(self, name: str) -> list[list[Any]]:
        """Find a point definition's points by name."""
        for definition in self.point_definitions:
            if definition.get("_name") == name:
                return definition["_points"]
        raise KeyError(f"Point definition '{name}' not found")

    def _animations(self) -> list[tuple[dict[str, Any], tuple[str, ...]]]:
        animations: list[tuple[dict[str, Any], tuple[str, ...]]] = []
        for obj in (*self.notes, *self.obstacles):
            animation = obj.get("_customData", {}).get("_animation")
            if animation:
                animations.append((animation, ()))
        for event in self.custom_events:
            if event.get("_type") in ANIMATED_CUSTOM_EVENT_TYPES and event.get("_data"):
                animations.append((event["_data"], CUSTOM_EVENT_RESERVED_KEYS))
        for definition in self.point_definitions:
            animations.append(({"_points": definition.get("_points")}, ()))
        return animations

    def optimize(
        self,
        settings: OptimizeSettings | None = None,
        passes: int = DEFAULT_PASSES,
    ) -> OptimizeReport:
        """
        Optimize the animations of notes, obstacles, custom events and point definitions.

        Args:
            settings: Optimizer settings
            passes: Number of sweeps per curve

        Returns:
            Keyframe counts before and after
        """
        report = OptimizeReport()
        for animation, skip_keys in self._animations():
            report.animations += 1
            report.keyframes_before += count_keyframes(animation, skip_keys)
            optimize_animation(animation, settings, passes, skip_keys)
            report.keyframes_after += count_keyframes(animation, skip_keys)
        return report

    def reduce_decimals(self, decimals: int | None = DEFAULT_DECIMALS) -> None:
        """Round every float in the document. ``None`` or 0 keeps full precision."""
        if not decimals:
            return
        _reduce_decimals_in_object(self.json, decimals)

    def remap(self, remapper: BaseLightRemapper, log: bool = False) -> None:
        """Run a light remapper over this difficulty's events."""
        remapper.run(self.events, log)


def _reduce_decimals_in_object(json_data: dict[str, Any] | list[Any], decimals: int) -> None:
    keys = range(len(json_data)) if isinstance(json_data, list) else list(json_data.keys())
    for key in keys:
        element = json_data[key]
        if isinstance(element, float):
            json_data[key] = round(element, decimals)
        elif isinstance(element, (dict, list)):
            _reduce_decimals_in_object(element, decimals)
