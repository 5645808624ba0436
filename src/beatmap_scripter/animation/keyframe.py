"""Keyframe records for animation curves."""

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

RawPoint = list[Any]


@dataclass(frozen=True, slots=True)
class Keyframe:
    """One timed sample of an animated multi-channel value."""

    time: float
    values: tuple[float, ...]
    easing: str | None = None
    spline: str | None = None
    flags: tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, point: Sequence[Any]) -> "Keyframe":
        """
        Wrap a raw point array.

        Raw points are laid out as ``[v1, ..., vn, time, *tags]``. Tags starting
        with ``ease`` are the easing, tags starting with ``spline`` the spline,
        and any other tag is kept as a flag.

        Args:
            point: Raw point array from a difficulty file

        Returns:
            The wrapped keyframe

        Raises:
            ValueError: If the point has no value or no time
        """
        numbers: list[float] = []
        easing = None
        spline = None
        flags: list[str] = []
        for element in point:
            if isinstance(element, str):
                if element.startswith("ease"):
                    easing = element
                elif element.startswith("spline"):
                    spline = element
                else:
                    flags.append(element)
            elif isinstance(element, bool) or not isinstance(element, (int, float)):
                raise ValueError(f"Unsupported keyframe element {element!r} in {list(point)}")
            else:
                numbers.append(element)

        if len(numbers) < 2:
            raise ValueError(f"Keyframe {list(point)} needs at least one value and a time")

        return cls(
            time=numbers[-1],
            values=tuple(numbers[:-1]),
            easing=easing,
            spline=spline,
            flags=tuple(flags),
        )

    def to_raw(self) -> RawPoint:
        """Convert back to the raw ``[v1, ..., vn, time, *tags]`` layout."""
        raw: RawPoint = [*self.values, self.time]
        if self.easing is not None:
            raw.append(self.easing)
        if self.spline is not None:
            raw.append(self.spline)
        raw.extend(self.flags)
        return raw


def is_keyframe_array(value: Any) -> bool:
    """Check if an animation property holds keyframes rather than a static value or a name."""
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(point, list) for point in value)
    )


def keyframes_from_raw(points: Iterable[Sequence[Any]]) -> list[Keyframe]:
    return [Keyframe.from_raw(point) for point in points]


def keyframes_to_raw(keyframes: Iterable[Keyframe]) -> list[RawPoint]:
    return [keyframe.to_raw() for keyframe in keyframes]
