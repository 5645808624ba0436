"""Lighting event wrapper and light ID helpers."""

from typing import Any, Callable, Sequence

LightID = int | list[int]


def promote_ids(light_id: LightID) -> list[int]:
    """Return light IDs as a list. A bare ID becomes a one-element list."""
    if isinstance(light_id, (list, tuple)):
        return list(light_id)
    return [light_id]


def demote_ids(ids: Sequence[int]) -> LightID:
    """Collapse to a bare ID only when exactly one ID remains."""
    if len(ids) == 1:
        return ids[0]
    return list(ids)


def transform_ids(light_id: LightID, transform: Callable[[list[int]], list[int]]) -> LightID:
    """Apply a list transform to light IDs, keeping the scalar/list convention."""
    return demote_ids(transform(promote_ids(light_id)))


class LightEvent:
    """A lighting event backed by its raw JSON dict."""

    def __init__(self, json: dict[str, Any]):
        """
        Wrap a raw event.

        Args:
            json: Event dict in the ``_time``/``_type``/``_value``/``_customData`` layout
        """
        self.json = json

    @classmethod
    def create(
        cls,
        time: float = 0,
        type: int = 0,
        value: int = 0,
        light_id: LightID | None = None,
        color: list[float] | None = None,
    ) -> "LightEvent":
        event = cls({"_time": time, "_type": type, "_value": value})
        event.light_id = light_id
        event.color = color
        return event

    @property
    def time(self) -> float:
        return self.json.get("_time", 0)

    @time.setter
    def time(self, value: float) -> None:
        self.json["_time"] = value

    @property
    def type(self) -> int:
        return self.json.get("_type", 0)

    @type.setter
    def type(self, value: int) -> None:
        self.json["_type"] = value

    @property
    def value(self) -> int:
        return self.json.get("_value", 0)

    @value.setter
    def value(self, value: int) -> None:
        self.json["_value"] = value

    @property
    def light_id(self) -> LightID | None:
        # Only a missing key means "no light ID"; 0 and [] are kept as IDs.
        return self._custom_data().get("_lightID")

    @light_id.setter
    def light_id(self, value: LightID | None) -> None:
        self._set_custom_data("_lightID", value)

    @property
    def color(self) -> list[float] | None:
        return self._custom_data().get("_color")

    @color.setter
    def color(self, value: list[float] | None) -> None:
        self._set_custom_data("_color", value)

    def _custom_data(self) -> dict[str, Any]:
        return self.json.get("_customData") or {}

    def _set_custom_data(self, key: str, value: Any) -> None:
        if value is None:
            custom_data = self.json.get("_customData")
            if custom_data is not None:
                custom_data.pop(key, None)
                if not custom_data:
                    del self.json["_customData"]
            return
        self.json.setdefault("_customData", {})[key] = value

    def __repr__(self) -> str:
        return f"LightEvent({self.json!r})"


def wrap_event(json: dict[str, Any] | LightEvent) -> LightEvent:
    """Wrap a raw event dict once, when the document is loaded."""
    if isinstance(json, LightEvent):
        return json
    return LightEvent(json)
