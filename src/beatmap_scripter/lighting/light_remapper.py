"""Condition/process pipelines for editing lighting events."""

from typing import Callable, Iterable

from rich.console import Console

from .light_event import LightEvent, LightID, promote_ids, transform_ids
from .light_map import MapTable, apply_light_map, solve_light_map

Condition = Callable[[LightEvent], bool]
Process = Callable[[LightEvent], None]


class BaseLightRemapper:
    """
    Filter-then-mutate pipeline over lighting events.

    Every condition must pass for an event to be processed. Processes run in
    the order they were added.
    """

    def __init__(self, condition: Condition | None = None, console: Console | None = None):
        """
        Initialize the remapper.

        Args:
            condition: Optional first condition
            console: Console used for logging processed events
        """
        self.conditions: list[Condition] = []
        self.processes: list[Process] = []
        self.console = console or Console()
        if condition is not None:
            self.conditions.append(condition)

    def add_condition(self, condition: Condition):
        """A condition that events must pass."""
        self.conditions.append(condition)
        return self

    def add_process(self, process: Process):
        """A function to edit the event."""
        self.processes.append(process)
        return self

    def set_type(self, value: int):
        """Set the type of the event."""

        def process(event: LightEvent) -> None:
            event.type = value

        return self.add_process(process)

    def multiply_color(self, rgb: float, alpha: float = 1):
        """
        Multiply the color of the event.

        Args:
            rgb: Factor for the red, green and blue channels
            alpha: Factor for the alpha channel, only applied when the event has one
        """

        def process(event: LightEvent) -> None:
            color = event.color
            if not color:
                return
            for channel in range(min(3, len(color))):
                color[channel] *= rgb
            if len(color) > 3:
                color[3] *= alpha

        return self.add_process(process)

    def test(self, ids: LightID) -> LightEvent:
        """
        Dry-run the processes on one event carrying ``ids`` and log the result.

        Conditions are cleared first.
        """
        self.conditions = []
        event = LightEvent.create(light_id=ids)
        self.process_events([event], log=True)
        return event

    def run(self, events: Iterable[LightEvent], log: bool = False) -> None:
        """
        Run the pipeline over events, in place.

        Args:
            events: Events to filter and edit
            log: Print the JSON of every processed event
        """
        self.process_events(events, log)

    def process_events(self, events: Iterable[LightEvent], log: bool = False) -> None:
        conditions = tuple(self.conditions)
        processes = tuple(self.processes)
        for event in events:
            if not all(condition(event) for condition in conditions):
                continue

            for process in processes:
                process(event)
            if log:
                self.console.print_json(data=event.json)


def is_in_id(light_id: LightID | None, start: float, end: float) -> bool:
    """Check if any light ID lies within ``[start, end]``."""
    if light_id is None:
        return False
    return any(start <= i <= end for i in promote_ids(light_id))


class LightRemapper(BaseLightRemapper):
    """Remapper with light ID conditions and processes."""

    def type(self, value: int):
        """Events pass if they have this type."""
        return self.add_condition(lambda event: event.type == value)

    def range(self, bounds: float | tuple[float, float] | list[float]):
        """
        Events pass if any light ID is in this range.

        Args:
            bounds: Min and max, or one number to be both
        """
        if isinstance(bounds, (int, float)):
            low, high = bounds, bounds
        else:
            low, high = bounds
        return self.add_condition(lambda event: is_in_id(event.light_id, low, high))

    def ids(self, light_ids: Iterable[int] | None = None):
        """Events pass if they have light IDs, or contain one of ``light_ids`` when given."""
        wanted = set(light_ids) if light_ids is not None else None

        def condition(event: LightEvent) -> bool:
            if event.light_id is None:
                return False
            if wanted is None:
                return True
            return any(i in wanted for i in promote_ids(event.light_id))

        return self.add_condition(condition)

    def set_ids(self, light_id: LightID) -> BaseLightRemapper:
        """
        Set the light IDs of the event.

        Returns:
            A remapper sharing this pipeline, without the light ID methods
        """

        def process(event: LightEvent) -> None:
            event.light_id = list(light_id) if isinstance(light_id, list) else light_id

        self.add_process(process)
        overrider = BaseLightRemapper(console=self.console)
        overrider.conditions = self.conditions
        overrider.processes = self.processes
        return overrider

    def append_ids(self, light_id: LightID, initialize: bool = False):
        """
        Add light IDs to the event.

        Args:
            light_id: IDs to add
            initialize: If False, events without light IDs are skipped
        """

        def process(event: LightEvent) -> None:
            current = event.light_id
            if current is None:
                if not initialize:
                    return
                current = []
            event.light_id = transform_ids(current, lambda ids: ids + promote_ids(light_id))

        return self.add_process(process)

    def init_ids(self, light_id: LightID, spread: bool = False):
        """
        Set light IDs on events that have none.

        Args:
            light_id: IDs to set
            spread: Treat a two-element ``[low, high]`` as every ID in between
        """
        if spread and isinstance(light_id, (list, tuple)) and len(light_id) == 2:
            output: LightID = list(range(int(light_id[0]), int(light_id[1]) + 1))
        else:
            output = light_id

        def process(event: LightEvent) -> None:
            if event.light_id is None:
                event.light_id = list(output) if isinstance(output, list) else output

        return self.add_process(process)

    def normalize_linear(self, step: float, start: float = 1):
        """
        Normalize a sequence of light IDs to 1, 2, 3, 4, 5...

        Args:
            step: Difference between light IDs
            start: Start of the sequence
        """
        return self.normalize_with_changes([(start, step)])

    def normalize_with_changes(self, table: MapTable):
        """
        Normalize light IDs to 1, 2, 3... where the differences change along the way.

        If the sequence goes 1, 3, 5, 6, 7, the difference changes from 2 to 1 at
        the third number, so the table is ``[(1, 2), (3, 1)]``.

        Args:
            table: ``(start, step)`` pairs
        """

        def process(event: LightEvent) -> None:
            if event.light_id is not None:
                event.light_id = transform_ids(event.light_id, lambda ids: solve_light_map(table, ids))

        return self.add_process(process)

    def add_to_end(self, offset: float, step: float | None = None):
        """
        Adjust the final sequence of light IDs.

        Args:
            offset: Added to every light ID
            step: New difference between light IDs, applied before the offset
        """

        def remap(light_id: int) -> int:
            if step:
                light_id = (light_id - 1) * step + 1
            return light_id + offset

        def process(event: LightEvent) -> None:
            if event.light_id is not None:
                event.light_id = transform_ids(event.light_id, lambda ids: [remap(i) for i in ids])

        return self.add_process(process)

    def remap_end(self, table: MapTable, offset: float = 0):
        """
        Remap light IDs that form a 1, 2, 3, 4, 5... sequence.

        Args:
            table: Same layout as ``normalize_with_changes``, applied in reverse
            offset: Added to every light ID
        """

        def process(event: LightEvent) -> None:
            if event.light_id is not None:
                event.light_id = transform_ids(
                    event.light_id, lambda ids: apply_light_map(table, ids, offset)
                )

        return self.add_process(process)
