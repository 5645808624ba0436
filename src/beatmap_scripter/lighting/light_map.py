"""Piecewise-linear light ID mappings.

A mapping table is a list of ``(breakpoint, rate)`` pairs sorted by breakpoint.
Before the first breakpoint there is an implicit segment of rate 1 starting at 0.
``solve`` turns raw IDs into a contiguous 1, 2, 3... sequence and ``apply`` goes
the other way.
"""

from typing import Sequence

MapTable = Sequence[Sequence[float]]


def solve(table: MapTable, x: float) -> float:
    """
    Map a raw light ID to its position in the contiguous sequence.

    Args:
        table: ``(breakpoint, rate)`` pairs, sorted ascending
        x: Raw light ID

    Returns:
        The contiguous position, ``x`` itself for an empty table
    """
    if len(table) < 1:
        return x

    covered = 0.0
    previous = None
    for index, current in enumerate(table):
        covered_before = covered
        if previous is None:
            covered += current[0]
        else:
            covered += previous[1] * (current[0] - previous[0])

        if covered > x:
            if previous is None:
                return x
            return previous[0] + (x - covered_before) / previous[1]
        if index == len(table) - 1:
            return current[0] + (x - covered) / current[1]

        previous = current

    return x


def apply(table: MapTable, x: float, offset: float = 0) -> float:
    """
    Map a contiguous position back through the table, then add ``offset``.

    Args:
        table: ``(breakpoint, rate)`` pairs, sorted ascending
        x: Position in the contiguous sequence
        offset: Constant added to the result

    Returns:
        The remapped light ID
    """
    if len(table) < 1:
        return x + offset

    output = 0.0
    previous = None
    for index, current in enumerate(table):
        if current[0] <= x:
            if previous is None:
                output += current[0]
            else:
                output += previous[1] * (current[0] - previous[0])
        else:
            if previous is None:
                return x + offset
            return output + previous[1] * (x - previous[0]) + offset

        if index == len(table) - 1:
            return output + current[1] * (x - current[0]) + offset

        previous = current

    return x + offset


def _as_light_id(value: float) -> float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def solve_light_map(table: MapTable, ids: Sequence[float]) -> list[float]:
    return [_as_light_id(solve(table, light_id)) for light_id in ids]


def apply_light_map(table: MapTable, ids: Sequence[float], offset: float = 0) -> list[float]:
    return [_as_light_id(apply(table, light_id, offset)) for light_id in ids]
