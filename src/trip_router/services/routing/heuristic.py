"""Priority-weighted nearest-neighbor ordering.

Greedy tour construction: from the current stop, the next stop is the unvisited
candidate with the smallest ``distance / priority``. Higher priorities make a
stop look closer, pulling it earlier into the route. The result is a heuristic
tour, not an optimal one, but it is deterministic and quadratic in the number
of stops.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import Location

logger = logging.getLogger(__name__)


def resolve_start_index(locations: Sequence[Location], start_location: str | None) -> int:
    """Return the index of the first stop whose name contains the hint.

    Matching is a case-insensitive substring test. No hint, an empty hint or
    no match all resolve to index 0.
    """
    if not start_location:
        return 0
    needle = start_location.lower()
    for index, location in enumerate(locations):
        if needle in location.name.lower():
            return index
    logger.debug("Start hint %r matched no location, starting at index 0", start_location)
    return 0


def nearest_neighbor_order(
    locations: Sequence[Location],
    distances: Sequence[Sequence[float]],
    start_index: int = 0,
) -> list[int]:
    """Order stop indices with the priority-weighted nearest-neighbor rule.

    Args:
        locations: Stops in input order.
        distances: Square distance matrix aligned with ``locations``.
        start_index: Index of the stop the route begins at.

    Returns:
        A permutation of ``range(len(locations))`` beginning with ``start_index``.
        Routes of two stops or fewer keep their input order.
    """
    count = len(locations)
    if count <= 2:
        return list(range(count))
    if not 0 <= start_index < count:
        raise IndexError(f"start_index {start_index} out of range for {count} locations")

    visited = {start_index}
    order = [start_index]
    current = start_index

    while len(visited) < count:
        nearest_index = -1
        min_adjusted = math.inf

        for candidate in range(count):
            if candidate in visited:
                continue
            adjusted = distances[current][candidate] / locations[candidate].priority
            # Strict comparison keeps the first candidate on exact ties; the first
            # unvisited candidate is taken when every adjusted distance overflows
            if nearest_index == -1 or adjusted < min_adjusted:
                min_adjusted = adjusted
                nearest_index = candidate

        logger.debug(
            "Leg %s -> %s (adjusted distance %.4f)",
            locations[current].name,
            locations[nearest_index].name,
            min_adjusted,
        )
        order.append(nearest_index)
        visited.add(nearest_index)
        current = nearest_index

    return order
