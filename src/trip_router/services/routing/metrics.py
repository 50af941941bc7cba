"""Travel time, cost and direction metrics for an ordered route."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...config import settings
from ...models.domain import Location
from .errors import InvalidRouteInput
from .models import CostEstimation, Direction, Savings

logger = logging.getLogger(__name__)

TRAVEL_MODES = ("walking", "driving", "public_transport", "cycling")
FALLBACK_TRAVEL_MODE = "driving"


def speeds_kmh() -> dict[str, float]:
    """Average speed per travel mode in km/h."""
    return {
        "walking": settings.walking_speed_kmh,
        "driving": settings.driving_speed_kmh,
        "public_transport": settings.public_transport_speed_kmh,
        "cycling": settings.cycling_speed_kmh,
    }


def resolve_travel_mode(mode: str | None, *, strict: bool | None = None) -> str:
    """Normalise a requested travel mode.

    Unknown modes resolve to driving unless strict mode is on, in which case
    they are rejected.
    """
    strict = settings.strict_travel_mode if strict is None else strict
    requested = (mode or settings.default_travel_mode).strip().lower()
    if requested in TRAVEL_MODES:
        return requested
    if strict:
        raise InvalidRouteInput(
            f"Unsupported travel mode '{mode}'. Expected one of: {', '.join(TRAVEL_MODES)}"
        )
    logger.warning("Unknown travel mode '%s', falling back to %s", mode, FALLBACK_TRAVEL_MODE)
    return FALLBACK_TRAVEL_MODE


def round_half_up(value: float, digits: int = 2) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_minutes(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_travel_minutes(distance_km: float, mode: str = FALLBACK_TRAVEL_MODE) -> float:
    speeds = speeds_kmh()
    speed = speeds.get(mode, speeds[FALLBACK_TRAVEL_MODE])
    return (distance_km / speed) * 60.0


def route_distance_km(order: Sequence[int], distances: Sequence[Sequence[float]]) -> float:
    """Sum of consecutive leg distances along ``order``."""
    return sum(distances[order[i]][order[i + 1]] for i in range(len(order) - 1))


def build_directions(
    locations: Sequence[Location],
    order: Sequence[int],
    distances: Sequence[Sequence[float]],
    mode: str,
) -> list[Direction]:
    """One direction per stop; the first one marks the starting point."""
    directions: list[Direction] = []
    for step, index in enumerate(order, start=1):
        location = locations[index]
        if step == 1:
            directions.append(
                Direction(
                    step=step,
                    instruction=f"Start at {location.name}",
                    location=location.name,
                    distance_km=0.0,
                    duration_min=0,
                )
            )
            continue
        leg_km = distances[order[step - 2]][index]
        directions.append(
            Direction(
                step=step,
                instruction=f"Travel to {location.name}",
                location=location.name,
                distance_km=round_half_up(leg_km),
                duration_min=round_minutes(estimate_travel_minutes(leg_km, mode)),
            )
        )
    return directions


def estimate_costs(total_distance_km: float, stop_count: int) -> CostEstimation:
    """Flat linear cost model: per-km fuel and tolls plus per-stop parking."""
    fuel = round_half_up(total_distance_km * settings.fuel_cost_per_km)
    tolls = round_half_up(total_distance_km * settings.toll_cost_per_km)
    parking = round_half_up(stop_count * settings.parking_cost_per_stop)
    return CostEstimation(
        fuel=fuel,
        tolls=tolls,
        parking=parking,
        total=round_half_up(fuel + tolls + parking),
    )


def compute_savings(original_distance_km: float, optimized_distance_km: float, mode: str) -> Savings:
    """Savings of the optimized order over the input order.

    Values may be negative when the heuristic does worse than the input order.
    """
    original_minutes = estimate_travel_minutes(original_distance_km, mode)
    optimized_minutes = estimate_travel_minutes(optimized_distance_km, mode)
    return Savings(
        distance_saved_km=round_half_up(original_distance_km - optimized_distance_km),
        time_saved_min=round_minutes(original_minutes - optimized_minutes),
    )
