"""Route optimization orchestration."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Sequence

from ...config import settings
from ...models.domain import Location
from ...schemas.routing import LocationInput, RouteOptimizationRequest, RouteOptimizationResponse
from ..geospatial import distance_matrix_km
from ..outputs.route_formatter import route_plan_to_json
from .errors import InvalidRouteInput
from .heuristic import nearest_neighbor_order, resolve_start_index
from .metrics import (
    build_directions,
    compute_savings,
    estimate_costs,
    estimate_travel_minutes,
    resolve_travel_mode,
    round_half_up,
    round_minutes,
    route_distance_km,
)
from .models import RouteMetrics, RoutePlan

logger = logging.getLogger(__name__)

MIN_LOCATIONS = 2
INSUFFICIENT_LOCATIONS_MESSAGE = "At least 2 locations are required"


def _coerce_coordinate(value: Any, *, label: str, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidRouteInput(f"Malformed coordinate: '{label}' is missing {field}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRouteInput(f"Malformed coordinate: '{label}' has non-numeric {field} {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidRouteInput(f"Malformed coordinate: '{label}' has non-finite {field}")
    return number


def _coerce_priority(value: Any, *, label: str) -> float:
    # Missing and zero priorities count as the default weight
    if value is None or value == 0:
        return 1.0
    priority = float(value)
    if not math.isfinite(priority) or priority < 0:
        raise InvalidRouteInput(f"Priority for '{label}' must be a positive number")
    return priority


def _validate_location(location: Location) -> None:
    for field in ("lat", "lng"):
        value = getattr(location, field)
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
            raise InvalidRouteInput(f"Malformed coordinate: '{location.name}' has invalid {field}")
    if not math.isfinite(location.priority) or location.priority <= 0:
        raise InvalidRouteInput(f"Priority for '{location.name}' must be a positive number")


def build_locations(raw_locations: Sequence[LocationInput | Mapping[str, Any]]) -> list[Location]:
    """Convert client-submitted stops into validated domain locations.

    Unnamed stops are labelled ``Location {n}`` by position. ``latitude`` and
    ``longitude`` are accepted when ``lat``/``lng`` are absent, and numeric
    strings are parsed.
    """
    locations: list[Location] = []
    for index, raw in enumerate(raw_locations):
        item = raw if isinstance(raw, LocationInput) else LocationInput.model_validate(raw)
        label = item.name or f"Location {index + 1}"
        lat_value = item.lat if item.lat is not None else item.latitude
        lng_value = item.lng if item.lng is not None else item.longitude
        location = Location(
            name=label,
            lat=_coerce_coordinate(lat_value, label=label, field="latitude"),
            lng=_coerce_coordinate(lng_value, label=label, field="longitude"),
            priority=_coerce_priority(item.priority, label=label),
        )
        _validate_location(location)
        if not -90.0 <= location.lat <= 90.0:
            raise InvalidRouteInput(f"Latitude for '{label}' must be between -90 and 90")
        if not -180.0 <= location.lng <= 180.0:
            raise InvalidRouteInput(f"Longitude for '{label}' must be between -180 and 180")
        locations.append(location)
    return locations


def plan_route(
    locations: Sequence[Location],
    start_location: str | None = None,
    travel_mode: str | None = None,
    optimize_for: str = "distance",
) -> RoutePlan:
    """Order the stops and derive distance, time, cost and savings metrics.

    Args:
        locations: At least two stops, in the order the caller supplied them.
        start_location: Optional case-insensitive name fragment of the first stop.
        travel_mode: walking, driving, public_transport or cycling.
        optimize_for: Reported back in the metrics; ordering is always by distance.

    Returns:
        A RoutePlan whose optimized route is a permutation of ``locations``.

    Raises:
        InvalidRouteInput: fewer than two stops, non-finite coordinates,
            non-positive priorities, or an unknown travel mode under strict mode.
    """
    if len(locations) < MIN_LOCATIONS:
        raise InvalidRouteInput(INSUFFICIENT_LOCATIONS_MESSAGE)
    for location in locations:
        _validate_location(location)

    mode = resolve_travel_mode(travel_mode)
    original_route = list(locations)
    distances = distance_matrix_km(original_route)

    start_index = resolve_start_index(original_route, start_location) if len(original_route) > MIN_LOCATIONS else 0
    order = nearest_neighbor_order(original_route, distances, start_index)
    optimized_route = [original_route[index] for index in order]

    optimized_km = route_distance_km(order, distances)
    original_km = route_distance_km(range(len(original_route)), distances)

    metrics = RouteMetrics(
        total_distance_km=round_half_up(optimized_km),
        estimated_time_min=round_minutes(estimate_travel_minutes(optimized_km, mode)),
        travel_mode=mode,
        optimized_for=optimize_for,
    )
    plan = RoutePlan(
        optimized_route=optimized_route,
        original_route=original_route,
        metrics=metrics,
        directions=build_directions(original_route, order, distances, mode),
        cost_estimation=estimate_costs(optimized_km, len(optimized_route)),
        savings=compute_savings(original_km, optimized_km, mode),
    )
    logger.info(
        "Optimized %d stops (%s): %.2f km, %d min, saved %.2f km",
        len(optimized_route),
        mode,
        metrics.total_distance_km,
        metrics.estimated_time_min,
        plan.savings.distance_saved_km,
    )
    return plan


def plan_from_request(payload: RouteOptimizationRequest) -> RoutePlan:
    if not payload.locations or len(payload.locations) < MIN_LOCATIONS:
        raise InvalidRouteInput(INSUFFICIENT_LOCATIONS_MESSAGE)
    if len(payload.locations) > settings.max_locations:
        raise InvalidRouteInput(
            f"At most {settings.max_locations} locations can be optimized in one request"
        )
    locations = build_locations(payload.locations)
    return plan_route(
        locations,
        start_location=payload.start_location,
        travel_mode=payload.travel_mode,
        optimize_for=payload.optimize_for,
    )


def optimize_route(payload: RouteOptimizationRequest) -> RouteOptimizationResponse:
    plan = plan_from_request(payload)
    return RouteOptimizationResponse.model_validate(route_plan_to_json(plan))
