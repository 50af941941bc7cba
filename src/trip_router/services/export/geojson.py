"""GeoJSON export utilities."""

from __future__ import annotations

from typing import Any, Dict, List

from shapely.geometry import LineString, Point, mapping

from ..routing.models import RoutePlan

ROUTE_LINE_COLOR = "#13aae0"
START_MARKER_COLOR = "#38e000"
STOP_MARKER_COLOR = "#e0003e"


def route_path_feature(plan: RoutePlan) -> Dict[str, Any]:
    """LineString feature tracing the optimized visiting order.

    GeoJSON uses lon,lat order (x,y).
    """
    coordinates = [(stop.lng, stop.lat) for stop in plan.optimized_route]
    if len(coordinates) < 2:
        raise ValueError("LineString must have at least 2 coordinates")

    return {
        "type": "Feature",
        "geometry": mapping(LineString(coordinates)),
        "properties": {
            "kind": "route",
            "totalDistance": plan.metrics.total_distance_km,
            "estimatedTime": plan.metrics.estimated_time_min,
            "travelMode": plan.metrics.travel_mode,
            "optimizedFor": plan.metrics.optimized_for,
            "stroke": ROUTE_LINE_COLOR,
        },
    }


def stop_features(plan: RoutePlan) -> List[Dict[str, Any]]:
    features: List[Dict[str, Any]] = []
    for direction, stop in zip(plan.directions, plan.optimized_route):
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(stop.lng, stop.lat)),
                "properties": {
                    "kind": "stop",
                    "step": direction.step,
                    "name": stop.name,
                    "priority": stop.priority,
                    "instruction": direction.instruction,
                    "marker-color": START_MARKER_COLOR if direction.step == 1 else STOP_MARKER_COLOR,
                },
            }
        )
    return features


def export_route_to_geojson(plan: RoutePlan) -> Dict[str, Any]:
    """FeatureCollection with the route line followed by one point per stop."""
    return {
        "type": "FeatureCollection",
        "features": [route_path_feature(plan), *stop_features(plan)],
    }
