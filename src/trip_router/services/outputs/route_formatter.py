"""Serializers for route plans."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..routing.metrics import round_half_up
from ..routing.models import RoutePlan


def route_plan_to_json(plan: RoutePlan) -> dict:
    return {
        "optimizedRoute": [asdict(location) for location in plan.optimized_route],
        "originalRoute": [asdict(location) for location in plan.original_route],
        "metrics": {
            "totalDistance": plan.metrics.total_distance_km,
            "estimatedTime": plan.metrics.estimated_time_min,
            "travelMode": plan.metrics.travel_mode,
            "optimizedFor": plan.metrics.optimized_for,
        },
        "directions": [
            {
                "step": direction.step,
                "instruction": direction.instruction,
                "location": direction.location,
                "distance": direction.distance_km,
                "duration": direction.duration_min,
            }
            for direction in plan.directions
        ],
        "costEstimation": asdict(plan.cost_estimation),
        "savings": {
            "distanceSaved": plan.savings.distance_saved_km,
            "timeSaved": plan.savings.time_saved_min,
        },
    }


def route_plan_to_csv(plan: RoutePlan) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "step",
        "location",
        "instruction",
        "lat",
        "lng",
        "distance_km",
        "duration_min",
        "cumulative_distance_km",
        "cumulative_duration_min",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    cumulative_km = 0.0
    cumulative_min = 0
    for direction, stop in zip(plan.directions, plan.optimized_route):
        cumulative_km += direction.distance_km
        cumulative_min += direction.duration_min
        writer.writerow(
            {
                "step": direction.step,
                "location": direction.location,
                "instruction": direction.instruction,
                "lat": stop.lat,
                "lng": stop.lng,
                "distance_km": direction.distance_km,
                "duration_min": direction.duration_min,
                "cumulative_distance_km": round_half_up(cumulative_km),
                "cumulative_duration_min": cumulative_min,
            }
        )
    return buffer.getvalue()
