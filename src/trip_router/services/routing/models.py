"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...models.domain import Location


@dataclass(slots=True)
class Direction:
    step: int
    instruction: str
    location: str
    distance_km: float
    duration_min: int


@dataclass(slots=True)
class RouteMetrics:
    total_distance_km: float
    estimated_time_min: int
    travel_mode: str
    optimized_for: str


@dataclass(slots=True)
class CostEstimation:
    fuel: float
    tolls: float
    parking: float
    total: float


@dataclass(slots=True)
class Savings:
    distance_saved_km: float
    time_saved_min: int


@dataclass(slots=True)
class RoutePlan:
    optimized_route: List[Location]
    original_route: List[Location]
    metrics: RouteMetrics
    directions: List[Direction]
    cost_estimation: CostEstimation
    savings: Savings
