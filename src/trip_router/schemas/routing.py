"""Route optimization request/response schemas."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case fields in Python, camelCase names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationInput(BaseModel):
    """A stop as submitted by clients; coordinates may arrive as strings."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    lat: Optional[Union[float, str]] = None
    lng: Optional[Union[float, str]] = None
    latitude: Optional[Union[float, str]] = Field(default=None, description="Alternative to `lat`.")
    longitude: Optional[Union[float, str]] = Field(default=None, description="Alternative to `lng`.")
    priority: Optional[float] = Field(default=None, description="Positive weight; higher visits earlier.")


class RouteOptimizationRequest(CamelModel):
    locations: Optional[List[LocationInput]] = None
    start_location: Optional[str] = Field(
        default=None,
        description="Case-insensitive substring of the name of the stop to start from.",
    )
    travel_mode: Optional[str] = Field(
        default=None,
        description="walking, driving, public_transport or cycling. Defaults to driving.",
    )
    optimize_for: str = Field(default="distance", description="Echoed back; only distance is optimized.")


class LocationModel(CamelModel):
    name: str
    lat: float
    lng: float
    priority: float


class RouteMetricsModel(CamelModel):
    total_distance: float
    estimated_time: int
    travel_mode: str
    optimized_for: str


class DirectionModel(CamelModel):
    step: int
    instruction: str
    location: str
    distance: float
    duration: int


class CostEstimationModel(CamelModel):
    fuel: float
    tolls: float
    parking: float
    total: float


class SavingsModel(CamelModel):
    distance_saved: float
    time_saved: int


class RouteOptimizationResponse(CamelModel):
    optimized_route: List[LocationModel]
    original_route: List[LocationModel]
    metrics: RouteMetricsModel
    directions: List[DirectionModel]
    cost_estimation: CostEstimationModel
    savings: SavingsModel
