"""Route optimization endpoints."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse

from ...schemas.routing import RouteOptimizationRequest, RouteOptimizationResponse
from ...services.export import export_route_to_geojson
from ...services.outputs.route_formatter import route_plan_to_csv
from ...services.routing.errors import InvalidRouteInput
from ...services.routing.service import optimize_route, plan_from_request

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to optimize route"

T = TypeVar("T")


def _run(operation: Callable[[], T]) -> T:
    """Map validation failures to 400 and anything unexpected to a generic 500."""
    try:
        return operation()
    except InvalidRouteInput as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error optimizing route: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_FAILURE_MESSAGE,
        ) from exc


@router.post("/optimize", response_model=RouteOptimizationResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RouteOptimizationRequest) -> RouteOptimizationResponse:
    return _run(lambda: optimize_route(payload))


@router.post("/optimize/csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def optimize_csv(payload: RouteOptimizationRequest) -> PlainTextResponse:
    """Optimize and return the directions as CSV rows."""
    content = _run(lambda: route_plan_to_csv(plan_from_request(payload)))
    return PlainTextResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route_directions.csv"'},
    )


@router.post("/optimize/geojson", status_code=status.HTTP_200_OK)
def optimize_geojson(payload: RouteOptimizationRequest) -> JSONResponse:
    """Optimize and return the route and stops as a GeoJSON FeatureCollection."""
    collection = _run(lambda: export_route_to_geojson(plan_from_request(payload)))
    return JSONResponse(collection, media_type="application/geo+json")
