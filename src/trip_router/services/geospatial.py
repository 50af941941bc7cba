"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from ..models.domain import Location

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Near-antipodal pairs can round a just past 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_matrix_km(locations: Sequence[Location]) -> list[list[float]]:
    """Build a symmetric great-circle distance matrix for the given stops.

    Each pair is computed once and mirrored, so ``matrix[i][j] == matrix[j][i]``
    holds exactly. The matrix lives only as long as the request that built it.
    """

    n = len(locations)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        origin = locations[i]
        for j in range(i + 1, n):
            target = locations[j]
            distance = haversine_km(origin.lat, origin.lng, target.lat, target.lng)
            matrix[i][j] = distance
            matrix[j][i] = distance
    return matrix
