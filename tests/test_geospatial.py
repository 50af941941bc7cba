import math

import pytest

from trip_router.models.domain import Location
from trip_router.services.geospatial import EARTH_RADIUS_KM, distance_matrix_km, haversine_km


def test_one_degree_of_longitude_at_equator():
    expected = EARTH_RADIUS_KM * math.radians(1)

    assert haversine_km(0, 0, 0, 1) == pytest.approx(expected)
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19, abs=0.01)


def test_same_point_is_zero():
    assert haversine_km(48.8566, 2.3522, 48.8566, 2.3522) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        ((0.0, 0.0), (0.0, 1.0)),
        ((48.8566, 2.3522), (52.52, 13.405)),
        ((-33.8688, 151.2093), (40.7128, -74.006)),
        ((89.9, 0.0), (-89.9, 179.9)),
    ],
)
def test_haversine_is_symmetric(a, b):
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a), rel=1e-12)


def test_distance_matrix_is_symmetric_with_zero_diagonal():
    stops = [
        Location(name="Paris", lat=48.8566, lng=2.3522),
        Location(name="Berlin", lat=52.52, lng=13.405),
        Location(name="Madrid", lat=40.4168, lng=-3.7038),
    ]

    matrix = distance_matrix_km(stops)

    assert len(matrix) == 3
    for i in range(3):
        assert matrix[i][i] == 0.0
        for j in range(3):
            assert matrix[i][j] == matrix[j][i]
    assert matrix[0][1] == pytest.approx(haversine_km(48.8566, 2.3522, 52.52, 13.405))


def test_near_antipodal_points_stay_within_half_circumference():
    distance = haversine_km(67.5157117205062, 179.26978719100487, -67.5157117195062, -0.7302128089951339)

    assert math.isfinite(distance)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-6)
    assert distance <= math.pi * EARTH_RADIUS_KM


def test_exact_antipodes():
    assert haversine_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)
