import pytest

from trip_router.config import settings
from trip_router.models.domain import Location
from trip_router.services.geospatial import distance_matrix_km
from trip_router.services.routing.errors import InvalidRouteInput
from trip_router.services.routing.metrics import (
    build_directions,
    compute_savings,
    estimate_costs,
    estimate_travel_minutes,
    resolve_travel_mode,
    round_half_up,
    round_minutes,
    route_distance_km,
)


@pytest.mark.parametrize(
    "mode, expected",
    [("walking", 120.0), ("driving", 12.0), ("public_transport", 20.0), ("cycling", 40.0)],
)
def test_estimate_travel_minutes_per_mode(mode, expected):
    assert estimate_travel_minutes(10.0, mode) == pytest.approx(expected)


def test_unknown_mode_uses_driving_speed():
    assert estimate_travel_minutes(50.0, "hovercraft") == pytest.approx(60.0)


def test_resolve_travel_mode_normalises_and_falls_back():
    assert resolve_travel_mode("Walking") == "walking"
    assert resolve_travel_mode(" public_transport ") == "public_transport"
    assert resolve_travel_mode(None) == "driving"
    assert resolve_travel_mode("teleport") == "driving"


def test_resolve_travel_mode_strict_rejects_unknown(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "strict_travel_mode", True)

    assert resolve_travel_mode("cycling") == "cycling"
    with pytest.raises(InvalidRouteInput):
        resolve_travel_mode("teleport")


def test_rounding_is_half_up():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-0.125) == -0.12
    assert round_minutes(2.5) == 3
    assert round_minutes(-2.5) == -2
    assert round_minutes(133.43) == 133


def test_cost_estimation_linear_model():
    costs = estimate_costs(100.0, 4)

    assert costs.fuel == 15.0
    assert costs.tolls == 5.0
    assert costs.parking == 20.0
    assert costs.total == 40.0


def test_cost_estimation_uses_configured_rates(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "parking_cost_per_stop", 2.5)

    assert estimate_costs(0.0, 3).parking == 7.5


def test_savings_can_be_negative():
    savings = compute_savings(original_distance_km=100.0, optimized_distance_km=150.0, mode="driving")

    assert savings.distance_saved_km == -50.0
    assert savings.time_saved_min == -60


def test_directions_report_each_leg():
    stops = [
        Location(name="A", lat=0, lng=0),
        Location(name="B", lat=0, lng=1),
        Location(name="C", lat=0, lng=2),
    ]
    distances = distance_matrix_km(stops)

    directions = build_directions(stops, [0, 1, 2], distances, "driving")

    assert [d.step for d in directions] == [1, 2, 3]
    assert directions[0].instruction == "Start at A"
    assert directions[0].distance_km == 0
    assert directions[0].duration_min == 0
    assert directions[1].instruction == "Travel to B"
    assert directions[1].location == "B"
    assert directions[1].distance_km == 111.19
    assert directions[1].duration_min == 133
    assert route_distance_km([0, 1, 2], distances) == pytest.approx(2 * distances[0][1])
