import pytest

from trip_router.config import Settings


def test_defaults_match_documented_rates():
    config = Settings(_env_file=None)

    assert config.driving_speed_kmh == 50.0
    assert config.walking_speed_kmh == 5.0
    assert config.public_transport_speed_kmh == 30.0
    assert config.cycling_speed_kmh == 15.0
    assert config.fuel_cost_per_km == 0.15
    assert config.toll_cost_per_km == 0.05
    assert config.parking_cost_per_stop == 5.0
    assert config.strict_travel_mode is False


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TRIP_ROUTER_STRICT_TRAVEL_MODE", "true")
    monkeypatch.setenv("TRIP_ROUTER_DEFAULT_TRAVEL_MODE", "Cycling")
    monkeypatch.setenv("TRIP_ROUTER_FRONTEND_ALLOWED_ORIGINS", "https://a.example, https://b.example")

    config = Settings(_env_file=None)

    assert config.strict_travel_mode is True
    assert config.default_travel_mode == "cycling"
    assert config.frontend_allowed_origins == ("https://a.example", "https://b.example")


def test_allowed_origins_accept_json_array():
    config = Settings(_env_file=None, frontend_allowed_origins='["https://a.example"]')

    assert config.frontend_allowed_origins == ("https://a.example",)
