"""Application configuration and settings management."""

from typing import Annotated, Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRIP_ROUTER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Trip Route Optimizer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root log level applied by create_app().")
    max_locations: int = Field(
        default=200,
        ge=2,
        description="Upper bound on stops per request; the ordering heuristic is quadratic.",
    )
    default_travel_mode: str = Field(default="driving", description="Mode used when a request names none.")
    strict_travel_mode: bool = Field(
        default=False,
        description="Reject unknown travel modes instead of falling back to driving.",
    )
    walking_speed_kmh: float = Field(default=5.0, gt=0.0)
    driving_speed_kmh: float = Field(default=50.0, gt=0.0)
    public_transport_speed_kmh: float = Field(default=30.0, gt=0.0)
    cycling_speed_kmh: float = Field(default=15.0, gt=0.0)
    fuel_cost_per_km: float = Field(default=0.15, ge=0.0)
    toll_cost_per_km: float = Field(default=0.05, ge=0.0)
    parking_cost_per_stop: float = Field(default=5.0, ge=0.0)
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("default_travel_mode", mode="before")
    @classmethod
    def _normalise_mode(cls, value: Any) -> str:
        return str(value or "driving").strip().lower()


settings = Settings()
