"""Domain models for trip stops."""

from dataclasses import dataclass


@dataclass(slots=True)
class Location:
    """A named stop with coordinates and a visiting priority weight."""

    name: str
    lat: float
    lng: float
    priority: float = 1.0
