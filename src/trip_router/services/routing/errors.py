"""Routing error types."""

from __future__ import annotations


class InvalidRouteInput(ValueError):
    """Raised when a route request cannot be optimized as given.

    The HTTP layer maps it to a 400 response; other exceptions become a 500.
    """
