"""Export services."""

from .geojson import export_route_to_geojson, route_path_feature, stop_features

__all__ = [
    "export_route_to_geojson",
    "route_path_feature",
    "stop_features",
]
