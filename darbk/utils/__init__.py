"""
Utility functions for Darbk.

Geographic helpers shared by the routing services.
"""

from .geo import MapRegion, haversine_distance_m, closest_index, map_region

__all__ = ["MapRegion", "haversine_distance_m", "closest_index", "map_region"]
