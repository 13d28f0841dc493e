"""
modules/planning package — day clustering, itinerary optimization and coordinate correction.
"""
from tripgeo.modules.planning.geo_clustering import (
    build_visit_items,
    calculate_cluster_center,
    calculate_cluster_radius,
    cluster_day_activities,
    flatten_clusters,
)
from tripgeo.modules.planning.itinerary_optimizer import (
    analyze_clustering_quality,
    optimize_day_plan,
    optimize_itinerary_by_clustering,
)
from tripgeo.modules.planning.coordinate_fixer import (
    correct_itinerary_coordinates,
    correct_location,
)

__all__ = [
    "build_visit_items",
    "calculate_cluster_center",
    "calculate_cluster_radius",
    "cluster_day_activities",
    "flatten_clusters",
    "analyze_clustering_quality",
    "optimize_day_plan",
    "optimize_itinerary_by_clustering",
    "correct_itinerary_coordinates",
    "correct_location",
]
