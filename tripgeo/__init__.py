"""
tripgeo — geospatial refinement of generated trip itineraries.

  WGS84 ⇄ GCJ-02 conversion       modules.geo
  haversine distances              modules.tool_usage
  greedy day clustering/optimizer  modules.planning
"""
from tripgeo.schemas import (
    Accommodation,
    Activity,
    Cluster,
    ClusteringQualityReport,
    DayPlan,
    Itinerary,
    Location,
    Meal,
    VisitItem,
)
from tripgeo.modules.geo import (
    LngLat,
    batch_wgs84_to_gcj02,
    gcj02_to_wgs84,
    is_possibly_wgs84,
    out_of_china,
    wgs84_to_gcj02,
)
from tripgeo.modules.tool_usage import DistanceTool, haversine_distance
from tripgeo.modules.planning import (
    analyze_clustering_quality,
    cluster_day_activities,
    correct_itinerary_coordinates,
    optimize_day_plan,
    optimize_itinerary_by_clustering,
)

__version__ = "0.1.0"

__all__ = [
    "Accommodation",
    "Activity",
    "Cluster",
    "ClusteringQualityReport",
    "DayPlan",
    "Itinerary",
    "Location",
    "Meal",
    "VisitItem",
    "LngLat",
    "batch_wgs84_to_gcj02",
    "gcj02_to_wgs84",
    "is_possibly_wgs84",
    "out_of_china",
    "wgs84_to_gcj02",
    "DistanceTool",
    "haversine_distance",
    "analyze_clustering_quality",
    "cluster_day_activities",
    "correct_itinerary_coordinates",
    "optimize_day_plan",
    "optimize_itinerary_by_clustering",
]
