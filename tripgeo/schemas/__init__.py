"""
schemas package — value objects for itineraries and clustering results.
"""
from tripgeo.schemas.itinerary import (
    Accommodation,
    Activity,
    DayPlan,
    Itinerary,
    Location,
    Meal,
)
from tripgeo.schemas.clustering import Cluster, ClusteringQualityReport, VisitItem

__all__ = [
    "Accommodation",
    "Activity",
    "DayPlan",
    "Itinerary",
    "Location",
    "Meal",
    "Cluster",
    "ClusteringQualityReport",
    "VisitItem",
]
