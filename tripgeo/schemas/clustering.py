"""
schemas/clustering.py
---------------------
Dataclasses used while clustering a single day. None of these outlive a
single optimizer call and none are persisted.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Literal, Union

from tripgeo.schemas.itinerary import Activity, Location, Meal


@dataclass
class VisitItem:
    """An Activity or Meal wrapped for clustering."""
    kind: Literal["activity", "meal"]
    item: Union[Activity, Meal]
    location: Location
    time: str
    original_index: int          # position in its own source list (activities or meals)

    @property
    def sort_key(self) -> str:
        """Fixed-width HH:MM with the colon dropped; lexicographic order is time order."""
        return self.time.replace(":", "")


@dataclass
class Cluster:
    """
    Visit items judged geographically coherent.

    center: unweighted mean of member coordinates
    radius: max member-to-center distance [metres]
    """
    id: int
    items: list[VisitItem] = field(default_factory=list)
    center: Location = field(default_factory=Location)
    radius: float = 0.0


@dataclass
class ClusteringQualityReport:
    """Diagnostic summary produced by analyze_clustering_quality."""
    total_days: int = 0
    days_with_clusters: int = 0
    average_clusters_per_day: float = 0.0
    average_cluster_radius: float = 0.0      # metres
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)
