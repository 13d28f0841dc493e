"""
modules/planning/geo_clustering.py
------------------------------------
Greedy single-linkage clustering of one day's activities and meals.

Algorithm (one pass, deterministic, NOT globally optimal):
  1. Wrap activities/meals into VisitItems; drop items without a valid Location.
  2. Stable-sort by "HH:MM" (fixed width, so string order is time order).
  3. Each still-unassigned item, in time order, seeds a new cluster.  One scan
     over the remaining unassigned items adds every item whose distance to ANY
     current member is <= max_distance.  The cluster grows during the scan, so
     membership depends on scan order.
  4. centroid = unweighted mean of member coordinates;
     radius   = max member-to-centroid haversine distance [m].
  5. Clusters are emitted in seed order (chronological first occurrence).

flatten_clusters() turns clusters back into activity / meal lists:
cluster-major, time-minor.  A later item absorbed into an early cluster moves
ahead of its original time slot.  Changing this ordering changes the shape of
every optimized day.
"""

from __future__ import annotations
import logging
from typing import Sequence

from tripgeo import config
from tripgeo.schemas.clustering import Cluster, VisitItem
from tripgeo.schemas.itinerary import Activity, Location, Meal
from tripgeo.modules.tool_usage.distance_tool import DistanceTool, haversine_distance
from tripgeo.modules.validation import filter_valid, validate_location

logger = logging.getLogger(__name__)

CLUSTER_CENTER_NAME: str = "Cluster Center"


# ── Visit items ───────────────────────────────────────────────────────────────

def build_visit_items(
    activities: Sequence[Activity],
    meals: Sequence[Meal],
) -> list[VisitItem]:
    """Wrap activities and meals, drop invalid locations, sort by time."""
    candidates: list[VisitItem] = []
    for index, activity in enumerate(activities):
        if activity.location is not None:
            candidates.append(
                VisitItem("activity", activity, activity.location, activity.time, index)
            )
    for index, meal in enumerate(meals):
        if meal.location is not None:
            candidates.append(VisitItem("meal", meal, meal.location, meal.time, index))

    items = filter_valid(candidates, lambda v: validate_location(v.location))
    items.sort(key=lambda v: v.sort_key)
    return items


# ── Cluster geometry ──────────────────────────────────────────────────────────

def calculate_cluster_center(items: Sequence[VisitItem]) -> Location:
    """Unweighted mean of member coordinates."""
    if not items:
        return Location(name="", address="", lat=0.0, lng=0.0)
    n = len(items)
    return Location(
        name=CLUSTER_CENTER_NAME,
        address="",
        lat=sum(v.location.lat for v in items) / n,
        lng=sum(v.location.lng for v in items) / n,
    )


def calculate_cluster_radius(items: Sequence[VisitItem], center: Location) -> float:
    """Largest member-to-center distance in metres (0.0 for an empty cluster)."""
    radius = 0.0
    for v in items:
        radius = max(
            radius,
            haversine_distance(center.lat, center.lng, v.location.lat, v.location.lng),
        )
    return radius


# ── Clustering ────────────────────────────────────────────────────────────────

def cluster_day_activities(
    activities: Sequence[Activity],
    meals: Sequence[Meal],
    max_distance: float | None = None,
    distance_tool: DistanceTool | None = None,
) -> list[Cluster]:
    """
    Cluster one day's activities and meals.

    Args:
        activities:    The day's activities, in plan order.
        meals:         The day's meals, in plan order.
        max_distance:  Single-linkage threshold in metres
                       (default config.CLUSTER_MAX_DISTANCE_M).
        distance_tool: Override for tests.

    Returns:
        Clusters in seed order.  Items with an invalid or missing Location are
        not part of any cluster.
    """
    if max_distance is None:
        max_distance = config.CLUSTER_MAX_DISTANCE_M
    items = build_visit_items(activities, meals)
    if not items:
        return []

    tool = distance_tool or DistanceTool()
    dist = tool.distance_matrix([(v.location.lat, v.location.lng) for v in items])

    n = len(items)
    assigned = [False] * n
    clusters: list[Cluster] = []

    for seed in range(n):
        if assigned[seed]:
            continue
        members = [seed]
        assigned[seed] = True

        for other in range(n):
            if assigned[other]:
                continue
            nearest = min(dist[m][other] for m in members)
            if nearest <= max_distance:
                members.append(other)
                assigned[other] = True

        cluster_items = [items[i] for i in members]
        center = calculate_cluster_center(cluster_items)
        clusters.append(
            Cluster(
                id=len(clusters),
                items=cluster_items,
                center=center,
                radius=calculate_cluster_radius(cluster_items, center),
            )
        )

    logger.debug(
        "cluster_day_activities: %d items -> %d clusters (max_distance=%.0fm)",
        n, len(clusters), max_distance,
    )
    return clusters


def flatten_clusters(clusters: Sequence[Cluster]) -> tuple[list[Activity], list[Meal]]:
    """Split clusters back into (activities, meals): cluster-major, time-minor."""
    activities: list[Activity] = []
    meals: list[Meal] = []
    for cluster in clusters:
        for v in sorted(cluster.items, key=lambda item: item.sort_key):
            if v.kind == "activity":
                activities.append(v.item)
            else:
                meals.append(v.item)
    return activities, meals
