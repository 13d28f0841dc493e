"""
modules/planning/itinerary_optimizer.py
-----------------------------------------
Applies geo_clustering to each day of an itinerary and reports on the
resulting cluster quality.

  optimize_day_plan                 one day  → reordered copy (or the same day)
  optimize_itinerary_by_clustering  every day, independently
  analyze_clustering_quality        read-only diagnostic report

Items whose Location is missing or invalid never enter clustering, but they
are never dropped either: they keep their original index in their list and
the clustered items fill the remaining slots in cluster order.  The optimized
activities/meals are therefore always a permutation of the input lists.

Failures inside a single day are logged and masked by returning that day
unchanged; optimization is never fatal to itinerary generation.
"""

from __future__ import annotations
import logging
from typing import Sequence, TypeVar

from tripgeo import config
from tripgeo.schemas.clustering import ClusteringQualityReport
from tripgeo.schemas.itinerary import DayPlan, Itinerary
from tripgeo.modules.planning.geo_clustering import cluster_day_activities, flatten_clusters
from tripgeo.modules.validation import is_valid_location

logger = logging.getLogger(__name__)

T = TypeVar("T")

RECOMMEND_DISPERSED: str = (
    "Some attractions are spread out; allow extra travel time between stops."
)
RECOMMEND_TOO_MANY_AREAS: str = (
    "Each day covers many separate areas; consider fewer attractions per day."
)


def _merge_pass_through(original: Sequence[T], clustered: list[T]) -> list[T]:
    """
    Put *clustered* back into the slots of *original* held by clusterable items.

    Items of *original* with no valid location stay at their own index.
    """
    reordered = iter(clustered)
    merged: list[T] = []
    for entry in original:
        if is_valid_location(entry.location):
            merged.append(next(reordered))
        else:
            merged.append(entry)
    return merged


# ── Single day ────────────────────────────────────────────────────────────────

def optimize_day_plan(day: DayPlan, max_distance: float | None = None) -> DayPlan:
    """
    Reorder one day's activities and meals by geographic cluster.

    Returns *day* itself when it has at most one activity or no activity with
    a valid location, or when anything goes wrong.  Otherwise returns a copy
    in which only ``activities`` and ``meals`` differ.
    """
    if max_distance is None:
        max_distance = config.CLUSTER_MAX_DISTANCE_M

    if not day.activities or len(day.activities) <= 1:
        return day

    if not any(is_valid_location(a.location) for a in day.activities):
        logger.info("Day %s has no valid location data, skipping clustering", day.day)
        return day

    try:
        clusters = cluster_day_activities(day.activities, day.meals, max_distance)
        clustered_activities, clustered_meals = flatten_clusters(clusters)

        activities = _merge_pass_through(day.activities, clustered_activities)
        meals = _merge_pass_through(day.meals, clustered_meals)

        logger.info(
            "Day %s: optimized %d activities into %d clusters",
            day.day, len(day.activities), len(clusters),
        )
        return day.model_copy(update={"activities": activities, "meals": meals})
    except Exception:
        logger.exception("Error clustering day %s, keeping original order", day.day)
        return day


# ── Whole itinerary ───────────────────────────────────────────────────────────

def optimize_itinerary_by_clustering(
    itinerary: Itinerary,
    max_distance: float | None = None,
) -> Itinerary:
    """Optimize every day independently. An itinerary without days is returned as is."""
    if not itinerary.days:
        return itinerary

    logger.info("Starting clustering optimization for %d days", len(itinerary.days))
    days = [optimize_day_plan(day, max_distance) for day in itinerary.days]
    return itinerary.model_copy(update={"days": days})


def analyze_clustering_quality(
    itinerary: Itinerary,
    max_distance: float | None = None,
) -> ClusteringQualityReport:
    """
    Re-run clustering on every day (without touching the itinerary) and
    summarise it.

    average_clusters_per_day is taken over days that produced at least one
    cluster; average_cluster_radius over all clusters of all days.
    """
    report = ClusteringQualityReport(total_days=len(itinerary.days))

    total_clusters = 0
    total_radius = 0.0

    for day in itinerary.days:
        clusters = cluster_day_activities(day.activities, day.meals, max_distance)
        if not clusters:
            continue
        report.days_with_clusters += 1
        total_clusters += len(clusters)
        total_radius += sum(c.radius for c in clusters)

    if report.days_with_clusters > 0:
        report.average_clusters_per_day = total_clusters / report.days_with_clusters
    if total_clusters > 0:
        report.average_cluster_radius = total_radius / total_clusters

    if report.average_cluster_radius > config.QUALITY_DISPERSED_RADIUS_M:
        report.recommendations.append(RECOMMEND_DISPERSED)
    if report.average_clusters_per_day > config.QUALITY_MAX_CLUSTERS_PER_DAY:
        report.recommendations.append(RECOMMEND_TOO_MANY_AREAS)

    logger.debug("analyze_clustering_quality: %s", report)
    return report
