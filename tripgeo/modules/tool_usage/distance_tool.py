"""
modules/tool_usage/distance_tool.py
-------------------------------------
Great-circle distances using the Haversine formula (spherical Earth,
R = 6 371 000 m). No external HTTP calls are made.

Non-finite inputs yield NaN rather than raising.
"""

from __future__ import annotations
import math
import logging

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pure maths
# ---------------------------------------------------------------------------

_EARTH_RADIUS_M = 6371e3


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points (Haversine formula) in metres."""
    if not all(math.isfinite(v) for v in (lat1, lng1, lat2, lng2)):
        return math.nan
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lam = math.radians(lng2 - lng1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    )
    # rounding can push a just past 1.0 for antipodal points
    a = min(a, 1.0)
    return 2 * _EARTH_RADIUS_M * math.asin(math.sqrt(a))


# ---------------------------------------------------------------------------
# DistanceTool
# ---------------------------------------------------------------------------


class DistanceTool:
    """
    Computes Haversine distances between (lat, lng) points, one pair at a time
    or as a full matrix.
    """

    def calculate(self, lat1: float, lng1: float, lat2: float, lng2: float) -> float:
        """Return Haversine distance in metres."""
        return haversine_distance(lat1, lng1, lat2, lng2)

    def distance_matrix(self, points: list[tuple[float, float]]) -> list[list[float]]:
        """Return a full symmetric n x n matrix [metres] with a zero diagonal."""
        n = len(points)
        if n == 0:
            return []
        matrix = [[0.0] * n for _ in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                d = haversine_distance(
                    points[i][0], points[i][1],
                    points[j][0], points[j][1],
                )
                matrix[i][j] = d
                matrix[j][i] = d
        logger.debug("distance_matrix: %d points", n)
        return matrix
