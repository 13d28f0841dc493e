"""
modules/geo/coordinate_converter.py
-------------------------------------
WGS84 (GPS) ⇄ GCJ-02 (mainland-China map frame) conversion.

GCJ-02 = WGS84 + a smooth offset that is a fixed polynomial/trigonometric
function of (lng − 105, lat − 35), scaled by the Krasovsky ellipsoid
(A = 6378245.0, EE = 0.00669342162296594323).  The table of constants is the
publicly reverse-engineered one and must not be altered.

There is no closed-form inverse: the offset is defined at the WGS84 point,
but only the GCJ-02 point is known.  gcj02_to_wgs84 evaluates the offset at
the GCJ-02 point instead and subtracts it; since the offset varies slowly the
round trip stays within ~1e-5 degrees.

Every function here is total: NaN / ±inf fall outside the China bounding box
and are returned unchanged, so nothing ever raises.

Coordinates are always (lng, lat) in this module.
"""

from __future__ import annotations
import math
from typing import Iterable, NamedTuple

from tripgeo import config

# Krasovsky 1940 ellipsoid
A: float = 6378245.0                    # semi-major axis [m]
EE: float = 0.00669342162296594323      # squared eccentricity

# China bounding box (inclusive)
_LNG_MIN, _LNG_MAX = 72.004, 137.8347
_LAT_MIN, _LAT_MAX = 0.8293, 55.8271

_METRES_PER_DEGREE: float = 111000.0


class LngLat(NamedTuple):
    lng: float
    lat: float


# ── Geofence ──────────────────────────────────────────────────────────────────

def out_of_china(lng: float, lat: float) -> bool:
    """True when (lng, lat) lies outside the China bounding box (NaN counts as outside)."""
    return not (_LNG_MIN <= lng <= _LNG_MAX and _LAT_MIN <= lat <= _LAT_MAX)


# ── Offset polynomials ────────────────────────────────────────────────────────

def _transform_lat(x: float, y: float) -> float:
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * math.pi) + 320.0 * math.sin(y * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def _transform_lng(x: float, y: float) -> float:
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0 / 3.0
    return ret


def _offset(lng: float, lat: float) -> tuple[float, float]:
    """(d_lng, d_lat) in degrees, evaluated at (lng, lat)."""
    d_lat = _transform_lat(lng - 105.0, lat - 35.0)
    d_lng = _transform_lng(lng - 105.0, lat - 35.0)
    rad_lat = lat / 180.0 * math.pi
    magic = math.sin(rad_lat)
    magic = 1 - EE * magic * magic
    sqrt_magic = math.sqrt(magic)
    d_lat = (d_lat * 180.0) / ((A * (1 - EE)) / (magic * sqrt_magic) * math.pi)
    d_lng = (d_lng * 180.0) / (A / sqrt_magic * math.cos(rad_lat) * math.pi)
    return d_lng, d_lat


# ── Public API ────────────────────────────────────────────────────────────────

def wgs84_to_gcj02(lng: float, lat: float) -> LngLat:
    """WGS84 → GCJ-02. Identity outside the China bounding box."""
    if out_of_china(lng, lat):
        return LngLat(lng, lat)
    d_lng, d_lat = _offset(lng, lat)
    return LngLat(lng + d_lng, lat + d_lat)


def gcj02_to_wgs84(lng: float, lat: float) -> LngLat:
    """
    GCJ-02 → WGS84 (single-iteration approximation).

    The forward offset is computed at the GCJ-02 point itself and subtracted.
    Identity outside the China bounding box.
    """
    if out_of_china(lng, lat):
        return LngLat(lng, lat)
    d_lng, d_lat = _offset(lng, lat)
    return LngLat(lng - d_lng, lat - d_lat)


def batch_wgs84_to_gcj02(coords: Iterable[tuple[float, float]]) -> list[LngLat]:
    """Element-wise wgs84_to_gcj02 over (lng, lat) pairs, order preserved."""
    return [wgs84_to_gcj02(lng, lat) for lng, lat in coords]


def approximate_offset_m(lng1: float, lat1: float, lng2: float, lat2: float) -> float:
    """
    Planar (equirectangular) distance in metres between two nearby points.

    Only meaningful for small separations such as a frame offset; use
    haversine_distance for anything else.
    """
    d_x = (lng2 - lng1) * _METRES_PER_DEGREE * math.cos(lat1 * math.pi / 180.0)
    d_y = (lat2 - lat1) * _METRES_PER_DEGREE
    return math.sqrt(d_x * d_x + d_y * d_y)


def is_possibly_wgs84(
    lng: float,
    lat: float,
    threshold_m: float | None = None,
) -> bool:
    """
    Heuristic hint that (lng, lat) may be WGS84 rather than GCJ-02.

    The point is treated as GCJ-02, taken to WGS84 and back; a drift above
    *threshold_m* (default config.COORD_WGS84_HINT_THRESHOLD_M) flags it.
    Always False outside China.

    This is NOT authoritative and can misclassify near the bounding-box edge.
    Never use it as ground truth.
    """
    if out_of_china(lng, lat):
        return False
    if threshold_m is None:
        threshold_m = config.COORD_WGS84_HINT_THRESHOLD_M
    wgs = gcj02_to_wgs84(lng, lat)
    gcj = wgs84_to_gcj02(wgs.lng, wgs.lat)
    return approximate_offset_m(lng, lat, gcj.lng, gcj.lat) > threshold_m
