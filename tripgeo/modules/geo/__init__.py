"""
modules/geo package — coordinate reference frame conversion.
"""
from tripgeo.modules.geo.coordinate_converter import (
    LngLat,
    approximate_offset_m,
    batch_wgs84_to_gcj02,
    gcj02_to_wgs84,
    is_possibly_wgs84,
    out_of_china,
    wgs84_to_gcj02,
)

__all__ = [
    "LngLat",
    "approximate_offset_m",
    "batch_wgs84_to_gcj02",
    "gcj02_to_wgs84",
    "is_possibly_wgs84",
    "out_of_china",
    "wgs84_to_gcj02",
]
