"""
modules/planning/coordinate_fixer.py
--------------------------------------
Offline coordinate correction for generated itineraries.

Language-model output tends to carry WGS84 coordinates while Chinese map
providers expect GCJ-02.  Every location (activities, meals, per-day and
trip-level accommodation) is converted WGS84 → GCJ-02 and rewritten only if
the conversion moves it more than min_offset_m.  Points outside China convert
to themselves and are therefore left alone.

Locations that are missing, have a zero lat or lng (placeholder), or fail
validation are kept unchanged.  The input itinerary is never mutated.
"""

from __future__ import annotations
import logging
from typing import Optional

from tripgeo import config
from tripgeo.schemas.itinerary import Accommodation, DayPlan, Itinerary, Location
from tripgeo.modules.geo.coordinate_converter import approximate_offset_m, wgs84_to_gcj02
from tripgeo.modules.validation import is_valid_location

logger = logging.getLogger(__name__)


def correct_location(
    location: Optional[Location],
    min_offset_m: float | None = None,
) -> Optional[Location]:
    """Return a GCJ-02 copy of *location*, or *location* itself when no change applies."""
    if min_offset_m is None:
        min_offset_m = config.COORD_MIN_OFFSET_M
    if location is None or not location.lat or not location.lng:
        return location
    if not is_valid_location(location):
        return location

    converted = wgs84_to_gcj02(location.lng, location.lat)
    offset = approximate_offset_m(location.lng, location.lat, converted.lng, converted.lat)
    if offset <= min_offset_m:
        return location

    logger.debug(
        "coordinate corrected [%s]: (%.6f, %.6f) -> (%.6f, %.6f), offset %.2fm",
        location.name, location.lat, location.lng, converted.lat, converted.lng, offset,
    )
    return location.model_copy(update={"lat": converted.lat, "lng": converted.lng})


def _correct_accommodation(
    hotel: Optional[Accommodation],
    min_offset_m: float,
) -> Optional[Accommodation]:
    if hotel is None:
        return None
    fixed = correct_location(hotel.location, min_offset_m)
    if fixed is hotel.location:
        return hotel
    return hotel.model_copy(update={"location": fixed})


def _correct_day(day: DayPlan, min_offset_m: float) -> DayPlan:
    activities = [
        a.model_copy(update={"location": correct_location(a.location, min_offset_m)})
        for a in day.activities
    ]
    meals = [
        m.model_copy(update={"location": correct_location(m.location, min_offset_m)})
        for m in day.meals
    ]
    return day.model_copy(update={
        "activities": activities,
        "meals": meals,
        "accommodation": _correct_accommodation(day.accommodation, min_offset_m),
    })


def _count_changed(before: Itinerary, after: Itinerary) -> int:
    changed = 0
    for old_day, new_day in zip(before.days, after.days):
        for old, new in zip(old_day.activities + old_day.meals, new_day.activities + new_day.meals):
            changed += old.location is not new.location
        if old_day.accommodation is not None:
            changed += old_day.accommodation is not new_day.accommodation
    for old, new in zip(before.accommodation, after.accommodation):
        changed += old is not new
    return changed


def correct_itinerary_coordinates(
    itinerary: Itinerary,
    min_offset_m: float | None = None,
) -> Itinerary:
    """
    Convert every WGS84 location in *itinerary* to GCJ-02.

    Args:
        itinerary:    Generated itinerary (assumed WGS84).
        min_offset_m: Locations moving less than this are left untouched
                      (default config.COORD_MIN_OFFSET_M).

    Returns:
        A corrected copy of *itinerary*.
    """
    if min_offset_m is None:
        min_offset_m = config.COORD_MIN_OFFSET_M

    corrected = itinerary.model_copy(update={
        "days": [_correct_day(day, min_offset_m) for day in itinerary.days],
        "accommodation": [
            _correct_accommodation(h, min_offset_m) for h in itinerary.accommodation
        ],
    })
    logger.info(
        "coordinate correction finished: %d locations converted",
        _count_changed(itinerary, corrected),
    )
    return corrected
