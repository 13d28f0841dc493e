"""
modules/validation/location_validator.py
------------------------------------------
Coordinate-validity guards for Locations attached to activities, meals and
accommodation.

A Location is clusterable / correctable only when:
  ✓ the location object is present
  ✓ lat and lng are real numbers (bool is rejected)
  ✓ both are finite (no NaN / ±inf)
  ✓ latitude in [-90, 90]
  ✓ longitude in [-180, 180]

Unlike the converter, these checks are strict: they are what decides whether
an item takes part in clustering at all.

Usage:
    from tripgeo.modules.validation import is_valid_location, validate_location

    if not is_valid_location(activity.location):
        ...

    result = validate_location(meal.location)
    if not result:
        print(result.errors)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Callable, Iterable, Mapping, TypeVar

from tripgeo.schemas.itinerary import Location

T = TypeVar("T")


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of a single validation run.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Human-readable list of failure reasons.
        record: The input as a dict (for logging purposes).
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    record: dict = field(default_factory=dict, repr=False)

    def __bool__(self) -> bool:
        return self.valid


# ── Location validation ────────────────────────────────────────────────────────

def _as_record(location: Location | Mapping[str, Any] | None) -> dict[str, Any] | None:
    if location is None:
        return None
    if isinstance(location, Location):
        return location.model_dump()
    if isinstance(location, Mapping):
        return dict(location)
    return None


def validate_location(location: Location | Mapping[str, Any] | None) -> ValidationResult:
    """Validate a Location model or a plain {"lat": ..., "lng": ...} mapping."""
    record = _as_record(location)
    if record is None:
        return ValidationResult(
            valid=False,
            errors=[f"location must be a Location or mapping (got {type(location).__name__})"],
        )

    errors: list[str] = []
    lat = record.get("lat")
    lng = record.get("lng")

    for key, value in (("lat", lat), ("lng", lng)):
        if isinstance(value, bool) or not isinstance(value, Real):
            errors.append(f"{key} must be a number (got {value!r})")
        elif not math.isfinite(value):
            errors.append(f"{key}={value} is not finite")

    if errors:
        return ValidationResult(valid=False, errors=errors, record=record)

    if not (-90.0 <= lat <= 90.0):
        errors.append(f"lat={lat} is outside valid range [-90, 90]")
    if not (-180.0 <= lng <= 180.0):
        errors.append(f"lng={lng} is outside valid range [-180, 180]")

    return ValidationResult(valid=not errors, errors=errors, record=record)


def is_valid_location(location: Location | Mapping[str, Any] | None) -> bool:
    """Shorthand for ``validate_location(location).valid``."""
    return validate_location(location).valid


# ── Batch helper ───────────────────────────────────────────────────────────────

def filter_valid(
    records: Iterable[T],
    validator: Callable[[T], ValidationResult],
) -> list[T]:
    """Return only the records for which *validator* passes."""
    return [r for r in records if validator(r)]
