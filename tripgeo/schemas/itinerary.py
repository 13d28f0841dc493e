"""
schemas/itinerary.py
--------------------
Itinerary value objects exchanged with the itinerary generator and the
map/PDF renderers.

All models are JSON round-trippable (model_dump / model_validate).  Fields a
collaborator adds that are not declared here are kept as-is (extra="allow"),
so a reordered copy never loses data.

Coordinates are plain floats: NaN or out-of-range values are accepted here
and rejected only by modules.validation.is_valid_location.
"""

from __future__ import annotations
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _ItineraryModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Location(_ItineraryModel):
    """A named point of interest. Frame (WGS84 / GCJ-02) is implied by context."""
    name: str = ""
    address: str = ""
    lat: float = 0.0
    lng: float = 0.0


class Activity(_ItineraryModel):
    time: str = ""                          # "HH:MM"
    name: str = ""
    type: str = "attraction"                # attraction | shopping | entertainment | relaxation
    location: Optional[Location] = None
    duration: Union[str, int] = ""
    description: str = ""
    ticket_price: Optional[float] = None
    tips: Optional[str] = None
    rating: Optional[float] = None


class Meal(_ItineraryModel):
    time: str = ""                          # "HH:MM"
    restaurant: str = ""
    cuisine: str = ""
    location: Optional[Location] = None
    avg_price: float = 0.0
    recommended_dishes: list[str] = Field(default_factory=list)


class Accommodation(_ItineraryModel):
    name: str = ""
    type: str = "hotel"                     # hotel | hostel | apartment | resort
    location: Optional[Location] = None
    check_in: str = ""
    check_out: str = ""
    price_per_night: float = 0.0
    total_price: float = 0.0
    rating: Optional[float] = None


class DayPlan(_ItineraryModel):
    """
    One day of an itinerary.

    The optimizer only ever rewrites ``activities`` and ``meals``; every other
    field is carried over untouched.
    """
    day: int = 0
    date: str = ""
    theme: str = ""
    activities: list[Activity] = Field(default_factory=list)
    meals: list[Meal] = Field(default_factory=list)
    accommodation: Optional[Accommodation] = None


class Itinerary(_ItineraryModel):
    """Top-level trip plan, owned by the itinerary generator."""
    days: list[DayPlan] = Field(default_factory=list)
    accommodation: list[Accommodation] = Field(default_factory=list)
    estimated_cost: dict[str, Any] = Field(default_factory=dict)
    summary: str = ""
    notes: str = ""
