import logging
from typing import Optional

from context import AppContext
from schemas import Trip

logger = logging.getLogger(__name__)

DEFAULT_GENDER_RESTRICTION = "any"
DEFAULT_ESTIMATED_FARE = 0
DEFAULT_MAX_COMPANIONS = 3


def create_trip(ctx: AppContext, fields: dict) -> dict:
    """Store a trip. Empty optional fields fall back to their defaults."""
    trip = Trip(
        ownerEmail=fields["ownerEmail"],
        fromLocation=fields["fromLocation"],
        toLocation=fields["toLocation"],
        travelDate=fields["travelDate"],
        travelTime=fields["travelTime"],
        genderRestriction=fields.get("genderRestriction") or DEFAULT_GENDER_RESTRICTION,
        estimatedFare=fields.get("estimatedFare") or DEFAULT_ESTIMATED_FARE,
        maxCompanions=fields.get("maxCompanions") or DEFAULT_MAX_COMPANIONS,
    )
    doc = ctx.trips.insert(trip)
    logger.info("Trip %s created by %s (%s -> %s)", doc["_id"], trip.ownerEmail, trip.fromLocation, trip.toLocation)
    return doc


def search_trips(
    ctx: AppContext,
    from_location: Optional[str] = None,
    to_location: Optional[str] = None,
    gender: Optional[str] = None,
) -> list:
    """
    Find trips matching the given filters. Missing filters match everything.

    A gender other than "any" keeps trips open to everyone plus trips
    restricted to that gender. Results are unsorted and unbounded.
    """
    query: dict = {}
    if from_location:
        query["fromLocation"] = from_location
    if to_location:
        query["toLocation"] = to_location
    if gender and gender != "any":
        query["genderRestriction"] = {"$in": ["any", gender]}

    return ctx.trips.find(query)
