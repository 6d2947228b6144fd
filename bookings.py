import logging
from typing import List, Optional

from context import AppContext
from errors import TripNotFound
from schemas import Booking

logger = logging.getLogger(__name__)


def confirm_booking(ctx: AppContext, trip_id: str, participant_emails: Optional[List[str]] = None) -> dict:
    """
    Book a trip for the given participants.

    Both fare fields are copied from the trip's estimated fare as is; the
    per-person fare is not split across participants. Every call creates a
    new booking and seats are not checked against maxCompanions.
    """
    trip = ctx.trips.find_by_id(trip_id)
    if not trip:
        raise TripNotFound()

    fare = trip.get("estimatedFare") or 0
    booking = Booking(
        tripId=str(trip_id),
        participantEmails=participant_emails or [],
        totalFare=fare,
        farePerPerson=fare,
        status="confirmed",
    )
    doc = ctx.bookings.insert(booking)
    logger.info("Booking %s confirmed for trip %s (%d participants)", doc["_id"], trip_id, len(booking.participantEmails))
    return doc
