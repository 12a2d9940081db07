"""
Booking endpoints.

Both routes require a bearer token.  The booking owner is always the
authenticated user; a client cannot create or read bookings on behalf
of somebody else.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from cityease_api.app.core.security import get_current_user
from cityease_api.app.schemas.booking import BookingCreate, BookingRead
from cityease_api.app.services.booking_service import BookingService

router = APIRouter()


@router.post("", response_model=BookingRead)
async def create_booking(
    booking: BookingCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> BookingRead:
    """Create a booking for the current user.

    ``service``, ``address`` and ``datetime`` are required (400 if
    missing).  The stored record is returned with status ``pending``.
    """
    return await BookingService.create_booking(current_user["id"], booking)


@router.get("", response_model=List[BookingRead])
async def list_bookings(
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> List[BookingRead]:
    """Return the current user's bookings, newest first."""
    return await BookingService.list_bookings(current_user["id"])
