"""
Business logic for bookings.

Every booking belongs to exactly one user, and all queries are scoped
by that user's id: a user can only ever see bookings they created.
Bookings start in status ``pending`` and are never modified here.
"""

import asyncio
import logging
import sqlite3
from typing import List

from cityease_api.app.core.db import get_connection
from cityease_api.app.core.errors import AuthError, InternalError, ValidationError
from cityease_api.app.schemas.booking import BookingCreate, BookingRead

logger = logging.getLogger(__name__)

BOOKING_COLUMNS = (
    "id, user_id, service, sub_service, professional, address, datetime, notes, status, created_at"
)


class BookingService:
    """Service for creating and listing a user's bookings.

    Queries run in a worker thread so a slow store never stalls the
    event loop.
    """

    @classmethod
    async def create_booking(cls, user_id: int, booking: BookingCreate) -> BookingRead:
        """Create a booking owned by ``user_id``.

        ``service``, ``address`` and ``datetime`` are required; the
        other fields default to empty strings.  Returns the row as
        stored, including the generated id, status and creation time.
        """
        if not booking.service or not booking.address or not booking.scheduled_for:
            raise ValidationError("Missing required fields")

        def _insert() -> sqlite3.Row:
            conn = get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO bookings (user_id, service, sub_service, professional, address, datetime, notes, status)
                    VALUES (?, ?, ?, ?, ?, ?, ?, 'pending')
                    """,
                    (
                        user_id,
                        booking.service,
                        booking.sub_service or "",
                        booking.professional or "",
                        booking.address,
                        booking.scheduled_for,
                        booking.notes or "",
                    ),
                )
                booking_id = cursor.lastrowid
                conn.commit()
                return cursor.execute(
                    f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE id = ?",
                    (booking_id,),
                ).fetchone()
            except sqlite3.IntegrityError as e:
                # The token is valid but its user is gone.
                conn.rollback()
                logger.warning("Booking rejected for unknown user %s", user_id)
                raise AuthError("Unknown user") from e
            except sqlite3.Error as e:
                conn.rollback()
                logger.exception("Failed to create booking for user %s", user_id)
                raise InternalError("Booking failed") from e
            finally:
                conn.close()

        row = await asyncio.to_thread(_insert)
        logger.info("User %s booked %s (booking id=%s)", user_id, booking.service, row["id"])
        return BookingRead.model_validate(dict(row))

    @classmethod
    async def list_bookings(cls, user_id: int) -> List[BookingRead]:
        """Return all bookings of ``user_id``, newest first."""

        def _fetch() -> List[sqlite3.Row]:
            conn = get_connection()
            try:
                return conn.execute(
                    f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE user_id = ? "
                    "ORDER BY created_at DESC, id DESC",
                    (user_id,),
                ).fetchall()
            except sqlite3.Error as e:
                logger.exception("Failed to list bookings for user %s", user_id)
                raise InternalError("Could not load bookings") from e
            finally:
                conn.close()

        rows = await asyncio.to_thread(_fetch)
        return [BookingRead.model_validate(dict(row)) for row in rows]
