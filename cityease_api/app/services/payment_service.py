"""
Payment confirmation stub.

There is no payment provider behind this service: every confirmation
succeeds and is only logged.  The booking id is echoed back as sent.
"""

import logging
from typing import Optional, Union

from ..schemas.payment import PaymentConfirmation

DEFAULT_METHOD = "Cash"


class PaymentService:
    """Confirms payments for bookings."""

    @classmethod
    async def confirm(
        cls,
        user_id: int,
        booking_id: Optional[Union[int, str]],
        method: Optional[str] = None,
    ) -> PaymentConfirmation:
        logger = logging.getLogger(__name__)
        method = method or DEFAULT_METHOD
        logger.info("User %s confirmed payment for booking %s via %s", user_id, booking_id, method)
        return PaymentConfirmation(ok=True, booking_id=booking_id, method=method)
