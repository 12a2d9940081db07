"""
Payment endpoint.

``POST /api/payment/confirm`` is a placeholder: it always reports
success and does not contact any payment provider.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from cityease_api.app.core.security import get_current_user
from cityease_api.app.schemas.payment import PaymentConfirm, PaymentConfirmation
from cityease_api.app.services.payment_service import PaymentService

router = APIRouter()


@router.post("/confirm", response_model=PaymentConfirmation)
async def confirm_payment(
    payload: PaymentConfirm,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> PaymentConfirmation:
    return await PaymentService.confirm(current_user["id"], payload.booking_id, payload.method)
