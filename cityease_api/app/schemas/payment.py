"""
Pydantic models for the payment confirmation stub.

No payment provider is involved; see ``PaymentService.confirm``.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PaymentConfirm(BaseModel):
    """Body of ``POST /api/payment/confirm``."""

    model_config = ConfigDict(populate_by_name=True)

    booking_id: Optional[Union[int, str]] = Field(None, alias="bookingId", examples=[1])
    method: Optional[str] = Field(None, examples=["Cash"])


class PaymentConfirmation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    booking_id: Optional[Union[int, str]] = Field(None, alias="bookingId")
    method: str
