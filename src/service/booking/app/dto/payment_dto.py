from datetime import datetime
from typing import Optional

import attrs

from src.service.booking.domain.entity.payment_entity import Payment
from src.service.booking.domain.entity.reservation_entity import Reservation


@attrs.define(frozen=True)
class PaymentConfirmation:
    """Provider-side confirmation of a completed charge, already parsed."""

    order_id: str
    payment_key: str = attrs.field(repr=False)
    method: str
    status: str
    total_amount: int
    requested_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None


@attrs.define(frozen=True)
class PaymentResult:
    payment: Payment
    reservation: Reservation
