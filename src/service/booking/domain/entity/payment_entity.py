from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Payment:
    reservation_id: int
    order_id: str
    payment_key: str
    method: str
    status: str
    total_amount: int
    requested_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
