from datetime import datetime
from typing import Optional

import attrs

from src.service.booking.domain.enum.reservation_status import ReservationStatus


@attrs.define(frozen=True)
class StudentReservationDto:
    """One row of a student's reservation history joined with slot, class and teacher."""

    reservation_id: int
    status: ReservationStatus
    class_id: int
    class_name: str
    price: int
    time_id: int
    start_at: datetime
    end_at: datetime
    teacher_name: str
    teacher_email: str
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
