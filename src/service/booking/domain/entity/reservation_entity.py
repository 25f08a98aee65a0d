from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    ForbiddenError,
    NotConfirmedError,
)
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.enum.reservation_status import ReservationStatus


@attrs.define
class Reservation:
    student_id: int
    time_id: int
    status: ReservationStatus = ReservationStatus.CONFIRMED
    # Seat held while CONFIRMED; the partial unique index ignores cancelled rows
    seat_no: Optional[int] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def confirm(cls, *, student_id: int, time_id: int, seat_no: int) -> 'Reservation':
        now = datetime.now(timezone.utc)
        return cls(
            student_id=student_id,
            time_id=time_id,
            status=ReservationStatus.CONFIRMED,
            seat_no=seat_no,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_confirmed(self) -> bool:
        return self.status == ReservationStatus.CONFIRMED

    def ensure_owned_by(self, student_id: int) -> None:
        if self.student_id != student_id:
            raise ForbiddenError('Only the student who made this reservation can cancel it')

    @Logger.io
    def cancel(self) -> 'Reservation':
        if self.status == ReservationStatus.CANCELLED:
            raise AlreadyCancelledError()
        if self.status != ReservationStatus.CONFIRMED:
            raise NotConfirmedError()

        return attrs.evolve(
            self,
            status=ReservationStatus.CANCELLED,
            updated_at=datetime.now(timezone.utc),
        )


def lowest_free_seat(taken: set[int], capacity: int) -> Optional[int]:
    """Smallest seat number in 1..capacity not in `taken`, or None when full."""
    for seat_no in range(1, capacity + 1):
        if seat_no not in taken:
            return seat_no
    return None
