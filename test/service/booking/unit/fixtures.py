from datetime import datetime, timedelta, timezone
from typing import Callable

import attrs

from src.service.booking.domain.entity.class_entity import TimeSlot
from src.service.booking.domain.entity.reservation_entity import Reservation


def make_time_slot(*, time_id: int = 1, max_capacity: int = 2) -> TimeSlot:
    start_at = datetime.now(timezone.utc) + timedelta(days=1)
    return TimeSlot(
        id=time_id,
        class_id=1,
        start_at=start_at,
        end_at=start_at + timedelta(hours=2),
        max_capacity=max_capacity,
        teacher_id=1,
    )


def assign_id(reservation_id: int = 10) -> Callable[..., Reservation]:
    """side_effect for reservation_command_repo.create: returns the row as if flushed."""

    def _create(*, reservation: Reservation) -> Reservation:
        return attrs.evolve(reservation, id=reservation_id)

    return _create
