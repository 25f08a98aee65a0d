import time
from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.command.seat_allocation import (
    reserve_seat,
    run_with_seat_conflict_retry,
)
from src.service.booking.domain.entity.reservation_entity import Reservation


class CreateReservationUseCase:
    """
    Book one seat of a time slot for a student.

    Flow:
    1. Resolve student and time slot (NotFound)
    2. Reject a second CONFIRMED booking of the same slot (AlreadyReserved)
    3. Reject when CONFIRMED count has reached capacity (CapacityExceeded)
    4. Insert CONFIRMED reservation holding the lowest free seat number
    """

    def __init__(self, *, uow: AbstractUnitOfWork, max_retries: int | None = None) -> None:
        self.uow = uow
        self.max_retries = max_retries or settings.RESERVATION_MAX_RETRIES

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, time_id: int, student_id: int) -> Reservation:
        started = time.perf_counter()
        try:
            reservation = await run_with_seat_conflict_retry(
                self.uow,
                lambda: reserve_seat(self.uow, student_id=student_id, time_id=time_id),
                max_retries=self.max_retries,
                source='reservation',
            )
        except CustomBaseError as e:
            metrics.record_reservation(
                source='reservation', result=e.code, duration=time.perf_counter() - started
            )
            raise

        metrics.record_reservation(
            source='reservation', result='success', duration=time.perf_counter() - started
        )
        Logger.base.info(
            f'📝 [RESERVE] student {student_id} booked time slot {time_id} '
            f'(reservation {reservation.id}, seat {reservation.seat_no})'
        )
        return reservation
