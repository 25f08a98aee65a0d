"""
Seat allocation shared by the reservation and payment flows.

Capacity and one-per-student are guarded twice: the checks below produce the
business errors, and two partial unique indexes on `reservation` (time_id,
seat_no) / (time_id, student_id), restricted to CONFIRMED rows, reject the
losing insert when two requests race past the checks together. The loser's
whole unit of work, which the repositories fail with `SeatConflictError`, is
rolled back and re-run, and the re-run then reports AlreadyReserved or
CapacityExceeded from the checks.
"""

from typing import Awaitable, Callable, TypeVar

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    AlreadyReservedError,
    CapacityExceededError,
    ConflictError,
    NotFoundError,
    SeatConflictError,
    UserNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.domain.entity.reservation_entity import Reservation, lowest_free_seat


T = TypeVar('T')


@Logger.io
async def reserve_seat(uow: AbstractUnitOfWork, *, student_id: int, time_id: int) -> Reservation:
    """Must run inside an open `async with uow` block; does not commit."""
    student = await uow.user_query_repo.get_by_id(user_id=student_id)
    if not student:
        raise UserNotFoundError()

    time_slot = await uow.catalog_query_repo.get_time_slot(time_id=time_id)
    if not time_slot:
        raise NotFoundError('Time slot not found')

    if await uow.reservation_command_repo.exists_confirmed(student_id=student_id, time_id=time_id):
        raise AlreadyReservedError()

    confirmed_count = await uow.reservation_command_repo.count_confirmed(time_id=time_id)
    if confirmed_count >= time_slot.max_capacity:
        raise CapacityExceededError()

    taken_seats = await uow.reservation_command_repo.list_taken_seats(time_id=time_id)
    seat_no = lowest_free_seat(taken_seats, time_slot.max_capacity)
    if seat_no is None:
        raise CapacityExceededError()

    return await uow.reservation_command_repo.create(
        reservation=Reservation.confirm(student_id=student_id, time_id=time_id, seat_no=seat_no)
    )


async def run_with_seat_conflict_retry(
    uow: AbstractUnitOfWork,
    work: Callable[[], Awaitable[T]],
    *,
    max_retries: int,
    source: str,
) -> T:
    """
    Run `work` in a fresh transaction and commit it.

    Only `SeatConflictError` triggers a re-run; any other failure propagates.
    """
    for attempt in range(1, max_retries + 1):
        try:
            async with uow:
                result = await work()
                await uow.commit()
                return result
        except SeatConflictError as e:
            metrics.record_conflict_retry(source=source)
            Logger.base.warning(
                f'🔁 [{source.upper()}] Concurrent write won the race '
                f'(attempt {attempt}/{max_retries}): {e.message}'
            )

    raise ConflictError('Time slot is busy, please try again')
