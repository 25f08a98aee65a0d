from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import CustomBaseError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.domain.entity.reservation_entity import Reservation


class CancelReservationUseCase:
    """
    Cancel a reservation on behalf of its student.

    Checks run in this order: NotFound, Forbidden (not the owner),
    AlreadyCancelled, NotConfirmed. Only status and updated_at change; the
    row stays for history.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, reservation_id: int, requester_id: int) -> Reservation:
        try:
            async with self.uow:
                reservation = await self.uow.reservation_command_repo.get_by_id(
                    reservation_id=reservation_id
                )
                if not reservation:
                    raise NotFoundError('Reservation not found')

                reservation.ensure_owned_by(requester_id)
                cancelled = reservation.cancel()

                updated = await self.uow.reservation_command_repo.update_status(
                    reservation=cancelled
                )
                await self.uow.commit()
        except CustomBaseError as e:
            metrics.record_cancellation(result=e.code)
            raise

        metrics.record_cancellation(result='success')
        Logger.base.info(f'🗑️ [CANCEL] reservation {reservation_id} cancelled by {requester_id}')
        return updated
