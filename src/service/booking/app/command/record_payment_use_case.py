import time
from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ConflictError, CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.command.seat_allocation import (
    reserve_seat,
    run_with_seat_conflict_retry,
)
from src.service.booking.app.dto.payment_dto import PaymentConfirmation, PaymentResult
from src.service.booking.domain.entity.payment_entity import Payment


class RecordPaymentUseCase:
    """
    Record a completed third-party payment together with its reservation.

    Reservation and payment are written in one transaction: if booking the
    seat fails nothing is stored, and a provider order id that was already
    recorded is rejected before anything is written.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, max_retries: int | None = None) -> None:
        self.uow = uow
        self.max_retries = max_retries or settings.RESERVATION_MAX_RETRIES

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    async def _reserve_and_record(
        self, *, time_id: int, student_id: int, confirmation: PaymentConfirmation
    ) -> PaymentResult:
        if await self.uow.payment_command_repo.exists_by_order_id(order_id=confirmation.order_id):
            raise ConflictError(f'Payment for order {confirmation.order_id} is already recorded')

        reservation = await reserve_seat(self.uow, student_id=student_id, time_id=time_id)
        assert reservation.id is not None, 'Reservation must be flushed before payment'

        payment = await self.uow.payment_command_repo.create(
            payment=Payment(
                reservation_id=reservation.id,
                order_id=confirmation.order_id,
                payment_key=confirmation.payment_key,
                method=confirmation.method,
                status=confirmation.status,
                total_amount=confirmation.total_amount,
                requested_at=confirmation.requested_at,
                approved_at=confirmation.approved_at,
            )
        )
        return PaymentResult(payment=payment, reservation=reservation)

    @Logger.io
    async def execute(
        self, *, time_id: int, student_id: int, confirmation: PaymentConfirmation
    ) -> PaymentResult:
        started = time.perf_counter()
        try:
            result = await run_with_seat_conflict_retry(
                self.uow,
                lambda: self._reserve_and_record(
                    time_id=time_id, student_id=student_id, confirmation=confirmation
                ),
                max_retries=self.max_retries,
                source='payment',
            )
        except CustomBaseError as e:
            metrics.record_reservation(
                source='payment', result=e.code, duration=time.perf_counter() - started
            )
            metrics.record_payment(method=confirmation.method, result=e.code)
            raise

        metrics.record_reservation(
            source='payment', result='success', duration=time.perf_counter() - started
        )
        metrics.record_payment(method=confirmation.method, result='success')
        Logger.base.info(
            f'💳 [PAYMENT] order {confirmation.order_id} recorded for reservation '
            f'{result.reservation.id} (student {student_id}, time slot {time_id})'
        )
        return result
