from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.platform.database.orm_db_setting import as_utc
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_payment_command_repo import IPaymentCommandRepo
from src.service.booking.domain.entity.payment_entity import Payment
from src.service.booking.driven_adapter.model.payment_model import PaymentModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo
from src.service.booking.driven_adapter.repo.seat_conflict import raise_seat_conflict_or_reraise


class PaymentCommandRepoImpl(SessionAwareRepo, IPaymentCommandRepo):
    @Logger.io
    async def exists_by_order_id(self, *, order_id: str) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(PaymentModel.id).where(PaymentModel.toss_order_id == order_id)
            )
            return result.first() is not None

    @Logger.io
    async def create(self, *, payment: Payment) -> Payment:
        async with self._get_session() as session:
            model = PaymentModel(
                reservation_id=payment.reservation_id,
                toss_order_id=payment.order_id,
                payment_key=payment.payment_key,
                method=payment.method,
                status=payment.status,
                total_amount=payment.total_amount,
                requested_at=payment.requested_at,
                approved_at=payment.approved_at,
            )
            session.add(model)
            try:
                await session.flush()
            except IntegrityError as e:
                raise_seat_conflict_or_reraise(e)
            return Payment(
                id=model.id,
                reservation_id=model.reservation_id,
                order_id=model.toss_order_id,
                payment_key=model.payment_key,
                method=model.method,
                status=model.status,
                total_amount=model.total_amount,
                requested_at=as_utc(model.requested_at),
                approved_at=as_utc(model.approved_at),
                created_at=as_utc(model.created_at),
            )
