from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from src.platform.database.orm_db_setting import as_utc
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.booking.domain.entity.reservation_entity import Reservation
from src.service.booking.domain.enum.reservation_status import ReservationStatus
from src.service.booking.driven_adapter.model.reservation_model import ReservationModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo
from src.service.booking.driven_adapter.repo.seat_conflict import raise_seat_conflict_or_reraise


_CONFIRMED = int(ReservationStatus.CONFIRMED)


class ReservationCommandRepoImpl(SessionAwareRepo, IReservationCommandRepo):
    @staticmethod
    def _to_entity(model: ReservationModel) -> Reservation:
        return Reservation(
            id=model.id,
            student_id=model.student_id,
            time_id=model.time_id,
            status=ReservationStatus(model.status_code),
            seat_no=model.seat_no,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @Logger.io
    async def get_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        async with self._get_session() as session:
            model = await session.get(ReservationModel, reservation_id)
            return self._to_entity(model) if model else None

    @Logger.io
    async def exists_confirmed(self, *, student_id: int, time_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel.id).where(
                    ReservationModel.student_id == student_id,
                    ReservationModel.time_id == time_id,
                    ReservationModel.status_code == _CONFIRMED,
                )
            )
            return result.first() is not None

    @Logger.io
    async def count_confirmed(self, *, time_id: int) -> int:
        async with self._get_session() as session:
            result = await session.execute(
                select(func.count(ReservationModel.id)).where(
                    ReservationModel.time_id == time_id,
                    ReservationModel.status_code == _CONFIRMED,
                )
            )
            return int(result.scalar_one())

    @Logger.io
    async def list_taken_seats(self, *, time_id: int) -> set[int]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ReservationModel.seat_no).where(
                    ReservationModel.time_id == time_id,
                    ReservationModel.status_code == _CONFIRMED,
                    ReservationModel.seat_no.is_not(None),
                )
            )
            return {seat_no for seat_no in result.scalars().all()}

    @Logger.io
    async def create(self, *, reservation: Reservation) -> Reservation:
        async with self._get_session() as session:
            model = ReservationModel(
                time_id=reservation.time_id,
                student_id=reservation.student_id,
                status_code=int(reservation.status),
                seat_no=reservation.seat_no,
                created_at=reservation.created_at,
                updated_at=reservation.updated_at,
            )
            session.add(model)
            try:
                await session.flush()
            except IntegrityError as e:
                raise_seat_conflict_or_reraise(e)
            return self._to_entity(model)

    @Logger.io
    async def update_status(self, *, reservation: Reservation) -> Reservation:
        async with self._get_session() as session:
            model = await session.get(ReservationModel, reservation.id)
            if not model:
                raise NotFoundError('Reservation not found')
            model.status_code = int(reservation.status)
            model.updated_at = reservation.updated_at  # type: ignore[assignment]
            await session.flush()
            return self._to_entity(model)
