from typing import List

from sqlalchemy import select

from src.platform.database.orm_db_setting import as_utc
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.reservation_dto import StudentReservationDto
from src.service.booking.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.booking.domain.enum.reservation_status import ReservationStatus
from src.service.booking.driven_adapter.model.class_model import ClassModel, TimeSlotModel
from src.service.booking.driven_adapter.model.reservation_model import ReservationModel
from src.service.booking.driven_adapter.model.user_model import UserModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo


class ReservationQueryRepoImpl(SessionAwareRepo, IReservationQueryRepo):
    @Logger.io
    async def list_by_student(self, *, student_id: int) -> List[StudentReservationDto]:
        stmt = (
            select(
                ReservationModel.id,
                ReservationModel.status_code,
                ClassModel.id,
                ClassModel.class_name,
                ClassModel.price,
                ClassModel.location,
                ClassModel.latitude,
                ClassModel.longitude,
                TimeSlotModel.id,
                TimeSlotModel.start_at,
                TimeSlotModel.end_at,
                UserModel.name,
                UserModel.email,
            )
            .select_from(ReservationModel)
            .join(TimeSlotModel, TimeSlotModel.id == ReservationModel.time_id)
            .join(ClassModel, ClassModel.id == TimeSlotModel.class_id)
            .join(UserModel, UserModel.id == ClassModel.teacher_id)
            .where(ReservationModel.student_id == student_id)
            .order_by(TimeSlotModel.start_at, ReservationModel.id)
        )
        async with self._get_session() as session:
            rows = (await session.execute(stmt)).all()

        return [
            StudentReservationDto(
                reservation_id=reservation_id,
                status=ReservationStatus(status_code),
                class_id=class_id,
                class_name=class_name,
                price=price,
                location=location,
                latitude=latitude,
                longitude=longitude,
                time_id=time_id,
                start_at=as_utc(start_at),  # type: ignore[arg-type]
                end_at=as_utc(end_at),  # type: ignore[arg-type]
                teacher_name=teacher_name,
                teacher_email=teacher_email,
            )
            for (
                reservation_id,
                status_code,
                class_id,
                class_name,
                price,
                location,
                latitude,
                longitude,
                time_id,
                start_at,
                end_at,
                teacher_name,
                teacher_email,
            ) in rows
        ]
