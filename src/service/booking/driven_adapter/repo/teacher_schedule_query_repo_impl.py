from typing import List

from sqlalchemy import and_, func, select

from src.platform.database.orm_db_setting import as_utc
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.teacher_schedule_dto import (
    EnrolledStudentDto,
    TeacherScheduleDto,
)
from src.service.booking.app.interface.i_teacher_schedule_query_repo import (
    ITeacherScheduleQueryRepo,
)
from src.service.booking.domain.enum.reservation_status import ReservationStatus
from src.service.booking.driven_adapter.model.class_model import ClassModel, TimeSlotModel
from src.service.booking.driven_adapter.model.reservation_model import ReservationModel
from src.service.booking.driven_adapter.model.user_model import UserModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo


_CONFIRMED = int(ReservationStatus.CONFIRMED)


class TeacherScheduleQueryRepoImpl(SessionAwareRepo, ITeacherScheduleQueryRepo):
    @Logger.io
    async def list_schedules(self, *, teacher_id: int) -> List[TeacherScheduleDto]:
        # Outer join so slots without bookings still show up with a zero count
        confirmed_count = func.count(ReservationModel.id)
        stmt = (
            select(
                ClassModel.id,
                ClassModel.class_name,
                ClassModel.max_capacity,
                ClassModel.location,
                ClassModel.latitude,
                ClassModel.longitude,
                TimeSlotModel.id,
                TimeSlotModel.start_at,
                TimeSlotModel.end_at,
                confirmed_count,
            )
            .select_from(TimeSlotModel)
            .join(ClassModel, ClassModel.id == TimeSlotModel.class_id)
            .outerjoin(
                ReservationModel,
                and_(
                    ReservationModel.time_id == TimeSlotModel.id,
                    ReservationModel.status_code == _CONFIRMED,
                ),
            )
            .where(ClassModel.teacher_id == teacher_id)
            .group_by(
                ClassModel.id,
                ClassModel.class_name,
                ClassModel.max_capacity,
                ClassModel.location,
                ClassModel.latitude,
                ClassModel.longitude,
                TimeSlotModel.id,
                TimeSlotModel.start_at,
                TimeSlotModel.end_at,
            )
            .order_by(TimeSlotModel.start_at, TimeSlotModel.id)
        )
        async with self._get_session() as session:
            rows = (await session.execute(stmt)).all()

        return [
            TeacherScheduleDto(
                class_id=class_id,
                class_name=class_name,
                max_capacity=max_capacity,
                location=location,
                latitude=latitude,
                longitude=longitude,
                time_id=time_id,
                start_at=as_utc(start_at),  # type: ignore[arg-type]
                end_at=as_utc(end_at),  # type: ignore[arg-type]
                confirmed_student_count=int(count or 0),
            )
            for (
                class_id,
                class_name,
                max_capacity,
                location,
                latitude,
                longitude,
                time_id,
                start_at,
                end_at,
                count,
            ) in rows
        ]

    @Logger.io
    async def list_enrolled_students(
        self, *, teacher_id: int, time_id: int
    ) -> List[EnrolledStudentDto]:
        stmt = (
            select(UserModel.id, UserModel.name, UserModel.email)
            .select_from(UserModel)
            .join(ReservationModel, ReservationModel.student_id == UserModel.id)
            .join(TimeSlotModel, TimeSlotModel.id == ReservationModel.time_id)
            .join(ClassModel, ClassModel.id == TimeSlotModel.class_id)
            .where(
                ReservationModel.time_id == time_id,
                ReservationModel.status_code == _CONFIRMED,
                ClassModel.teacher_id == teacher_id,
            )
            .order_by(ReservationModel.id)
        )
        async with self._get_session() as session:
            rows = (await session.execute(stmt)).all()

        return [
            EnrolledStudentDto(student_id=student_id, student_name=name, student_email=email)
            for student_id, name, email in rows
        ]
