from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.schedule_split import UpcomingAndPast, split_upcoming_and_past
from src.service.booking.app.dto.teacher_schedule_dto import (
    EnrolledStudentDto,
    TeacherScheduleDto,
)
from src.service.booking.app.interface.i_teacher_schedule_query_repo import (
    ITeacherScheduleQueryRepo,
)


class GetTeacherScheduleUseCase:
    """A teacher's own time slots with confirmed counts, and who is enrolled in each."""

    def __init__(self, *, teacher_schedule_query_repo: ITeacherScheduleQueryRepo) -> None:
        self.teacher_schedule_query_repo = teacher_schedule_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        teacher_schedule_query_repo: ITeacherScheduleQueryRepo = Depends(
            Provide[Container.teacher_schedule_query_repo]
        ),
    ) -> Self:
        return cls(teacher_schedule_query_repo=teacher_schedule_query_repo)

    @Logger.io
    async def list_schedules(self, *, teacher_id: int) -> UpcomingAndPast[TeacherScheduleDto]:
        schedules = await self.teacher_schedule_query_repo.list_schedules(teacher_id=teacher_id)
        return split_upcoming_and_past(schedules)

    @Logger.io
    async def list_enrolled_students(
        self, *, teacher_id: int, time_id: int
    ) -> List[EnrolledStudentDto]:
        return await self.teacher_schedule_query_repo.list_enrolled_students(
            teacher_id=teacher_id, time_id=time_id
        )
