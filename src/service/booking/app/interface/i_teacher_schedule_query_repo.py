from abc import ABC, abstractmethod
from typing import List

from src.service.booking.app.dto.teacher_schedule_dto import (
    EnrolledStudentDto,
    TeacherScheduleDto,
)


class ITeacherScheduleQueryRepo(ABC):
    @abstractmethod
    async def list_schedules(self, *, teacher_id: int) -> List[TeacherScheduleDto]:
        """Every slot of the teacher's classes ordered by start, with confirmed counts"""
        pass

    @abstractmethod
    async def list_enrolled_students(
        self, *, teacher_id: int, time_id: int
    ) -> List[EnrolledStudentDto]:
        """Empty when the slot does not belong to the teacher"""
        pass
