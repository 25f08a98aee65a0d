from datetime import datetime
from typing import List, Optional

from src.service.booking.app.dto.schedule_split import UpcomingAndPast
from src.service.booking.app.dto.teacher_schedule_dto import (
    EnrolledStudentDto,
    TeacherScheduleDto,
)
from src.service.booking.driving_adapter.http_controller.schema.base_schema import CamelModel


class TeacherScheduleResponse(CamelModel):
    class_id: int
    class_name: str
    max_capacity: int
    time_id: int
    start_at: datetime
    end_at: datetime
    confirmed_student_count: int
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class TeacherSchedulesResponse(CamelModel):
    upcoming_schedules: List[TeacherScheduleResponse]
    past_schedules: List[TeacherScheduleResponse]

    @classmethod
    def from_split(cls, split: UpcomingAndPast[TeacherScheduleDto]) -> 'TeacherSchedulesResponse':
        def to_response(dto: TeacherScheduleDto) -> TeacherScheduleResponse:
            return TeacherScheduleResponse(
                class_id=dto.class_id,
                class_name=dto.class_name,
                max_capacity=dto.max_capacity,
                time_id=dto.time_id,
                start_at=dto.start_at,
                end_at=dto.end_at,
                confirmed_student_count=dto.confirmed_student_count,
                location=dto.location,
                latitude=dto.latitude,
                longitude=dto.longitude,
            )

        return cls(
            upcoming_schedules=[to_response(s) for s in split.upcoming],
            past_schedules=[to_response(s) for s in split.past],
        )


class EnrolledStudentResponse(CamelModel):
    student_id: int
    student_name: str
    student_email: str

    @classmethod
    def from_dto(cls, dto: EnrolledStudentDto) -> 'EnrolledStudentResponse':
        return cls(
            student_id=dto.student_id,
            student_name=dto.student_name,
            student_email=dto.student_email,
        )
