from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse
from src.service.booking.app.query.get_teacher_schedule_use_case import GetTeacherScheduleUseCase
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.booking.driving_adapter.http_controller.schema.teacher_schema import (
    EnrolledStudentResponse,
    TeacherSchedulesResponse,
)


router = APIRouter()


@router.get('/my-schedule')
@Logger.io
async def get_my_schedule(
    current_user: Identity = Depends(get_current_user),
    use_case: GetTeacherScheduleUseCase = Depends(GetTeacherScheduleUseCase.depends),
) -> ApiResponse[TeacherSchedulesResponse]:
    split = await use_case.list_schedules(teacher_id=current_user.id)
    return ApiResponse.ok(TeacherSchedulesResponse.from_split(split))


@router.get('/schedule/{time_id}/students')
@Logger.io
async def list_enrolled_students(
    time_id: int,
    current_user: Identity = Depends(get_current_user),
    use_case: GetTeacherScheduleUseCase = Depends(GetTeacherScheduleUseCase.depends),
) -> ApiResponse[List[EnrolledStudentResponse]]:
    # Another teacher's slot yields an empty list
    students = await use_case.list_enrolled_students(teacher_id=current_user.id, time_id=time_id)
    return ApiResponse.ok([EnrolledStudentResponse.from_dto(s) for s in students])
