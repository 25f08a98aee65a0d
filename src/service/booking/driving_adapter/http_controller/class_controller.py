from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse
from src.service.booking.app.query.list_classes_use_case import ListClassesUseCase
from src.service.booking.driving_adapter.http_controller.schema.class_schema import (
    ClassDetailResponse,
    ClassSummaryResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_classes(
    use_case: ListClassesUseCase = Depends(ListClassesUseCase.depends),
) -> ApiResponse[List[ClassSummaryResponse]]:
    offerings = await use_case.list_all()
    return ApiResponse.ok([ClassSummaryResponse.from_entity(o) for o in offerings])


@router.get('/{class_id}')
@Logger.io
async def get_class(
    class_id: int,
    use_case: ListClassesUseCase = Depends(ListClassesUseCase.depends),
) -> ApiResponse[ClassDetailResponse]:
    offering = await use_case.get_detail(class_id=class_id)
    return ApiResponse.ok(ClassDetailResponse.from_entity(offering))
