from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse
from src.service.booking.app.command.cancel_reservation_use_case import CancelReservationUseCase
from src.service.booking.app.command.create_reservation_use_case import CreateReservationUseCase
from src.service.booking.app.query.list_my_reservations_use_case import (
    ListMyReservationsUseCase,
)
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.booking.driving_adapter.http_controller.schema.reservation_schema import (
    CreateReservationRequest,
    MyReservationsResponse,
    ReservationResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: CreateReservationRequest,
    current_user: Identity = Depends(get_current_user),
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ApiResponse[ReservationResponse]:
    with tracer.start_as_current_span('controller.create_reservation') as span:
        span.set_attribute('time_id', request.time_id)
        span.set_attribute('student_id', current_user.id)

        reservation = await use_case.execute(time_id=request.time_id, student_id=current_user.id)

        span.set_attribute('reservation.id', reservation.id or 0)
        return ApiResponse.ok(ReservationResponse.from_entity(reservation))


# Registered before /{reservation_id} routes so "my" is never parsed as an id
@router.get('/my')
@Logger.io
async def list_my_reservations(
    current_user: Identity = Depends(get_current_user),
    use_case: ListMyReservationsUseCase = Depends(ListMyReservationsUseCase.depends),
) -> ApiResponse[MyReservationsResponse]:
    split = await use_case.execute(student_id=current_user.id)
    return ApiResponse.ok(MyReservationsResponse.from_split(split))


@router.patch('/{reservation_id}/cancel')
@Logger.io
async def cancel_reservation(
    reservation_id: int,
    current_user: Identity = Depends(get_current_user),
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> ApiResponse[ReservationResponse]:
    with tracer.start_as_current_span('controller.cancel_reservation') as span:
        span.set_attribute('reservation.id', reservation_id)
        span.set_attribute('student_id', current_user.id)

        reservation = await use_case.execute(
            reservation_id=reservation_id, requester_id=current_user.id
        )
        return ApiResponse.ok(ReservationResponse.from_entity(reservation))
