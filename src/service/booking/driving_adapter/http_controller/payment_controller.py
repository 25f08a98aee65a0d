from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse
from src.service.booking.app.command.record_payment_use_case import RecordPaymentUseCase
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.booking.driving_adapter.http_controller.schema.payment_schema import (
    PaymentCompleteRequest,
    PaymentResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('/complete', status_code=status.HTTP_201_CREATED)
@Logger.io
async def complete_payment(
    request: PaymentCompleteRequest,
    current_user: Identity = Depends(get_current_user),
    use_case: RecordPaymentUseCase = Depends(RecordPaymentUseCase.depends),
) -> ApiResponse[PaymentResponse]:
    with tracer.start_as_current_span('controller.complete_payment') as span:
        span.set_attribute('time_id', request.time_id)
        span.set_attribute('student_id', current_user.id)
        span.set_attribute('payment.method', request.toss_response.method)

        result = await use_case.execute(
            time_id=request.time_id,
            student_id=current_user.id,
            confirmation=request.toss_response.to_confirmation(),
        )

        span.set_attribute('payment.id', result.payment.id or 0)
        span.set_attribute('reservation.id', result.reservation.id or 0)
        return ApiResponse.ok(PaymentResponse.from_result(result))
