from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from src.service.booking.app.dto.payment_dto import PaymentConfirmation, PaymentResult
from src.service.booking.driving_adapter.http_controller.schema.base_schema import CamelModel


class TossPaymentPayload(CamelModel):
    """Subset of the provider's payment confirmation that is stored."""

    order_id: str = Field(..., min_length=1, max_length=64)
    payment_key: str = Field(..., min_length=1, max_length=200)
    method: str
    status: str
    total_amount: int = Field(..., ge=0)
    requested_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None

    @field_validator('requested_at', 'approved_at')
    @classmethod
    def to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return None
        # Naive provider timestamps are taken as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    def __repr__(self) -> str:
        return (
            f"TossPaymentPayload(order_id='{self.order_id}', payment_key='********', "
            f"method='{self.method}', status='{self.status}', total_amount={self.total_amount})"
        )

    def to_confirmation(self) -> PaymentConfirmation:
        return PaymentConfirmation(
            order_id=self.order_id,
            payment_key=self.payment_key,
            method=self.method,
            status=self.status,
            total_amount=self.total_amount,
            requested_at=self.requested_at,
            approved_at=self.approved_at,
        )


class PaymentCompleteRequest(CamelModel):
    time_id: int = Field(..., gt=0)
    toss_response: TossPaymentPayload

    model_config = {
        'json_schema_extra': {
            'example': {
                'timeId': 1,
                'tossResponse': {
                    'orderId': 'order-20250110-0001',
                    'paymentKey': 'tgen_20250110abcdef',
                    'method': 'CARD',
                    'status': 'DONE',
                    'totalAmount': 50000,
                    'requestedAt': '2025-01-10T19:30:00+09:00',
                    'approvedAt': '2025-01-10T19:30:05+09:00',
                },
            }
        }
    }


class PaymentResponse(CamelModel):
    payment_id: int
    reservation_id: int
    time_id: int
    order_id: str
    method: str
    status: str
    total_amount: int
    reservation_status: str
    requested_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None

    @classmethod
    def from_result(cls, result: PaymentResult) -> 'PaymentResponse':
        return cls(
            payment_id=result.payment.id or 0,
            reservation_id=result.reservation.id or 0,
            time_id=result.reservation.time_id,
            order_id=result.payment.order_id,
            method=result.payment.method,
            status=result.payment.status,
            total_amount=result.payment.total_amount,
            reservation_status=result.reservation.status.display_name,
            requested_at=result.payment.requested_at,
            approved_at=result.payment.approved_at,
        )
