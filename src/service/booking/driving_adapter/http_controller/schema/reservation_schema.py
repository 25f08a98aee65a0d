from datetime import datetime
from typing import List, Optional

from pydantic import Field

from src.service.booking.app.dto.reservation_dto import StudentReservationDto
from src.service.booking.app.dto.schedule_split import UpcomingAndPast
from src.service.booking.domain.entity.reservation_entity import Reservation
from src.service.booking.driving_adapter.http_controller.schema.base_schema import CamelModel


class CreateReservationRequest(CamelModel):
    time_id: int = Field(..., gt=0)

    model_config = {'json_schema_extra': {'example': {'timeId': 1}}}


class ReservationResponse(CamelModel):
    reservation_id: int
    time_id: int
    student_id: int
    status: str
    seat_no: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'reservationId': 10,
                'timeId': 1,
                'studentId': 2,
                'status': 'CONFIRMED',
                'seatNo': 1,
                'createdAt': '2025-01-10T10:30:00Z',
                'updatedAt': '2025-01-10T10:30:00Z',
            }
        }
    }

    @classmethod
    def from_entity(cls, reservation: Reservation) -> 'ReservationResponse':
        return cls(
            reservation_id=reservation.id or 0,
            time_id=reservation.time_id,
            student_id=reservation.student_id,
            status=reservation.status.display_name,
            seat_no=reservation.seat_no,
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
        )


class StudentReservationResponse(CamelModel):
    reservation_id: int
    status: str
    class_id: int
    class_name: str
    price: int
    time_id: int
    start_at: datetime
    end_at: datetime
    teacher_name: str
    teacher_email: str
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_dto(cls, dto: StudentReservationDto) -> 'StudentReservationResponse':
        return cls(
            reservation_id=dto.reservation_id,
            status=dto.status.display_name,
            class_id=dto.class_id,
            class_name=dto.class_name,
            price=dto.price,
            time_id=dto.time_id,
            start_at=dto.start_at,
            end_at=dto.end_at,
            teacher_name=dto.teacher_name,
            teacher_email=dto.teacher_email,
            location=dto.location,
            latitude=dto.latitude,
            longitude=dto.longitude,
        )


class MyReservationsResponse(CamelModel):
    upcoming_schedules: List[StudentReservationResponse]
    past_schedules: List[StudentReservationResponse]

    @classmethod
    def from_split(
        cls, split: UpcomingAndPast[StudentReservationDto]
    ) -> 'MyReservationsResponse':
        return cls(
            upcoming_schedules=[StudentReservationResponse.from_dto(r) for r in split.upcoming],
            past_schedules=[StudentReservationResponse.from_dto(r) for r in split.past],
        )
