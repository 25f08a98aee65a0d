from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, func, text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base, utc_now
from src.service.booking.domain.enum.reservation_status import ReservationStatus


_CONFIRMED_ONLY = text(f'status_code = {int(ReservationStatus.CONFIRMED)}')


class ReservationModel(Base):
    """
    Capacity and one-per-student are enforced by the two partial unique
    indexes below; only CONFIRMED rows take part in them.
    """

    __tablename__ = 'reservation'
    __table_args__ = (
        Index(
            'uq_reservation_time_seat_confirmed',
            'time_id',
            'seat_no',
            unique=True,
            postgresql_where=_CONFIRMED_ONLY,
            sqlite_where=_CONFIRMED_ONLY,
        ),
        Index(
            'uq_reservation_time_student_confirmed',
            'time_id',
            'student_id',
            unique=True,
            postgresql_where=_CONFIRMED_ONLY,
            sqlite_where=_CONFIRMED_ONLY,
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    time_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('time_slot.id'), nullable=False, index=True
    )
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=False, index=True
    )
    status_code: Mapped[int] = mapped_column(
        Integer, nullable=False, default=int(ReservationStatus.CONFIRMED)
    )
    seat_no: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
        nullable=False,
    )
