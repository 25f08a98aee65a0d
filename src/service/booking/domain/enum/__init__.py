"""Booking Domain Enums"""

from src.service.booking.domain.enum.reservation_status import ReservationStatus
from src.service.booking.domain.enum.user_role import UserRole

__all__ = ['ReservationStatus', 'UserRole']
