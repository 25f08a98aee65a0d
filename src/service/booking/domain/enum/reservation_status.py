"""
Reservation Status Enum - Domain Value Object

Persisted as its integer code (`reservation.status_code`).
"""

from enum import IntEnum


class ReservationStatus(IntEnum):
    CONFIRMED = 1
    CANCELLED = 2

    @property
    def display_name(self) -> str:
        return self.name
