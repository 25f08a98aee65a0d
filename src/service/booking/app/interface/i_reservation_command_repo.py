from abc import ABC, abstractmethod
from typing import Optional

from src.service.booking.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def exists_confirmed(self, *, student_id: int, time_id: int) -> bool:
        pass

    @abstractmethod
    async def count_confirmed(self, *, time_id: int) -> int:
        pass

    @abstractmethod
    async def list_taken_seats(self, *, time_id: int) -> set[int]:
        pass

    @abstractmethod
    async def create(self, *, reservation: Reservation) -> Reservation:
        """Flushes immediately so seat/duplicate index violations surface here"""
        pass

    @abstractmethod
    async def update_status(self, *, reservation: Reservation) -> Reservation:
        pass
