from abc import ABC, abstractmethod
from typing import List

from src.service.booking.app.dto.reservation_dto import StudentReservationDto


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def list_by_student(self, *, student_id: int) -> List[StudentReservationDto]:
        """All reservations of the student (any status), ordered by slot start"""
        pass
