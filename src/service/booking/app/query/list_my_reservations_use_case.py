from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.reservation_dto import StudentReservationDto
from src.service.booking.app.dto.schedule_split import UpcomingAndPast, split_upcoming_and_past
from src.service.booking.app.interface.i_reservation_query_repo import IReservationQueryRepo


class ListMyReservationsUseCase:
    def __init__(self, *, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def execute(self, *, student_id: int) -> UpcomingAndPast[StudentReservationDto]:
        reservations = await self.reservation_query_repo.list_by_student(student_id=student_id)
        return split_upcoming_and_past(reservations)
