from datetime import datetime, timezone
from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.domain.value_object.identity import Identity


class LogoutUseCase:
    """Drop the caller's stored refresh token. Safe to repeat."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, identity: Identity) -> datetime:
        async with self.uow:
            await self.uow.refresh_token_repo.delete_by_user_id(user_id=identity.id)
            await self.uow.commit()

        metrics.record_auth(action='logout', result='success')
        return datetime.now(timezone.utc)
