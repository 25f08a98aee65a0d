from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.value_object.identity import Identity, is_admin


class DeleteUserUseCase:
    """Administrative delete; the user's refresh token goes with it."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, identity: Identity, user_id: int) -> None:
        if not is_admin(identity):
            raise ForbiddenError('Only administrators can delete users')

        async with self.uow:
            await self.uow.user_command_repo.delete(user_id=user_id)
            await self.uow.commit()

        Logger.base.info(f'🗑️ [USER] user {user_id} deleted by admin {identity.id}')
