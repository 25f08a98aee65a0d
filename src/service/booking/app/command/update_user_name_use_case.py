from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ForbiddenError, UserNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.value_object.identity import Identity, can_manage_user


class UpdateUserNameUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, identity: Identity, user_id: int, name: str) -> UserEntity:
        if not can_manage_user(identity, user_id):
            raise ForbiddenError('You can only update your own profile')

        async with self.uow:
            user = await self.uow.user_query_repo.get_by_id(user_id=user_id)
            if not user:
                raise UserNotFoundError()

            updated = await self.uow.user_command_repo.update(user=user.rename(name))
            await self.uow.commit()

        return updated
