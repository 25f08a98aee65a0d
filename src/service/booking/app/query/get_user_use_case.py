from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, UserNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.value_object.identity import Identity, can_manage_user


class GetUserUseCase:
    def __init__(self, *, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def get_by_id(self, *, identity: Identity, user_id: int) -> UserEntity:
        if not can_manage_user(identity, user_id):
            raise ForbiddenError('You can only view your own profile')

        user = await self.user_query_repo.get_by_id(user_id=user_id)
        if not user:
            raise UserNotFoundError()
        return user

    @Logger.io
    async def get_by_email(self, *, email: str) -> UserEntity:
        user = await self.user_query_repo.get_by_email(email=email)
        if not user:
            raise UserNotFoundError()
        return user
