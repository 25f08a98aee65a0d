from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import DuplicateEmailError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.booking.domain.entity.user_entity import UserEntity


class SignUpUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, password_hasher: IPasswordHasher) -> None:
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(uow=uow, password_hasher=password_hasher)

    @Logger.io
    async def execute(self, *, email: str, password: SecretStr, name: str) -> UserEntity:
        async with self.uow:
            if await self.uow.user_query_repo.exists_by_email(email=email):
                metrics.record_auth(action='signup', result='duplicate_email')
                raise DuplicateEmailError()

            user = UserEntity.create(
                email=email,
                name=name,
                plain_password=password,
                password_hasher=self.password_hasher,
            )
            created = await self.uow.user_command_repo.create(user=user)
            await self.uow.commit()

        metrics.record_auth(action='signup', result='success')
        Logger.base.info(f'👤 [SIGNUP] user {created.id} registered')
        return created
