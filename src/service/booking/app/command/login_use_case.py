from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import InvalidPasswordError, UserNotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.dto.auth_dto import LoginResult
from src.service.booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.booking.app.interface.i_token_provider import ITokenProvider
from src.service.booking.domain.entity.refresh_token_entity import RefreshToken
from src.service.booking.domain.value_object.identity import Identity


class LoginUseCase:
    """Verify credentials, issue an access/refresh pair and store the refresh token."""

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        password_hasher: IPasswordHasher,
        token_provider: ITokenProvider,
    ) -> None:
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_provider = token_provider

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        token_provider: ITokenProvider = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(uow=uow, password_hasher=password_hasher, token_provider=token_provider)

    @Logger.io
    async def execute(self, *, email: str, password: SecretStr) -> LoginResult:
        async with self.uow:
            user = await self.uow.user_query_repo.get_by_email(email=email)
            if not user or user.id is None:
                metrics.record_auth(action='login', result='user_not_found')
                raise UserNotFoundError()

            if not user.check_password(password, self.password_hasher):
                metrics.record_auth(action='login', result='invalid_password')
                raise InvalidPasswordError()

            identity = Identity(id=user.id, email=user.email, role=user.role)
            access_token = self.token_provider.issue_access_token(identity)
            refresh_token, expires_at = self.token_provider.issue_refresh_token(identity)

            # Replaces any refresh token from an earlier login
            await self.uow.refresh_token_repo.replace_for_user(
                refresh_token=RefreshToken(
                    user_id=user.id, token=refresh_token, expires_at=expires_at
                )
            )
            await self.uow.commit()

        metrics.record_auth(action='login', result='success')
        Logger.base.info(f'🔑 [LOGIN] user {user.id} logged in')
        return LoginResult(
            access_token=access_token,
            refresh_token=refresh_token,
            email=user.email,
            name=user.name,
        )
