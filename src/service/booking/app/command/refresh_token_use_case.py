from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    CustomBaseError,
    ExpiredTokenError,
    InvalidRefreshTokenError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.dto.auth_dto import TokenPair
from src.service.booking.app.interface.i_token_provider import ITokenProvider


class RefreshTokenUseCase:
    """
    Exchange a stored refresh token for a new access/refresh pair (rotation).

    The presented token must be the user's current stored one; an expired
    record is deleted before failing so it cannot be presented again.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, token_provider: ITokenProvider) -> None:
        self.uow = uow
        self.token_provider = token_provider

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        token_provider: ITokenProvider = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(uow=uow, token_provider=token_provider)

    @Logger.io
    async def execute(self, *, refresh_token: str) -> TokenPair:
        try:
            pair = await self._rotate(refresh_token)
        except CustomBaseError as e:
            metrics.record_auth(action='refresh', result=e.code)
            raise
        metrics.record_auth(action='refresh', result='success')
        return pair

    async def _rotate(self, refresh_token: str) -> TokenPair:
        async with self.uow:
            stored = await self.uow.refresh_token_repo.get_by_token(token=refresh_token)
            if not stored or stored.id is None:
                raise InvalidRefreshTokenError()

            if stored.is_expired():
                await self.uow.refresh_token_repo.delete(refresh_token_id=stored.id)
                await self.uow.commit()
                raise ExpiredTokenError()

            identity = self.token_provider.validate(refresh_token)
            if identity.id != stored.user_id:
                raise InvalidRefreshTokenError()

            new_access_token = self.token_provider.issue_access_token(identity)
            new_refresh_token, expires_at = self.token_provider.issue_refresh_token(identity)
            await self.uow.refresh_token_repo.update(
                refresh_token=stored.rotate(token=new_refresh_token, expires_at=expires_at)
            )
            await self.uow.commit()

        return TokenPair(
            access_token=new_access_token,
            refresh_token=new_refresh_token,
            expires_in=self.token_provider.access_token_ttl_seconds,
        )
