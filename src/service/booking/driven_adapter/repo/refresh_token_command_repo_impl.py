from typing import Optional

from sqlalchemy import delete, select

from src.platform.database.orm_db_setting import as_utc
from src.platform.exception.exceptions import InvalidRefreshTokenError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_refresh_token_command_repo import (
    IRefreshTokenCommandRepo,
)
from src.service.booking.domain.entity.refresh_token_entity import RefreshToken
from src.service.booking.driven_adapter.model.refresh_token_model import RefreshTokenModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo


class RefreshTokenCommandRepoImpl(SessionAwareRepo, IRefreshTokenCommandRepo):
    @staticmethod
    def _to_entity(model: RefreshTokenModel) -> RefreshToken:
        return RefreshToken(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            expires_at=as_utc(model.expires_at),  # type: ignore[arg-type]
            created_at=as_utc(model.created_at),
        )

    @Logger.io
    async def get_by_token(self, *, token: str) -> Optional[RefreshToken]:
        async with self._get_session() as session:
            result = await session.execute(
                select(RefreshTokenModel).where(RefreshTokenModel.token == token)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

    @Logger.io
    async def replace_for_user(self, *, refresh_token: RefreshToken) -> RefreshToken:
        async with self._get_session() as session:
            await session.execute(
                delete(RefreshTokenModel).where(
                    RefreshTokenModel.user_id == refresh_token.user_id
                )
            )
            model = RefreshTokenModel(
                user_id=refresh_token.user_id,
                token=refresh_token.token,
                expires_at=refresh_token.expires_at,
            )
            session.add(model)
            await session.flush()
            return self._to_entity(model)

    @Logger.io
    async def update(self, *, refresh_token: RefreshToken) -> RefreshToken:
        async with self._get_session() as session:
            model = await session.get(RefreshTokenModel, refresh_token.id)
            if not model:
                raise InvalidRefreshTokenError()
            model.token = refresh_token.token
            model.expires_at = refresh_token.expires_at
            await session.flush()
            return self._to_entity(model)

    @Logger.io
    async def delete(self, *, refresh_token_id: int) -> None:
        async with self._get_session() as session:
            await session.execute(
                delete(RefreshTokenModel).where(RefreshTokenModel.id == refresh_token_id)
            )

    @Logger.io
    async def delete_by_user_id(self, *, user_id: int) -> None:
        async with self._get_session() as session:
            await session.execute(
                delete(RefreshTokenModel).where(RefreshTokenModel.user_id == user_id)
            )
