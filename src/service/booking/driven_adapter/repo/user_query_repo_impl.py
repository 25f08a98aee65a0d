from typing import Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.driven_adapter.model.user_model import UserModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo
from src.service.booking.driven_adapter.repo.user_mapper import user_model_to_entity


class UserQueryRepoImpl(SessionAwareRepo, IUserQueryRepo):
    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        async with self._get_session() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user_model = result.scalar_one_or_none()
            return user_model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        async with self._get_session() as session:
            user_model = await session.get(UserModel, user_id)
            return user_model_to_entity(user_model) if user_model else None

    @Logger.io
    async def exists_by_email(self, *, email: str) -> bool:
        async with self._get_session() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None
