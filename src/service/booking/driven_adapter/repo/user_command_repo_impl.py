from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import (
    ConflictError,
    DuplicateEmailError,
    UserNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.driven_adapter.model.refresh_token_model import RefreshTokenModel
from src.service.booking.driven_adapter.model.user_model import UserModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo
from src.service.booking.driven_adapter.repo.user_mapper import user_model_to_entity


class UserCommandRepoImpl(SessionAwareRepo, IUserCommandRepo):
    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        async with self._get_session() as session:
            user_model = UserModel(
                email=user.email,
                hashed_password=user.hashed_password,
                name=user.name,
                role=user.role.value,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            session.add(user_model)
            try:
                await session.flush()
            except IntegrityError as e:
                # Lost the race against a concurrent signup with the same email
                raise DuplicateEmailError() from e

            return user_model_to_entity(user_model)

    @Logger.io
    async def update(self, *, user: UserEntity) -> UserEntity:
        async with self._get_session() as session:
            user_model = await session.get(UserModel, user.id)
            if not user_model:
                raise UserNotFoundError()
            user_model.name = user.name
            user_model.updated_at = user.updated_at
            await session.flush()
            return user_model_to_entity(user_model)

    @Logger.io
    async def delete(self, *, user_id: int) -> None:
        async with self._get_session() as session:
            await session.execute(
                delete(RefreshTokenModel).where(RefreshTokenModel.user_id == user_id)
            )
            try:
                result = await session.execute(delete(UserModel).where(UserModel.id == user_id))
            except IntegrityError as e:
                raise ConflictError('User still owns classes or reservations') from e
            if not result.rowcount:
                raise UserNotFoundError()
