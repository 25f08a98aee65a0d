from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import DomainError, ForbiddenError, UserNotFoundError
from src.service.booking.app.command.delete_user_use_case import DeleteUserUseCase
from src.service.booking.app.command.update_user_name_use_case import UpdateUserNameUseCase
from src.service.booking.app.query.get_user_use_case import GetUserUseCase
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.domain.value_object.identity import Identity


STUDENT = Identity(id=2, email='student@test.com')
ADMIN = Identity(id=9, email='admin@test.com', role=UserRole.ADMIN)


@pytest.mark.unit
class TestGetUser:
    @pytest.mark.asyncio
    async def test_user_can_read_own_profile(self, student: UserEntity) -> None:
        repo = AsyncMock()
        repo.get_by_id.return_value = student

        user = await GetUserUseCase(user_query_repo=repo).get_by_id(identity=STUDENT, user_id=2)

        assert user.email == 'student@test.com'

    @pytest.mark.asyncio
    async def test_user_cannot_read_other_profile(self) -> None:
        repo = AsyncMock()

        with pytest.raises(ForbiddenError):
            await GetUserUseCase(user_query_repo=repo).get_by_id(identity=STUDENT, user_id=3)
        repo.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_reading_missing_user_gets_not_found(self) -> None:
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await GetUserUseCase(user_query_repo=repo).get_by_id(identity=ADMIN, user_id=404)


@pytest.mark.unit
class TestUpdateUserName:
    @pytest.fixture
    def use_case(self, mock_uow: AsyncMock, student: UserEntity) -> UpdateUserNameUseCase:
        mock_uow.user_query_repo.get_by_id.return_value = student
        mock_uow.user_command_repo.update.side_effect = lambda *, user: user
        return UpdateUserNameUseCase(uow=mock_uow)

    @pytest.mark.asyncio
    async def test_rename_own_profile(
        self, use_case: UpdateUserNameUseCase, mock_uow: AsyncMock
    ) -> None:
        updated = await use_case.execute(identity=STUDENT, user_id=2, name='Renamed')

        assert updated.name == 'Renamed'
        assert updated.updated_at is not None
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(
        self, use_case: UpdateUserNameUseCase, mock_uow: AsyncMock
    ) -> None:
        with pytest.raises(DomainError):
            await use_case.execute(identity=STUDENT, user_id=2, name='   ')
        mock_uow.user_command_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_may_rename_anyone(
        self, use_case: UpdateUserNameUseCase, mock_uow: AsyncMock, student: UserEntity
    ) -> None:
        mock_uow.user_query_repo.get_by_id.return_value = attrs.evolve(student, id=5)

        updated = await use_case.execute(identity=ADMIN, user_id=5, name='By Admin')

        assert updated.id == 5
        assert updated.name == 'By Admin'

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(
        self, use_case: UpdateUserNameUseCase, mock_uow: AsyncMock
    ) -> None:
        with pytest.raises(ForbiddenError):
            await use_case.execute(identity=STUDENT, user_id=5, name='Nope')
        mock_uow.user_query_repo.get_by_id.assert_not_awaited()


@pytest.mark.unit
class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_admin_deletes_user(self, mock_uow: AsyncMock) -> None:
        await DeleteUserUseCase(uow=mock_uow).execute(identity=ADMIN, user_id=2)

        mock_uow.user_command_repo.delete.assert_awaited_once_with(user_id=2)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_non_admin_cannot_delete_even_self(self, mock_uow: AsyncMock) -> None:
        with pytest.raises(ForbiddenError):
            await DeleteUserUseCase(uow=mock_uow).execute(identity=STUDENT, user_id=2)
        mock_uow.user_command_repo.delete.assert_not_awaited()
