"""
Unit tests for SignUp / Login / RefreshToken / Logout use cases

Real bcrypt (minimum cost) and real JWT signing; repositories are mocked.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import attrs
import pytest
from pydantic import SecretStr

from src.platform.exception.exceptions import (
    DuplicateEmailError,
    ExpiredTokenError,
    InvalidPasswordError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    UserNotFoundError,
)
from src.service.booking.app.command.login_use_case import LoginUseCase
from src.service.booking.app.command.logout_use_case import LogoutUseCase
from src.service.booking.app.command.refresh_token_use_case import RefreshTokenUseCase
from src.service.booking.app.command.sign_up_use_case import SignUpUseCase
from src.service.booking.domain.entity.refresh_token_entity import RefreshToken
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


PASSWORD = SecretStr('P@ssw0rd')


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth(secret='unit-test-secret-0123456789abcdef0123456789')


@pytest.fixture
def existing_user(password_hasher: BcryptPasswordHasher) -> UserEntity:
    user = UserEntity.create(
        email='student@test.com',
        name='Student',
        plain_password=PASSWORD,
        password_hasher=password_hasher,
    )
    return attrs.evolve(user, id=2)


@pytest.mark.unit
class TestSignUp:
    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(
        self, mock_uow: AsyncMock, password_hasher: BcryptPasswordHasher
    ) -> None:
        # Arrange
        mock_uow.user_query_repo.exists_by_email.return_value = False
        mock_uow.user_command_repo.create.side_effect = lambda *, user: attrs.evolve(user, id=1)
        use_case = SignUpUseCase(uow=mock_uow, password_hasher=password_hasher)

        # Act
        user = await use_case.execute(email='new@test.com', password=PASSWORD, name='New')

        # Assert
        assert user.id == 1
        assert user.role == UserRole.USER
        assert user.hashed_password != PASSWORD.get_secret_value()
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected_before_insert(
        self, mock_uow: AsyncMock, password_hasher: BcryptPasswordHasher
    ) -> None:
        mock_uow.user_query_repo.exists_by_email.return_value = True
        use_case = SignUpUseCase(uow=mock_uow, password_hasher=password_hasher)

        with pytest.raises(DuplicateEmailError):
            await use_case.execute(email='dup@test.com', password=PASSWORD, name='Dup')
        mock_uow.user_command_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestLogin:
    @pytest.fixture
    def use_case(
        self, mock_uow: AsyncMock, password_hasher: BcryptPasswordHasher, jwt_auth: JwtAuth
    ) -> LoginUseCase:
        return LoginUseCase(uow=mock_uow, password_hasher=password_hasher, token_provider=jwt_auth)

    @pytest.mark.asyncio
    async def test_issues_tokens_and_stores_refresh_token(
        self,
        use_case: LoginUseCase,
        mock_uow: AsyncMock,
        existing_user: UserEntity,
        jwt_auth: JwtAuth,
    ) -> None:
        # Arrange
        mock_uow.user_query_repo.get_by_email.return_value = existing_user

        # Act
        result = await use_case.execute(email='student@test.com', password=PASSWORD)

        # Assert
        assert result.email == 'student@test.com'
        assert result.name == 'Student'
        assert jwt_auth.validate(result.access_token).id == 2
        stored = mock_uow.refresh_token_repo.replace_for_user.call_args.kwargs['refresh_token']
        assert stored.user_id == 2
        assert stored.token == result.refresh_token
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_email_raises_user_not_found(
        self, use_case: LoginUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.user_query_repo.get_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await use_case.execute(email='nobody@test.com', password=PASSWORD)

    @pytest.mark.asyncio
    async def test_wrong_password_raises_invalid_password(
        self, use_case: LoginUseCase, mock_uow: AsyncMock, existing_user: UserEntity
    ) -> None:
        mock_uow.user_query_repo.get_by_email.return_value = existing_user

        with pytest.raises(InvalidPasswordError):
            await use_case.execute(email='student@test.com', password=SecretStr('wrong-pass'))
        mock_uow.refresh_token_repo.replace_for_user.assert_not_awaited()


@pytest.mark.unit
class TestRefreshToken:
    @pytest.fixture
    def identity(self) -> Identity:
        return Identity(id=2, email='student@test.com')

    @pytest.fixture
    def use_case(self, mock_uow: AsyncMock, jwt_auth: JwtAuth) -> RefreshTokenUseCase:
        return RefreshTokenUseCase(uow=mock_uow, token_provider=jwt_auth)

    @pytest.mark.asyncio
    async def test_rotates_stored_token(
        self,
        use_case: RefreshTokenUseCase,
        mock_uow: AsyncMock,
        jwt_auth: JwtAuth,
        identity: Identity,
    ) -> None:
        # Arrange
        old_token, expires_at = jwt_auth.issue_refresh_token(identity)
        mock_uow.refresh_token_repo.get_by_token.return_value = RefreshToken(
            id=5, user_id=2, token=old_token, expires_at=expires_at
        )

        # Act
        pair = await use_case.execute(refresh_token=old_token)

        # Assert
        assert pair.token_type == 'Bearer'
        assert pair.expires_in == jwt_auth.access_token_ttl_seconds
        assert pair.refresh_token != old_token
        assert jwt_auth.validate(pair.access_token) == identity
        rotated = mock_uow.refresh_token_repo.update.call_args.kwargs['refresh_token']
        assert rotated.id == 5
        assert rotated.token == pair.refresh_token
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_token_raises_invalid_refresh_token(
        self, use_case: RefreshTokenUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.refresh_token_repo.get_by_token.return_value = None

        with pytest.raises(InvalidRefreshTokenError):
            await use_case.execute(refresh_token='never-issued')

    @pytest.mark.asyncio
    async def test_expired_record_is_deleted_then_rejected(
        self, use_case: RefreshTokenUseCase, mock_uow: AsyncMock
    ) -> None:
        # Arrange
        mock_uow.refresh_token_repo.get_by_token.return_value = RefreshToken(
            id=5,
            user_id=2,
            token='old',
            expires_at=datetime.now(timezone.utc) - timedelta(seconds=1),
        )

        # Act & Assert
        with pytest.raises(ExpiredTokenError):
            await use_case.execute(refresh_token='old')
        mock_uow.refresh_token_repo.delete.assert_awaited_once_with(refresh_token_id=5)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_bad_signature_raises_invalid_token(
        self, use_case: RefreshTokenUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.refresh_token_repo.get_by_token.return_value = RefreshToken(
            id=5,
            user_id=2,
            token='tampered',
            expires_at=datetime.now(timezone.utc) + timedelta(days=1),
        )

        with pytest.raises(InvalidTokenError):
            await use_case.execute(refresh_token='tampered')
        mock_uow.refresh_token_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_token_of_another_user_is_rejected(
        self, use_case: RefreshTokenUseCase, mock_uow: AsyncMock, jwt_auth: JwtAuth
    ) -> None:
        token, expires_at = jwt_auth.issue_refresh_token(Identity(id=3, email='other@test.com'))
        mock_uow.refresh_token_repo.get_by_token.return_value = RefreshToken(
            id=5, user_id=2, token=token, expires_at=expires_at
        )

        with pytest.raises(InvalidRefreshTokenError):
            await use_case.execute(refresh_token=token)


@pytest.mark.unit
class TestLogout:
    @pytest.mark.asyncio
    async def test_deletes_refresh_token_of_caller(self, mock_uow: AsyncMock) -> None:
        use_case = LogoutUseCase(uow=mock_uow)

        logout_at = await use_case.execute(identity=Identity(id=2, email='student@test.com'))

        assert logout_at.tzinfo is not None
        mock_uow.refresh_token_repo.delete_by_user_id.assert_awaited_once_with(user_id=2)
        mock_uow.commit.assert_awaited_once()
