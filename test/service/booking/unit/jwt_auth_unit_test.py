from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.platform.exception.exceptions import ExpiredTokenError, InvalidTokenError
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


SECRET = 'unit-test-secret-0123456789abcdef0123456789'


@pytest.mark.unit
class TestJwtAuth:
    @pytest.fixture
    def jwt_auth(self) -> JwtAuth:
        return JwtAuth(
            secret=SECRET,
            algorithm='HS256',
            access_token_expire_minutes=60,
            refresh_token_expire_days=7,
        )

    @pytest.fixture
    def identity(self) -> Identity:
        return Identity(id=7, email='student@test.com', role=UserRole.USER)

    def test_access_token_round_trips_identity(self, jwt_auth: JwtAuth, identity: Identity) -> None:
        token = jwt_auth.issue_access_token(identity)

        assert jwt_auth.validate(token) == identity

    def test_claims_contain_subject_and_expiry(self, jwt_auth: JwtAuth, identity: Identity) -> None:
        token = jwt_auth.issue_access_token(identity)

        payload = jwt.decode(token, SECRET, algorithms=['HS256'])
        assert payload['sub'] == 'student@test.com'
        assert payload['user_id'] == 7
        assert payload['role'] == 'USER'
        assert payload['exp'] - payload['iat'] == 60 * 60

    def test_refresh_token_lives_longer(self, jwt_auth: JwtAuth, identity: Identity) -> None:
        token, expires_at = jwt_auth.issue_refresh_token(identity)

        assert jwt_auth.validate(token) == identity
        remaining = expires_at - datetime.now(timezone.utc)
        assert timedelta(days=6, hours=23) < remaining <= timedelta(days=7)

    def test_tokens_issued_back_to_back_are_distinct(
        self, jwt_auth: JwtAuth, identity: Identity
    ) -> None:
        assert jwt_auth.issue_access_token(identity) != jwt_auth.issue_access_token(identity)

    def test_access_token_ttl_seconds(self, jwt_auth: JwtAuth) -> None:
        assert jwt_auth.access_token_ttl_seconds == 3600

    def test_expired_token_raises_expired(self) -> None:
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                'sub': 'student@test.com',
                'user_id': 7,
                'role': 'USER',
                'iat': now - timedelta(hours=2),
                'exp': now - timedelta(hours=1),
            },
            SECRET,
            algorithm='HS256',
        )

        with pytest.raises(ExpiredTokenError):
            JwtAuth(secret=SECRET).validate(token)

    def test_wrong_signature_raises_invalid(self, identity: Identity) -> None:
        token = JwtAuth(secret='another-secret-0123456789abcdef0123456').issue_access_token(identity)

        with pytest.raises(InvalidTokenError):
            JwtAuth(secret=SECRET).validate(token)

    def test_garbage_raises_invalid(self, jwt_auth: JwtAuth) -> None:
        with pytest.raises(InvalidTokenError):
            jwt_auth.validate('not.a.jwt')

    @pytest.mark.parametrize(
        'claims',
        [
            {'user_id': 7, 'role': 'USER'},  # no sub
            {'sub': 'student@test.com', 'role': 'USER'},  # no user_id
            {'sub': 'student@test.com', 'user_id': 7, 'role': 'SUPERUSER'},  # unknown role
        ],
    )
    def test_missing_or_bad_claims_raise_invalid(self, claims: dict) -> None:
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {**claims, 'iat': now, 'exp': now + timedelta(minutes=5)}, SECRET, algorithm='HS256'
        )

        with pytest.raises(InvalidTokenError):
            JwtAuth(secret=SECRET).validate(token)
