"""
JWT issuance and verification (HS256, shared secret from settings).

Claims: sub (email), user_id, role, iat, exp and a random jti so two tokens
minted within the same second are still distinct. Access and refresh tokens
share the claim set and differ only in lifetime.
"""

from datetime import datetime, timedelta, timezone

import jwt
import uuid_utils

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ExpiredTokenError, InvalidTokenError
from src.service.booking.app.interface.i_token_provider import ITokenProvider
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.domain.value_object.identity import Identity


class JwtAuth(ITokenProvider):
    def __init__(
        self,
        *,
        secret: str | None = None,
        algorithm: str | None = None,
        access_token_expire_minutes: int | None = None,
        refresh_token_expire_days: int | None = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.access_token_ttl = timedelta(
            minutes=access_token_expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
        self.refresh_token_ttl = timedelta(
            days=refresh_token_expire_days or settings.REFRESH_TOKEN_EXPIRE_DAYS
        )

    @property
    def access_token_ttl_seconds(self) -> int:  # type: ignore[override]
        return int(self.access_token_ttl.total_seconds())

    def issue_access_token(self, identity: Identity) -> str:
        token, _ = self._encode(identity, ttl=self.access_token_ttl)
        return token

    def issue_refresh_token(self, identity: Identity) -> tuple[str, datetime]:
        return self._encode(identity, ttl=self.refresh_token_ttl)

    def validate(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['sub', 'exp', 'iat']},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        user_id = payload.get('user_id')
        role = payload.get('role')
        if not isinstance(user_id, int) or role not in UserRole._value2member_map_:
            raise InvalidTokenError()

        # Rebuild identity from the payload (no DB query)
        return Identity(id=user_id, email=payload['sub'], role=UserRole(role))

    def _encode(self, identity: Identity, *, ttl: timedelta) -> tuple[str, datetime]:
        now = datetime.now(timezone.utc)
        expires_at = now + ttl
        payload = {
            'sub': identity.email,
            'user_id': identity.id,
            'role': identity.role.value,
            'iat': now,
            'exp': expires_at,
            'jti': str(uuid_utils.uuid7()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm), expires_at
