from datetime import datetime, timezone
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import DomainError
from src.service.booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.booking.domain.enum.user_role import UserRole


NAME_MAX_LENGTH = 50


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls, *, email: str, name: str, plain_password: SecretStr, password_hasher: IPasswordHasher
    ) -> 'UserEntity':
        """New accounts always start as USER; ADMIN is granted out of band."""
        cls.validate_name(name)
        now = datetime.now(timezone.utc)
        return cls(
            email=email,
            name=name,
            hashed_password=password_hasher.hash_password(plain_password=plain_password),
            role=UserRole.USER,
            created_at=now,
            updated_at=now,
        )

    def rename(self, name: str) -> 'UserEntity':
        self.validate_name(name)
        return attrs.evolve(self, name=name, updated_at=datetime.now(timezone.utc))

    def check_password(self, plain_password: SecretStr, password_hasher: IPasswordHasher) -> bool:
        return password_hasher.verify_password(
            plain_password=plain_password, hashed_password=self.hashed_password
        )

    @staticmethod
    def validate_name(name: str) -> None:
        if not name or not name.strip():
            raise DomainError('Name must not be blank')
        if len(name) > NAME_MAX_LENGTH:
            raise DomainError(f'Name must be at most {NAME_MAX_LENGTH} characters')
