from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from src.service.booking.domain.entity.user_entity import NAME_MAX_LENGTH, UserEntity
from src.service.booking.driving_adapter.http_controller.schema.base_schema import CamelModel


class UserResponse(CamelModel):
    id: int
    email: EmailStr
    name: str
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'email': 'student@example.com',
                'name': 'Student Kim',
                'role': 'USER',
                'createdAt': '2025-01-10T10:30:00Z',
                'updatedAt': '2025-01-10T10:30:00Z',
            }
        }
    }

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserResponse':
        return cls(
            id=user.id or 0,
            email=user.email,
            name=user.name,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpdateUserRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
