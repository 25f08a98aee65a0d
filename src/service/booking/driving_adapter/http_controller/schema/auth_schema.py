from datetime import datetime

from pydantic import EmailStr, Field, SecretStr, field_validator

from src.service.booking.domain.entity.user_entity import NAME_MAX_LENGTH
from src.service.booking.driving_adapter.http_controller.schema.base_schema import CamelModel


# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


class SignUpRequest(CamelModel):
    email: EmailStr
    password: SecretStr = Field(..., min_length=8, max_length=30)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)

    model_config = {
        'json_schema_extra': {
            'example': {
                'email': 'student@example.com',
                'password': 'P@ssw0rd',
                'name': 'Student Kim',
            }
        }
    }

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value().encode('utf-8')) > PASSWORD_MAX_BYTES:
            raise ValueError(f'must be at most {PASSWORD_MAX_BYTES} bytes')
        return v

    def __repr__(self) -> str:
        return f"SignUpRequest(email='{self.email}', password='********', name='{self.name}')"


class SignUpResponse(CamelModel):
    id: int
    email: EmailStr
    name: str
    created_at: datetime


class LoginRequest(CamelModel):
    email: EmailStr
    password: SecretStr

    model_config = {
        'json_schema_extra': {'example': {'email': 'student@example.com', 'password': 'P@ssw0rd'}}
    }


class LoginResponse(CamelModel):
    access_token: str
    refresh_token: str
    email: EmailStr
    name: str


class RefreshTokenRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


class RefreshTokenResponse(CamelModel):
    access_token: str
    refresh_token: str
    token_type: str = 'Bearer'
    expires_in: int


class LogoutResponse(CamelModel):
    message: str
    logout_at: datetime


class IdentityResponse(CamelModel):
    id: int
    email: str
    role: str
