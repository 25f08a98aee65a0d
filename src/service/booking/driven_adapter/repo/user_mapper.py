from src.platform.database.orm_db_setting import as_utc
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.driven_adapter.model.user_model import UserModel


def user_model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        name=user_model.name,
        hashed_password=user_model.hashed_password,
        role=UserRole(user_model.role),
        created_at=as_utc(user_model.created_at),
        updated_at=as_utc(user_model.updated_at),
    )
