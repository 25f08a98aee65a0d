from abc import ABC, abstractmethod

from src.service.booking.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        """Raises DuplicateEmailError when the unique email index rejects the row"""
        pass

    @abstractmethod
    async def update(self, *, user: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def delete(self, *, user_id: int) -> None:
        pass
