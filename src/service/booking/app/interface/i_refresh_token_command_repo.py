from abc import ABC, abstractmethod
from typing import Optional

from src.service.booking.domain.entity.refresh_token_entity import RefreshToken


class IRefreshTokenCommandRepo(ABC):
    @abstractmethod
    async def get_by_token(self, *, token: str) -> Optional[RefreshToken]:
        pass

    @abstractmethod
    async def replace_for_user(self, *, refresh_token: RefreshToken) -> RefreshToken:
        """Store the token as the user's only live refresh token"""
        pass

    @abstractmethod
    async def update(self, *, refresh_token: RefreshToken) -> RefreshToken:
        pass

    @abstractmethod
    async def delete(self, *, refresh_token_id: int) -> None:
        pass

    @abstractmethod
    async def delete_by_user_id(self, *, user_id: int) -> None:
        pass
