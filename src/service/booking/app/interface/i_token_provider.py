from abc import ABC, abstractmethod
from datetime import datetime

from src.service.booking.domain.value_object.identity import Identity


class ITokenProvider(ABC):
    """Issues and verifies signed bearer tokens"""

    access_token_ttl_seconds: int

    @abstractmethod
    def issue_access_token(self, identity: Identity) -> str:
        pass

    @abstractmethod
    def issue_refresh_token(self, identity: Identity) -> tuple[str, datetime]:
        """Returns the token and its expiry"""
        pass

    @abstractmethod
    def validate(self, token: str) -> Identity:
        """Raises InvalidTokenError / ExpiredTokenError"""
        pass
