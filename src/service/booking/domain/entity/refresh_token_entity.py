from datetime import datetime, timezone
from typing import Optional

import attrs


@attrs.define
class RefreshToken:
    user_id: int
    token: str = attrs.field(repr=False)
    expires_at: datetime
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or datetime.now(timezone.utc))

    def rotate(self, *, token: str, expires_at: datetime) -> 'RefreshToken':
        return attrs.evolve(self, token=token, expires_at=expires_at)
