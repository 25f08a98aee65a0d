"""
Request-scoped caller identity rebuilt from verified token claims.

Capability checks are plain functions over the value so authorization never
depends on the persisted user entity.
"""

import attrs

from src.service.booking.domain.enum.user_role import UserRole


@attrs.define(frozen=True)
class Identity:
    id: int
    email: str
    role: UserRole = UserRole.USER


def is_admin(identity: Identity) -> bool:
    return identity.role == UserRole.ADMIN


def can_manage_user(identity: Identity, user_id: int) -> bool:
    return identity.id == user_id or is_admin(identity)
