"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import (
    login_use_case,
    refresh_token_use_case,
    sign_up_use_case,
)
from src.service.booking.app.query import (
    get_teacher_schedule_use_case,
    get_user_use_case,
    list_classes_use_case,
    list_my_reservations_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    sign_up_use_case,
    login_use_case,
    refresh_token_use_case,
    get_user_use_case,
    list_classes_use_case,
    list_my_reservations_use_case,
    get_teacher_schedule_use_case,
]
