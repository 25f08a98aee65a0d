"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.booking.driven_adapter.model.class_model import (
    CategoryModel,
    ClassImageModel,
    ClassModel,
    TimeSlotModel,
)
from src.service.booking.driven_adapter.model.payment_model import PaymentModel
from src.service.booking.driven_adapter.model.refresh_token_model import RefreshTokenModel
from src.service.booking.driven_adapter.model.reservation_model import ReservationModel
from src.service.booking.driven_adapter.model.user_model import UserModel

__all__ = [
    'CategoryModel',
    'ClassImageModel',
    'ClassModel',
    'PaymentModel',
    'RefreshTokenModel',
    'ReservationModel',
    'TimeSlotModel',
    'UserModel',
]
