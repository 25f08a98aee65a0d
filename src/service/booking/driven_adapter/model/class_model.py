from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base, utc_now


if TYPE_CHECKING:
    from src.service.booking.driven_adapter.model.user_model import UserModel


class CategoryModel(Base):
    __tablename__ = 'category'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class ClassModel(Base):
    __tablename__ = 'class_offering'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    teacher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=False, index=True
    )
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('category.id'), nullable=True
    )
    class_name: Mapped[str] = mapped_column(String(255), nullable=False)
    class_detail: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    curriculum: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    included: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    required: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )

    teacher: Mapped['UserModel'] = relationship('UserModel', lazy='joined', viewonly=True)
    category: Mapped[Optional['CategoryModel']] = relationship(
        'CategoryModel', lazy='joined', viewonly=True
    )
    time_slots: Mapped[List['TimeSlotModel']] = relationship(
        'TimeSlotModel',
        order_by='TimeSlotModel.start_at',
        lazy='raise',
        viewonly=True,
    )
    images: Mapped[List['ClassImageModel']] = relationship(
        'ClassImageModel',
        order_by=lambda: (ClassImageModel.is_representative.desc(), ClassImageModel.id),
        lazy='raise',
        viewonly=True,
    )


class ClassImageModel(Base):
    __tablename__ = 'class_image'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    class_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('class_offering.id', ondelete='CASCADE'), nullable=False, index=True
    )
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    is_representative: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class TimeSlotModel(Base):
    __tablename__ = 'time_slot'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    class_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('class_offering.id', ondelete='CASCADE'), nullable=False, index=True
    )
    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    class_offering: Mapped['ClassModel'] = relationship('ClassModel', lazy='joined', viewonly=True)
