from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from src.platform.database.orm_db_setting import as_utc
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.booking.domain.entity.class_entity import (
    Category,
    ClassImage,
    ClassOffering,
    TimeSlot,
)
from src.service.booking.driven_adapter.model.class_model import ClassModel, TimeSlotModel
from src.service.booking.driven_adapter.repo.base_repo import SessionAwareRepo


class CatalogQueryRepoImpl(SessionAwareRepo, ICatalogQueryRepo):
    @staticmethod
    def _to_time_slot(model: TimeSlotModel, class_model: ClassModel) -> TimeSlot:
        return TimeSlot(
            id=model.id,
            class_id=model.class_id,
            start_at=as_utc(model.start_at),  # type: ignore[arg-type]
            end_at=as_utc(model.end_at),  # type: ignore[arg-type]
            max_capacity=class_model.max_capacity,
            teacher_id=class_model.teacher_id,
        )

    @classmethod
    def _to_class(cls, model: ClassModel, *, with_details: bool = False) -> ClassOffering:
        return ClassOffering(
            id=model.id,
            teacher_id=model.teacher_id,
            teacher_name=model.teacher.name,
            class_name=model.class_name,
            max_capacity=model.max_capacity,
            price=model.price,
            location=model.location,
            latitude=model.latitude,
            longitude=model.longitude,
            class_detail=model.class_detail,
            curriculum=model.curriculum,
            included=model.included,
            required=model.required,
            category=Category(id=model.category.id, name=model.category.name)
            if model.category
            else None,
            time_slots=[cls._to_time_slot(slot, model) for slot in model.time_slots]
            if with_details
            else [],
            images=[
                ClassImage(
                    id=image.id,
                    image_url=image.image_url,
                    is_representative=image.is_representative,
                )
                for image in model.images
            ],
        )

    @Logger.io
    async def list_classes(self) -> List[ClassOffering]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ClassModel).options(selectinload(ClassModel.images)).order_by(ClassModel.id)
            )
            return [self._to_class(model) for model in result.unique().scalars().all()]

    @Logger.io
    async def get_class_detail(self, *, class_id: int) -> Optional[ClassOffering]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ClassModel)
                .where(ClassModel.id == class_id)
                .options(selectinload(ClassModel.time_slots), selectinload(ClassModel.images))
            )
            model = result.unique().scalar_one_or_none()
            return self._to_class(model, with_details=True) if model else None

    @Logger.io
    async def get_time_slot(self, *, time_id: int) -> Optional[TimeSlot]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TimeSlotModel, ClassModel)
                .join(ClassModel, ClassModel.id == TimeSlotModel.class_id)
                .where(TimeSlotModel.id == time_id)
            )
            row = result.unique().first()
            if row is None:
                return None
            slot_model, class_model = row
            return self._to_time_slot(slot_model, class_model)
