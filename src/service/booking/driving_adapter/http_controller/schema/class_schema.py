from datetime import datetime
from typing import List, Optional

from src.service.booking.domain.entity.class_entity import ClassOffering
from src.service.booking.driving_adapter.http_controller.schema.base_schema import CamelModel


class CategoryResponse(CamelModel):
    id: int
    name: str


class ClassImageResponse(CamelModel):
    image_id: int
    image_url: str
    is_representative: bool


class TimeSlotResponse(CamelModel):
    time_id: int
    start_at: datetime
    end_at: datetime


class ClassSummaryResponse(CamelModel):
    class_id: int
    class_name: str
    teacher_id: int
    teacher_name: str
    category: Optional[CategoryResponse] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    max_capacity: int
    price: int
    representative_image_url: Optional[str] = None

    @classmethod
    def from_entity(cls, offering: ClassOffering) -> 'ClassSummaryResponse':
        return cls(
            class_id=offering.id,
            class_name=offering.class_name,
            teacher_id=offering.teacher_id,
            teacher_name=offering.teacher_name,
            category=(
                CategoryResponse(id=offering.category.id, name=offering.category.name)
                if offering.category
                else None
            ),
            location=offering.location,
            latitude=offering.latitude,
            longitude=offering.longitude,
            max_capacity=offering.max_capacity,
            price=offering.price,
            representative_image_url=offering.representative_image_url,
        )


class ClassDetailResponse(ClassSummaryResponse):
    class_detail: Optional[str] = None
    curriculum: Optional[str] = None
    included: Optional[str] = None
    required: Optional[str] = None
    time_slots: List[TimeSlotResponse] = []
    images: List[ClassImageResponse] = []

    @classmethod
    def from_entity(cls, offering: ClassOffering) -> 'ClassDetailResponse':
        summary = ClassSummaryResponse.from_entity(offering)
        return cls(
            **summary.model_dump(),
            class_detail=offering.class_detail,
            curriculum=offering.curriculum,
            included=offering.included,
            required=offering.required,
            time_slots=[
                TimeSlotResponse(time_id=slot.id, start_at=slot.start_at, end_at=slot.end_at)
                for slot in offering.time_slots
            ],
            # Representative image first, otherwise stored order
            images=[
                ClassImageResponse(
                    image_id=image.id,
                    image_url=image.image_url,
                    is_representative=image.is_representative,
                )
                for image in sorted(offering.images, key=lambda i: not i.is_representative)
            ],
        )
