"""
Catalog entities: classes offered by teachers and their concrete time slots.

The catalog is read-only for this service; rows are created by the seed
script or the admin database tooling.
"""

from datetime import datetime
from typing import List, Optional

import attrs


@attrs.define(frozen=True)
class Category:
    id: int
    name: str


@attrs.define(frozen=True)
class ClassImage:
    id: int
    image_url: str
    is_representative: bool = False


@attrs.define(frozen=True)
class TimeSlot:
    id: int
    class_id: int
    start_at: datetime
    end_at: datetime
    # Denormalized from the owning class so the booking path needs one lookup
    max_capacity: int = 0
    teacher_id: Optional[int] = None

    def is_upcoming(self, now: datetime) -> bool:
        return self.start_at > now


@attrs.define(frozen=True)
class ClassOffering:
    id: int
    teacher_id: int
    teacher_name: str
    class_name: str
    max_capacity: int
    price: int
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    class_detail: Optional[str] = None
    curriculum: Optional[str] = None
    included: Optional[str] = None
    required: Optional[str] = None
    category: Optional[Category] = None
    time_slots: List[TimeSlot] = attrs.field(factory=list)
    images: List[ClassImage] = attrs.field(factory=list)

    @property
    def representative_image_url(self) -> Optional[str]:
        for image in self.images:
            if image.is_representative:
                return image.image_url
        return self.images[0].image_url if self.images else None
