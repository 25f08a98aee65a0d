from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.class_entity import ClassOffering, TimeSlot


class ICatalogQueryRepo(ABC):
    @abstractmethod
    async def list_classes(self) -> List[ClassOffering]:
        pass

    @abstractmethod
    async def get_class_detail(self, *, class_id: int) -> Optional[ClassOffering]:
        """Class with category, images and time slots ordered by start"""
        pass

    @abstractmethod
    async def get_time_slot(self, *, time_id: int) -> Optional[TimeSlot]:
        """Time slot with the owning class's capacity and teacher"""
        pass
