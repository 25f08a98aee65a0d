from abc import ABC, abstractmethod

from src.service.booking.domain.entity.payment_entity import Payment


class IPaymentCommandRepo(ABC):
    @abstractmethod
    async def exists_by_order_id(self, *, order_id: str) -> bool:
        pass

    @abstractmethod
    async def create(self, *, payment: Payment) -> Payment:
        pass
