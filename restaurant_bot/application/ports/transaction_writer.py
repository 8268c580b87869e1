from abc import ABC, abstractmethod
from datetime import datetime


class TransactionWriterPort(ABC):
    @abstractmethod
    async def create_reservation(
        self, restaurant_id: int, user_id: str, party_size: int, reservation_time: datetime
    ) -> int:
        raise NotImplementedError

    @abstractmethod
    async def create_order(self, restaurant_id: int, user_id: str, status: str) -> int:
        raise NotImplementedError
