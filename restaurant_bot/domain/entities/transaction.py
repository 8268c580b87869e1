from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


ORDER_STATUS_PENDING = "Pending"


@dataclass(frozen=True)
class Reservation:
    id: int
    restaurant_id: int
    user_id: str
    reservation_time: datetime
    party_size: int


@dataclass(frozen=True)
class Order:
    id: int
    restaurant_id: int
    user_id: str
    status: str = ORDER_STATUS_PENDING
