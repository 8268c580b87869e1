from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Restaurant:
    id: int
    name: str
    cuisine: str | None = None
    location: str | None = None
    price_range: str | None = None  # "$", "$$", "$$$"


@dataclass(frozen=True)
class MenuItem:
    id: int
    restaurant_id: int
    name: str
    description: str | None = None
    price: Decimal = Decimal("0.00")
