"""
Shared fakes for engine tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from restaurant_bot.application.exceptions import StateStoreError, StoreError
from restaurant_bot.application.use_cases.dialog_engine import DialogEngine
from restaurant_bot.infrastructure.database.memory_db import MemoryRestaurantDatabase
from restaurant_bot.infrastructure.store.memory_store import MemorySessionStore

FIXED_NOW = datetime(2024, 5, 17, 19, 30, tzinfo=timezone.utc)


def build_engine(db: MemoryRestaurantDatabase | None = None, sessions=None, **kwargs):
    if db is None:
        db = MemoryRestaurantDatabase()
        db.seed_sample_data()
    sessions = sessions or MemorySessionStore()
    engine = DialogEngine(catalog=db, writer=db, sessions=sessions, clock=lambda: FIXED_NOW, **kwargs)
    return engine, db, sessions


def build_large_catalog(count: int) -> MemoryRestaurantDatabase:
    db = MemoryRestaurantDatabase()
    for i in range(1, count + 1):
        restaurant = db.add_restaurant(f"Place {i}", "Fusion", f"Block {i}", "$$")
        db.add_menu_item(restaurant.id, f"Dish {i}", "House special", Decimal("10.50"))
    return db


class FailingCatalog(MemoryRestaurantDatabase):
    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.seed_sample_data()
        self._fail_on = fail_on

    async def list_restaurants(self, limit: int):
        if self._fail_on == "restaurants":
            raise StoreError("catalog unavailable")
        return await super().list_restaurants(limit)

    async def list_menu_items(self, restaurant_id: int):
        if self._fail_on == "menu":
            raise StoreError("catalog unavailable")
        return await super().list_menu_items(restaurant_id)

    async def create_reservation(self, restaurant_id, user_id, party_size, reservation_time):
        if self._fail_on == "write":
            raise StoreError("insert failed")
        return await super().create_reservation(restaurant_id, user_id, party_size, reservation_time)

    async def create_order(self, restaurant_id, user_id, status):
        if self._fail_on == "write":
            raise StoreError("insert failed")
        return await super().create_order(restaurant_id, user_id, status)


class FailingWriteSessionStore(MemorySessionStore):
    async def set_state(self, conversation_id, state):
        raise StateStoreError("session store down")
