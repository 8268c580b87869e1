from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from restaurant_bot.application.ports.catalog import CatalogReaderPort
from restaurant_bot.application.ports.transaction_writer import TransactionWriterPort
from restaurant_bot.domain.entities.restaurant import MenuItem, Restaurant
from restaurant_bot.domain.entities.transaction import Order, Reservation
from restaurant_bot.infrastructure.database.sample_data import SAMPLE_MENU_ITEMS, SAMPLE_RESTAURANTS


class MemoryRestaurantDatabase(CatalogReaderPort, TransactionWriterPort):
    """Process-local data store used in dev and tests. Ids are assigned sequentially from 1."""

    def __init__(self) -> None:
        self.restaurants: list[Restaurant] = []
        self.menu_items: list[MenuItem] = []
        self.reservations: list[Reservation] = []
        self.orders: list[Order] = []

    def add_restaurant(
        self, name: str, cuisine: str | None = None, location: str | None = None, price_range: str | None = None
    ) -> Restaurant:
        restaurant = Restaurant(
            id=len(self.restaurants) + 1, name=name, cuisine=cuisine, location=location, price_range=price_range
        )
        self.restaurants.append(restaurant)
        return restaurant

    def add_menu_item(
        self, restaurant_id: int, name: str, description: str | None = None, price: Decimal = Decimal("0.00")
    ) -> MenuItem:
        item = MenuItem(
            id=len(self.menu_items) + 1,
            restaurant_id=restaurant_id,
            name=name,
            description=description,
            price=price,
        )
        self.menu_items.append(item)
        return item

    def seed_sample_data(self) -> None:
        if self.restaurants:
            return
        ids = [self.add_restaurant(*row).id for row in SAMPLE_RESTAURANTS]
        for position, name, description, price in SAMPLE_MENU_ITEMS:
            self.add_menu_item(ids[position - 1], name, description, price)

    async def list_restaurants(self, limit: int) -> list[Restaurant]:
        return list(self.restaurants[:limit])

    async def list_menu_items(self, restaurant_id: int) -> list[MenuItem]:
        return [item for item in self.menu_items if item.restaurant_id == restaurant_id]

    async def create_reservation(
        self, restaurant_id: int, user_id: str, party_size: int, reservation_time: datetime
    ) -> int:
        reservation = Reservation(
            id=len(self.reservations) + 1,
            restaurant_id=restaurant_id,
            user_id=user_id,
            reservation_time=reservation_time,
            party_size=party_size,
        )
        self.reservations.append(reservation)
        return reservation.id

    async def create_order(self, restaurant_id: int, user_id: str, status: str) -> int:
        order = Order(id=len(self.orders) + 1, restaurant_id=restaurant_id, user_id=user_id, status=status)
        self.orders.append(order)
        return order.id
