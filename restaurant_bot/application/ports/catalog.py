from abc import ABC, abstractmethod

from restaurant_bot.domain.entities.restaurant import MenuItem, Restaurant


class CatalogReaderPort(ABC):
    @abstractmethod
    async def list_restaurants(self, limit: int) -> list[Restaurant]:
        raise NotImplementedError

    @abstractmethod
    async def list_menu_items(self, restaurant_id: int) -> list[MenuItem]:
        raise NotImplementedError
