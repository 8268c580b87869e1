from __future__ import annotations

from dataclasses import dataclass

from restaurant_bot.domain.entities.restaurant import Restaurant


@dataclass(frozen=True)
class SessionState:
    expecting_selection: bool = False  # True only right after a listing reply
    listed_restaurants: tuple[Restaurant, ...] | None = None  # frozen snapshot of the last listing
    selected_index: int | None = None  # 0-based index into listed_restaurants

    def selected_restaurant(self) -> Restaurant | None:
        if self.selected_index is None or not self.listed_restaurants:
            return None
        if not 0 <= self.selected_index < len(self.listed_restaurants):
            return None
        return self.listed_restaurants[self.selected_index]
