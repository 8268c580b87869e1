from enum import Enum


class Intent(str, Enum):
    SELECT_RESTAURANT = "select_restaurant"
    GREET = "greet"
    LIST_RESTAURANTS = "list_restaurants"
    RESERVE = "reserve"
    ORDER = "order"
    FALLBACK = "fallback"
