from __future__ import annotations

from decimal import Decimal

# (name, cuisine, location, price_range)
SAMPLE_RESTAURANTS: list[tuple[str, str, str, str]] = [
    ("Pizza Palace", "Italian", "Downtown", "$$"),
    ("Sushi Haven", "Japanese", "Midtown", "$$$"),
    ("Taco Fiesta", "Mexican", "Uptown", "$"),
]

# (restaurant position in SAMPLE_RESTAURANTS, 1-based; name, description, price)
SAMPLE_MENU_ITEMS: list[tuple[int, str, str, Decimal]] = [
    (1, "Margherita Pizza", "Classic pizza with tomato and mozzarella", Decimal("12.99")),
    (1, "Pepperoni Pizza", "Pepperoni and cheese", Decimal("14.99")),
    (2, "California Roll", "Crab, avocado, and cucumber", Decimal("8.99")),
    (2, "Spicy Tuna Roll", "Tuna with spicy mayo", Decimal("9.99")),
    (3, "Chicken Tacos", "Grilled chicken with salsa", Decimal("6.99")),
]
