from __future__ import annotations

from decimal import Decimal

from restaurant_bot.domain.entities.restaurant import MenuItem, Restaurant


COMMANDS_HINT = '"find restaurants", "view menu", "make reservation", or "place order"'

GREETING_TEXT = f"Welcome to the Restaurant Bot! How can I help you today? Type {COMMANDS_HINT}."
FALLBACK_TEXT = f"I didn't understand that. Try saying {COMMANDS_HINT}."
NO_RESTAURANTS_TEXT = "No restaurants found."
INVALID_SELECTION_TEXT = "Please select a valid restaurant number from the list."
NO_MENU_ITEMS_TEXT = "No menu items found for this restaurant."
SELECT_FIRST_TEXT = 'Please select a restaurant first by using "find restaurants" and choosing a number.'
ORDER_PLACED_TEXT = "Order placed successfully! You'll receive updates on your order status."
GENERIC_ERROR_TEXT = "Oops, something went wrong! Please try again."

LISTING_HEADER = "Here are some restaurants:"
LISTING_FOOTER = "Type the restaurant number to view its menu."
MENU_FOOTER = 'Type "place order" to order or "make reservation" to book a table.'


class ReplyComposer:
    def greeting(self) -> str:
        return GREETING_TEXT

    def fallback(self) -> str:
        return FALLBACK_TEXT

    def no_restaurants(self) -> str:
        return NO_RESTAURANTS_TEXT

    def invalid_selection(self) -> str:
        return INVALID_SELECTION_TEXT

    def no_menu_items(self) -> str:
        return NO_MENU_ITEMS_TEXT

    def select_restaurant_first(self) -> str:
        return SELECT_FIRST_TEXT

    def reservation_made(self, party_size: int) -> str:
        return (
            f"Reservation made successfully for a party of {party_size}! "
            "You'll receive a confirmation soon."
        )

    def order_placed(self) -> str:
        return ORDER_PLACED_TEXT

    def restaurant_listing(self, restaurants: list[Restaurant]) -> str:
        lines = [LISTING_HEADER]
        for position, restaurant in enumerate(restaurants, start=1):
            lines.append(
                f"{position}. {restaurant.name} - {restaurant.cuisine} in {restaurant.location} "
                f"(Price: {restaurant.price_range})"
            )
        lines.append(LISTING_FOOTER)
        return "\n".join(lines)

    def menu(self, restaurant: Restaurant, items: list[MenuItem]) -> str:
        lines = [f"Menu for {restaurant.name}:"]
        for position, item in enumerate(items, start=1):
            lines.append(f"{position}. {item.name} - ${format_price(item.price)} ({item.description})")
        lines.append(MENU_FOOTER)
        return "\n".join(lines)


def format_price(price: Decimal | float | int | str | None) -> str:
    if price is None:
        return "0.00"
    return f"{Decimal(str(price)):.2f}"
