from decimal import Decimal

from restaurant_bot.application.use_cases.reply_composer import ReplyComposer, format_price
from restaurant_bot.domain.entities.restaurant import MenuItem, Restaurant


def test_restaurant_listing_format():
    composer = ReplyComposer()
    text = composer.restaurant_listing(
        [
            Restaurant(id=7, name="Pizza Palace", cuisine="Italian", location="Downtown", price_range="$$"),
            Restaurant(id=9, name="Taco Fiesta", cuisine="Mexican", location="Uptown", price_range="$"),
        ]
    )
    assert text.splitlines() == [
        "Here are some restaurants:",
        "1. Pizza Palace - Italian in Downtown (Price: $$)",
        "2. Taco Fiesta - Mexican in Uptown (Price: $)",
        "Type the restaurant number to view its menu.",
    ]


def test_menu_format_uses_two_decimals():
    composer = ReplyComposer()
    restaurant = Restaurant(id=1, name="Sushi Haven", cuisine="Japanese", location="Midtown", price_range="$$$")
    text = composer.menu(
        restaurant,
        [
            MenuItem(id=1, restaurant_id=1, name="California Roll", description="Crab, avocado, and cucumber", price=Decimal("8.99")),
            MenuItem(id=2, restaurant_id=1, name="Miso Soup", description="Tofu and scallion", price=Decimal("3")),
        ],
    )
    lines = text.splitlines()
    assert lines[0] == "Menu for Sushi Haven:"
    assert lines[1] == "1. California Roll - $8.99 (Crab, avocado, and cucumber)"
    assert lines[2] == "2. Miso Soup - $3.00 (Tofu and scallion)"
    assert lines[-1] == 'Type "place order" to order or "make reservation" to book a table.'


def test_format_price():
    assert format_price(Decimal("12.5")) == "12.50"
    assert format_price(6.99) == "6.99"
    assert format_price(None) == "0.00"


def test_reservation_text_mentions_party_size():
    assert "party of 6" in ReplyComposer().reservation_made(6)
