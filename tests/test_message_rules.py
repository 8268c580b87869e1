import pytest

from restaurant_bot.application.utils.message_rules import (
    is_greeting,
    is_listing_request,
    is_numeric_selection,
    is_order_request,
    is_reservation_request,
    parse_selection,
)


def test_numeric_selection_requires_digits_only():
    assert is_numeric_selection("1")
    assert is_numeric_selection("42")
    assert is_numeric_selection("007")
    assert not is_numeric_selection("")
    assert not is_numeric_selection(" 1")
    assert not is_numeric_selection("1\n")
    assert not is_numeric_selection("-1")
    assert not is_numeric_selection("1.5")
    assert not is_numeric_selection("number 2")
    assert not is_numeric_selection("٣")


def test_keywords_are_case_insensitive_substrings():
    assert is_greeting("Hello there")
    assert is_greeting("HI")
    assert is_greeting("this one")  # substring match, not word match
    assert is_listing_request("Please FIND RESTAURANTS near me")
    assert is_listing_request("can I view menu?")
    assert is_reservation_request("I want to Make Reservation")
    assert is_order_request("place order now")
    assert not is_reservation_request("reservation")
    assert not is_order_request("order")


def test_parse_selection_is_one_based():
    assert parse_selection("1") == 0
    assert parse_selection("5") == 4
    assert parse_selection("0") == -1


def test_parse_selection_rejects_oversized_numbers():
    assert parse_selection("0000000003") == 2
    assert parse_selection("999999999") == 999999998
    with pytest.raises(ValueError):
        parse_selection("1234567890")
    with pytest.raises(ValueError):
        parse_selection("9" * 5000)
