from __future__ import annotations

import re

GREETING_KEYWORDS = ("hi", "hello")
LISTING_KEYWORDS = ("find restaurants", "view menu")
RESERVATION_KEYWORDS = ("make reservation",)
ORDER_KEYWORDS = ("place order",)

MAX_SELECTION_DIGITS = 9

_SELECTION_RE = re.compile(r"[0-9]+")


def normalize_text(text: str) -> str:
    return (text or "").lower()


def is_numeric_selection(text: str) -> bool:
    return _SELECTION_RE.fullmatch(normalize_text(text)) is not None


def is_greeting(text: str) -> bool:
    # Plain substring match: "this" or "chips" count as a greeting too.
    return _contains_any(text, GREETING_KEYWORDS)


def is_listing_request(text: str) -> bool:
    return _contains_any(text, LISTING_KEYWORDS)


def is_reservation_request(text: str) -> bool:
    return _contains_any(text, RESERVATION_KEYWORDS)


def is_order_request(text: str) -> bool:
    return _contains_any(text, ORDER_KEYWORDS)


def parse_selection(text: str) -> int:
    """
    Convert a 1-based numeric pick into a 0-based index.

    Raises ValueError for text that is not a pick or is too long to convert.
    """
    digits = normalize_text(text).lstrip("0") or "0"
    if len(digits) > MAX_SELECTION_DIGITS:
        raise ValueError(f"pick has {len(digits)} digits")
    return int(digits) - 1


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    normalized = normalize_text(text)
    return any(keyword in normalized for keyword in keywords)
