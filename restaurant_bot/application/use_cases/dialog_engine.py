from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from restaurant_bot.application.exceptions import SelectionError
from restaurant_bot.application.ports.catalog import CatalogReaderPort
from restaurant_bot.application.ports.session_store import SessionStorePort
from restaurant_bot.application.ports.transaction_writer import TransactionWriterPort
from restaurant_bot.application.use_cases.reply_composer import ReplyComposer
from restaurant_bot.application.utils.message_rules import (
    is_greeting,
    is_listing_request,
    is_numeric_selection,
    is_order_request,
    is_reservation_request,
    parse_selection,
)
from restaurant_bot.application.utils.state_helpers import (
    begin_listing,
    commit_selection,
    reset_selection_state,
    stop_expecting_selection,
    store_listing,
)
from restaurant_bot.domain.entities.intent import Intent
from restaurant_bot.domain.entities.reply import TurnResult
from restaurant_bot.domain.entities.restaurant import Restaurant
from restaurant_bot.domain.entities.session_state import SessionState
from restaurant_bot.domain.entities.transaction import ORDER_STATUS_PENDING


Handler = Callable[[str, str, SessionState], Awaitable[tuple[str, SessionState]]]


@dataclass(frozen=True)
class Route:
    intent: Intent
    matches: Callable[[str, SessionState], bool]
    handler: Handler


class DialogEngine:
    """
    Per-conversation dialog state machine.

    Each turn reads the session state once, walks the routes top to bottom
    (first match wins), and writes the resulting state back once. Store errors
    propagate untouched, so a failed turn leaves the stored state as it was.
    """

    def __init__(
        self,
        catalog: CatalogReaderPort,
        writer: TransactionWriterPort,
        sessions: SessionStorePort,
        composer: ReplyComposer | None = None,
        listing_limit: int = 5,
        party_size: int = 4,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._catalog = catalog
        self._writer = writer
        self._sessions = sessions
        self._composer = composer or ReplyComposer()
        self._listing_limit = listing_limit
        self._party_size = party_size
        self._clock = clock or _utc_now
        self._logger = logging.getLogger(__name__)
        # Numeric picks are only considered while a listing is awaiting an answer.
        self._routes: tuple[Route, ...] = (
            Route(
                Intent.SELECT_RESTAURANT,
                lambda text, state: state.expecting_selection and is_numeric_selection(text),
                self._select_restaurant,
            ),
            Route(Intent.GREET, lambda text, state: is_greeting(text), self._greet),
            Route(Intent.LIST_RESTAURANTS, lambda text, state: is_listing_request(text), self._list_restaurants),
            Route(Intent.RESERVE, lambda text, state: is_reservation_request(text), self._reserve),
            Route(Intent.ORDER, lambda text, state: is_order_request(text), self._order),
        )

    def match(self, text: str, state: SessionState) -> Route | None:
        for route in self._routes:
            if route.matches(text, state):
                return route
        return None

    async def handle_turn(self, conversation_id: str, user_id: str, text: str) -> TurnResult:
        state = await self._sessions.get_state(conversation_id)

        route = self.match(text, state)
        intent = route.intent if route else Intent.FALLBACK
        handler = route.handler if route else self._fallback
        self._logger.info(
            "Turn matched",
            extra={"conversation_id": conversation_id, "user_id": user_id, "intent": intent.value},
        )

        reply_text, new_state = await handler(text, user_id, state)

        await self._sessions.set_state(conversation_id, new_state)
        return TurnResult(text=reply_text, intent=intent, state=new_state)

    async def _greet(self, text: str, user_id: str, state: SessionState) -> tuple[str, SessionState]:
        return self._composer.greeting(), reset_selection_state(state)

    async def _fallback(self, text: str, user_id: str, state: SessionState) -> tuple[str, SessionState]:
        return self._composer.fallback(), reset_selection_state(state)

    async def _list_restaurants(self, text: str, user_id: str, state: SessionState) -> tuple[str, SessionState]:
        state = begin_listing(state)
        restaurants = await self._catalog.list_restaurants(self._listing_limit)
        if not restaurants:
            return self._composer.no_restaurants(), stop_expecting_selection(state)

        restaurants = list(restaurants)[: self._listing_limit]
        return self._composer.restaurant_listing(restaurants), store_listing(state, restaurants)

    async def _select_restaurant(self, text: str, user_id: str, state: SessionState) -> tuple[str, SessionState]:
        try:
            index = parse_selection(text)
            restaurant = _resolve_listed(state, index)
        except (SelectionError, ValueError) as e:
            self._logger.info("Invalid restaurant pick", extra={"reason": str(e)})
            return self._composer.invalid_selection(), stop_expecting_selection(state)

        items = await self._catalog.list_menu_items(restaurant.id)
        if not items:
            return self._composer.no_menu_items(), stop_expecting_selection(state)

        return self._composer.menu(restaurant, list(items)), commit_selection(state, index)

    async def _reserve(self, text: str, user_id: str, state: SessionState) -> tuple[str, SessionState]:
        restaurant = state.selected_restaurant()
        if restaurant is None:
            return self._composer.select_restaurant_first(), reset_selection_state(state)

        reservation_id = await self._writer.create_reservation(
            restaurant.id, user_id, self._party_size, self._clock()
        )
        self._logger.info(
            "Reservation created",
            extra={"restaurant_id": restaurant.id, "user_id": user_id, "reservation_id": reservation_id},
        )
        return self._composer.reservation_made(self._party_size), reset_selection_state(state)

    async def _order(self, text: str, user_id: str, state: SessionState) -> tuple[str, SessionState]:
        restaurant = state.selected_restaurant()
        if restaurant is None:
            return self._composer.select_restaurant_first(), reset_selection_state(state)

        order_id = await self._writer.create_order(restaurant.id, user_id, ORDER_STATUS_PENDING)
        self._logger.info(
            "Order created",
            extra={"restaurant_id": restaurant.id, "user_id": user_id, "order_id": order_id},
        )
        return self._composer.order_placed(), reset_selection_state(state)


def _resolve_listed(state: SessionState, index: int) -> Restaurant:
    if not state.listed_restaurants:
        raise SelectionError("no restaurants listed")
    if not 0 <= index < len(state.listed_restaurants):
        raise SelectionError(f"pick {index + 1} outside 1..{len(state.listed_restaurants)}")
    return state.listed_restaurants[index]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
