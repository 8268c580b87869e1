from __future__ import annotations

from dataclasses import replace

from restaurant_bot.domain.entities.restaurant import Restaurant
from restaurant_bot.domain.entities.session_state import SessionState


def reset_selection_state(state: SessionState) -> SessionState:
    """Back to idle: no pending pick and no committed restaurant. The listing is kept."""
    return replace(state, expecting_selection=False, selected_index=None)


def stop_expecting_selection(state: SessionState) -> SessionState:
    return replace(state, expecting_selection=False)


def begin_listing(state: SessionState) -> SessionState:
    """A listing was requested; any previous pick is void from here on."""
    return replace(state, expecting_selection=True, selected_index=None)


def store_listing(state: SessionState, restaurants: list[Restaurant]) -> SessionState:
    return replace(state, listed_restaurants=tuple(restaurants))


def commit_selection(state: SessionState, index: int) -> SessionState:
    if not state.listed_restaurants or not 0 <= index < len(state.listed_restaurants):
        raise ValueError(f"selection index {index} outside of current listing")
    return replace(state, expecting_selection=False, selected_index=index)
