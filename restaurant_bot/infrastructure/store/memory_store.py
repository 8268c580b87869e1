from __future__ import annotations

from restaurant_bot.application.ports.session_store import SessionStorePort
from restaurant_bot.domain.entities.session_state import SessionState


class MemorySessionStore(SessionStorePort):
    def __init__(self) -> None:
        self._states: dict[str, SessionState] = {}

    async def get_state(self, conversation_id: str) -> SessionState:
        return self._states.get(conversation_id, SessionState())

    async def set_state(self, conversation_id: str, state: SessionState) -> None:
        self._states[conversation_id] = state
