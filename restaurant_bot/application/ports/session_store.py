from abc import ABC, abstractmethod

from restaurant_bot.domain.entities.session_state import SessionState


class SessionStorePort(ABC):
    @abstractmethod
    async def get_state(self, conversation_id: str) -> SessionState:
        """
        Return the stored state, or an all-empty SessionState for a conversation
        that has never been seen.
        """
        raise NotImplementedError

    @abstractmethod
    async def set_state(self, conversation_id: str, state: SessionState) -> None:
        raise NotImplementedError
