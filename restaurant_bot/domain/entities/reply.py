from dataclasses import dataclass

from restaurant_bot.domain.entities.intent import Intent
from restaurant_bot.domain.entities.session_state import SessionState


@dataclass(frozen=True)
class TurnResult:
    text: str
    intent: Intent
    state: SessionState
