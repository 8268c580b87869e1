from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    conversation_id: str
    user_id: str
    text: str | None
    activity_type: str = "message"
    platform: str = "api"
