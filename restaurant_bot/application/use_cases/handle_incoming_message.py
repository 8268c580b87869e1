from __future__ import annotations

import logging

from restaurant_bot.application.use_cases.dialog_engine import DialogEngine
from restaurant_bot.domain.entities.message import Message
from restaurant_bot.domain.entities.reply import TurnResult


class HandleIncomingMessageUseCase:
    def __init__(self, engine: DialogEngine) -> None:
        self._engine = engine
        self._logger = logging.getLogger(__name__)

    async def handle(self, message: Message) -> TurnResult | None:
        """
        Run one turn for an inbound activity. Returns None for activities the bot
        does not answer (anything that is not a text message).
        """
        if message.activity_type != "message" or message.text is None:
            self._logger.info(
                "Activity ignored",
                extra={
                    "conversation_id": message.conversation_id,
                    "platform": message.platform,
                    "reason": message.activity_type,
                },
            )
            return None

        try:
            result = await self._engine.handle_turn(message.conversation_id, message.user_id, message.text)
        except Exception:
            self._logger.exception(
                "Turn failed",
                extra={
                    "conversation_id": message.conversation_id,
                    "user_id": message.user_id,
                    "platform": message.platform,
                },
            )
            raise

        self._logger.info(
            "Reply ready",
            extra={
                "conversation_id": message.conversation_id,
                "platform": message.platform,
                "intent": result.intent.value,
                "reply_text": result.text,
            },
        )
        return result
