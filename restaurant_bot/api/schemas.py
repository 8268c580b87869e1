from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from restaurant_bot.domain.entities.message import Message


class ChannelAccount(BaseModel):
    id: str


class ConversationAccount(BaseModel):
    id: str


class ActivityDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = "message"
    text: str | None = None
    conversation: ConversationAccount
    from_: ChannelAccount = Field(alias="from")
    channel_id: str | None = Field(default=None, alias="channelId")

    def to_message(self) -> Message:
        return Message(
            conversation_id=self.conversation.id,
            user_id=self.from_.id,
            text=self.text,
            activity_type=self.type,
            platform=self.channel_id or "api",
        )


class ReplyActivityDTO(BaseModel):
    type: str = "message"
    text: str
