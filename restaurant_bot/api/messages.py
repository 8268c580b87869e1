from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from restaurant_bot.api.schemas import ActivityDTO, ReplyActivityDTO
from restaurant_bot.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from restaurant_bot.application.use_cases.reply_composer import GENERIC_ERROR_TEXT
from restaurant_bot.wiring.dependencies import get_handle_incoming_message_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/messages", response_model=ReplyActivityDTO)
async def post_message(
    activity: ActivityDTO,
    use_case: HandleIncomingMessageUseCase = Depends(get_handle_incoming_message_use_case),
):
    message = activity.to_message()
    try:
        result = await use_case.handle(message)
    except Exception as e:
        logger.error(
            "onTurnError",
            extra={"conversation_id": message.conversation_id, "reason": type(e).__name__},
        )
        return JSONResponse(
            status_code=500,
            content=ReplyActivityDTO(text=GENERIC_ERROR_TEXT).model_dump(),
        )

    if result is None:
        return Response(status_code=202)
    return ReplyActivityDTO(text=result.text)
