import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from restaurant_bot.api.messages import router as messages_router
from restaurant_bot.core.config import settings
from restaurant_bot.wiring.dependencies import shutdown, startup

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "conversation_id",
            "user_id",
            "platform",
            "intent",
            "restaurant_id",
            "reservation_id",
            "order_id",
            "reply_text",
            "reason",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(title="Restaurant Bot", version="1.0.0", lifespan=lifespan)

app.include_router(messages_router, tags=["messages"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
