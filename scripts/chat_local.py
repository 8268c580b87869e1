#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps a stable conversation_id for the session
- Sends your typed messages through the same HandleIncomingMessageUseCase
- Prints the matched intent, the session state and the reply text
"""
from __future__ import annotations

import asyncio
import os
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from restaurant_bot.domain.entities.message import Message
from restaurant_bot.wiring.dependencies import get_container, shutdown, startup


def _print_header(conversation_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"conversation_id: {conversation_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new conversation), /state, /quit, /help")
    print("-" * 60)


async def _chat() -> None:
    conversation_id = os.getenv("CHAT_CONVERSATION_ID", "local_conversation_1")
    user_id = os.getenv("CHAT_USER_ID", "local_user_1")
    await startup()
    container = get_container()
    use_case = container["use_case"]
    store = container["store"]
    _print_header(conversation_id)

    try:
        while True:
            try:
                user_text = input("\n> ")
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                return

            if not user_text.strip():
                continue

            cmd = user_text.strip().lower()
            if cmd in ("/quit", "/exit"):
                print("Bye!")
                return
            if cmd == "/help":
                print("Commands:")
                print("  /new   -> start a new conversation_id (fresh session state)")
                print("  /state -> show the stored session state")
                print("  /quit  -> exit")
                continue
            if cmd == "/new":
                conversation_id = f"local_conversation_{int(time.time())}"
                print(f"New conversation_id: {conversation_id}")
                continue
            if cmd == "/state":
                print(await store.get_state(conversation_id))
                continue

            message = Message(conversation_id=conversation_id, user_id=user_id, text=user_text, platform="local")
            try:
                result = await use_case.handle(message)
            except Exception as e:
                print(f"ERROR: {type(e).__name__}: {e}")
                continue

            print("\n--- Decision ---")
            print(f"intent: {result.intent.value}")
            print(f"expecting_selection: {result.state.expecting_selection}")
            print(f"selected_index: {result.state.selected_index}")
            print("\n--- Reply ---")
            print(result.text)
            print("-" * 60)
    finally:
        await shutdown()


def main() -> None:
    asyncio.run(_chat())


if __name__ == "__main__":
    main()
