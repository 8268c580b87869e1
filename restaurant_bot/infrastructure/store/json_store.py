from __future__ import annotations

import asyncio
import hashlib
import json
import threading
from pathlib import Path
from typing import Any

from restaurant_bot.application.exceptions import StateStoreError
from restaurant_bot.application.ports.session_store import SessionStorePort
from restaurant_bot.domain.entities.restaurant import Restaurant
from restaurant_bot.domain.entities.session_state import SessionState


class JsonSessionStore(SessionStorePort):
    def __init__(self, data_dir: str = "./data/sessions") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict

    def _get_lock(self, conversation_id: str) -> threading.Lock:
        """Get or create a lock for a conversation_id."""
        with self._lock_lock:
            if conversation_id not in self._locks:
                self._locks[conversation_id] = threading.Lock()
            return self._locks[conversation_id]

    def _get_file_path(self, conversation_id: str) -> Path:
        # Conversation ids come from the channel and may contain path separators.
        digest = hashlib.sha256(conversation_id.encode("utf-8")).hexdigest()
        return self._data_dir / f"{digest}.json"

    async def get_state(self, conversation_id: str) -> SessionState:
        return await asyncio.to_thread(self._read_state, conversation_id)

    async def set_state(self, conversation_id: str, state: SessionState) -> None:
        await asyncio.to_thread(self._write_state, conversation_id, state)

    def _read_state(self, conversation_id: str) -> SessionState:
        file_path = self._get_file_path(conversation_id)
        with self._get_lock(conversation_id):
            if not file_path.exists():
                return SessionState()
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                raise StateStoreError(f"Could not read session state for {conversation_id}") from e
        try:
            return self._deserialize_state(data.get("state", {}))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StateStoreError(f"Malformed session state for {conversation_id}") from e

    def _write_state(self, conversation_id: str, state: SessionState) -> None:
        """Save session data to JSON file atomically."""
        file_path = self._get_file_path(conversation_id)
        temp_path = file_path.with_suffix(".json.tmp")
        data = {
            "conversation_id": conversation_id,
            "state": self._serialize_state(state),
            "version": 1,
        }

        with self._get_lock(conversation_id):
            try:
                with open(temp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                temp_path.replace(file_path)
            except OSError as e:
                temp_path.unlink(missing_ok=True)
                raise StateStoreError(f"Could not persist session state for {conversation_id}") from e

    def _serialize_state(self, state: SessionState) -> dict[str, Any]:
        listed = None
        if state.listed_restaurants is not None:
            listed = [self._serialize_restaurant(r) for r in state.listed_restaurants]
        return {
            "expecting_selection": state.expecting_selection,
            "listed_restaurants": listed,
            "selected_index": state.selected_index,
        }

    def _deserialize_state(self, data: dict[str, Any]) -> SessionState:
        listed = data.get("listed_restaurants")
        if listed is not None and not isinstance(listed, list):
            raise TypeError("listed_restaurants must be a list")
        selected_index = data.get("selected_index")
        if selected_index is not None and type(selected_index) is not int:
            raise TypeError("selected_index must be an integer")
        return SessionState(
            expecting_selection=bool(data.get("expecting_selection", False)),
            listed_restaurants=tuple(self._deserialize_restaurant(r) for r in listed) if listed is not None else None,
            selected_index=selected_index,
        )

    def _serialize_restaurant(self, restaurant: Restaurant) -> dict[str, Any]:
        return {
            "id": restaurant.id,
            "name": restaurant.name,
            "cuisine": restaurant.cuisine,
            "location": restaurant.location,
            "price_range": restaurant.price_range,
        }

    def _deserialize_restaurant(self, data: dict[str, Any]) -> Restaurant:
        if type(data.get("id")) is not int or not isinstance(data.get("name"), str):
            raise ValueError("listed restaurant needs an integer id and a name")
        return Restaurant(
            id=data["id"],
            name=data["name"],
            cuisine=data.get("cuisine"),
            location=data.get("location"),
            price_range=data.get("price_range"),
        )
