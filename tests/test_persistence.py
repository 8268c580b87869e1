"""
Tests for durable session state persistence.
"""

from __future__ import annotations

import asyncio
import json
import tempfile
from pathlib import Path

import pytest

from restaurant_bot.application.exceptions import StateStoreError
from restaurant_bot.domain.entities.restaurant import Restaurant
from restaurant_bot.domain.entities.session_state import SessionState
from restaurant_bot.infrastructure.store.json_store import JsonSessionStore
from tests.fakes import build_engine


def test_json_store_persistence():
    """Test that JSON store persists and retrieves state correctly."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonSessionStore(data_dir=tmpdir)
        listed = (
            Restaurant(id=1, name="Pizza Palace", cuisine="Italian", location="Downtown", price_range="$$"),
            Restaurant(id=2, name="Sushi Haven", cuisine="Japanese", location="Midtown", price_range="$$$"),
        )
        state = SessionState(expecting_selection=False, listed_restaurants=listed, selected_index=1)

        asyncio.run(store.set_state("conv_1", state))

        # A fresh store reading the same directory simulates a restart.
        restored = asyncio.run(JsonSessionStore(data_dir=tmpdir).get_state("conv_1"))
        assert restored == state
        assert restored.selected_restaurant() == listed[1]


def test_json_store_default_state():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonSessionStore(data_dir=tmpdir)
        assert asyncio.run(store.get_state("missing")) == SessionState()


def test_json_store_handles_unsafe_conversation_ids():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonSessionStore(data_dir=tmpdir)
        conversation_id = "../msteams/a:1/b"
        asyncio.run(store.set_state(conversation_id, SessionState(expecting_selection=True)))

        files = list(Path(tmpdir).glob("*.json"))
        assert len(files) == 1
        assert json.loads(files[0].read_text(encoding="utf-8"))["conversation_id"] == conversation_id
        assert asyncio.run(store.get_state(conversation_id)).expecting_selection is True


def test_json_store_corrupted_file_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonSessionStore(data_dir=tmpdir)
        asyncio.run(store.set_state("conv_1", SessionState()))
        [path] = list(Path(tmpdir).glob("*.json"))
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StateStoreError):
            asyncio.run(store.get_state("conv_1"))


def test_dialog_survives_store_restart():
    """Listing in one process, pick and order after a restart."""
    with tempfile.TemporaryDirectory() as tmpdir:
        engine, db, _ = build_engine(sessions=JsonSessionStore(data_dir=tmpdir))
        asyncio.run(engine.handle_turn("conv_1", "user_1", "find restaurants"))

        engine, _, sessions = build_engine(db=db, sessions=JsonSessionStore(data_dir=tmpdir))
        menu = asyncio.run(engine.handle_turn("conv_1", "user_1", "3"))
        assert menu.text.startswith("Menu for Taco Fiesta:")
        assert asyncio.run(sessions.get_state("conv_1")).selected_index == 2

        asyncio.run(engine.handle_turn("conv_1", "user_1", "place order"))
        assert db.orders[0].restaurant_id == 3


def test_json_store_malformed_state_shapes_raise():
    """Valid JSON with the wrong shape is reported as a state store failure."""
    shapes = [
        {"state": None},
        [1, 2],
        {"state": {"listed_restaurants": [{"name": "x"}]}},
        {"state": {"listed_restaurants": ["Pizza Palace"]}},
        {"state": {"listed_restaurants": "Pizza Palace"}},
        {"state": {"selected_index": "1"}},
        {"state": {"selected_index": True}},
    ]
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonSessionStore(data_dir=tmpdir)
        asyncio.run(store.set_state("conv_1", SessionState()))
        [path] = list(Path(tmpdir).glob("*.json"))

        for shape in shapes:
            path.write_text(json.dumps(shape), encoding="utf-8")
            with pytest.raises(StateStoreError):
                asyncio.run(store.get_state("conv_1"))
