from __future__ import annotations

import logging

from restaurant_bot.application.ports.catalog import CatalogReaderPort
from restaurant_bot.application.ports.session_store import SessionStorePort
from restaurant_bot.application.ports.transaction_writer import TransactionWriterPort
from restaurant_bot.application.use_cases.dialog_engine import DialogEngine
from restaurant_bot.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from restaurant_bot.core.config import settings
from restaurant_bot.infrastructure.database.memory_db import MemoryRestaurantDatabase
from restaurant_bot.infrastructure.database.postgres import (
    Database,
    PostgresCatalogReader,
    PostgresTransactionWriter,
)
from restaurant_bot.infrastructure.store.json_store import JsonSessionStore
from restaurant_bot.infrastructure.store.memory_store import MemorySessionStore


logger = logging.getLogger(__name__)

_session_store: SessionStorePort | None = None
_memory_db: MemoryRestaurantDatabase | None = None
_database: Database | None = None


def get_session_store() -> SessionStorePort:
    global _session_store
    if _session_store is None:
        if settings.SESSION_STORE.lower() == "json":
            _session_store = JsonSessionStore(data_dir=settings.SESSION_DATA_DIR)
        else:
            _session_store = MemorySessionStore()
        logger.info("Using session store %s", type(_session_store).__name__)
    return _session_store


def uses_postgres() -> bool:
    return settings.DATA_STORE.lower() == "postgres"


def get_database() -> Database:
    global _database
    if _database is None:
        if not settings.DATABASE_URL:
            raise ValueError("DATABASE_URL is required when DATA_STORE=postgres.")
        _database = Database(
            settings.DATABASE_URL,
            min_size=settings.DB_POOL_MIN_SIZE,
            max_size=settings.DB_POOL_MAX_SIZE,
        )
    return _database


def get_memory_database() -> MemoryRestaurantDatabase:
    global _memory_db
    if _memory_db is None:
        _memory_db = MemoryRestaurantDatabase()
        if settings.SEED_SAMPLE_DATA:
            _memory_db.seed_sample_data()
    return _memory_db


def get_catalog() -> CatalogReaderPort:
    if uses_postgres():
        return PostgresCatalogReader(get_database())
    return get_memory_database()


def get_transaction_writer() -> TransactionWriterPort:
    if uses_postgres():
        return PostgresTransactionWriter(get_database())
    return get_memory_database()


def get_dialog_engine() -> DialogEngine:
    return DialogEngine(
        catalog=get_catalog(),
        writer=get_transaction_writer(),
        sessions=get_session_store(),
        listing_limit=settings.LISTING_LIMIT,
        party_size=settings.RESERVATION_PARTY_SIZE,
    )


def get_handle_incoming_message_use_case() -> HandleIncomingMessageUseCase:
    return HandleIncomingMessageUseCase(engine=get_dialog_engine())


async def startup() -> None:
    if uses_postgres():
        db = get_database()
        await db.connect()
        await db.init_schema(seed_sample_data=settings.SEED_SAMPLE_DATA)


async def shutdown() -> None:
    if _database is not None:
        await _database.close()


def get_container() -> dict[str, object]:
    return {
        "use_case": get_handle_incoming_message_use_case(),
        "store": get_session_store(),
    }
