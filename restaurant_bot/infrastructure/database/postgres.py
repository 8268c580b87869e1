from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import asyncpg

from restaurant_bot.application.exceptions import StoreError
from restaurant_bot.application.ports.catalog import CatalogReaderPort
from restaurant_bot.application.ports.transaction_writer import TransactionWriterPort
from restaurant_bot.domain.entities.restaurant import MenuItem, Restaurant
from restaurant_bot.infrastructure.database.sample_data import SAMPLE_MENU_ITEMS, SAMPLE_RESTAURANTS

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS restaurants (
        id SERIAL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        cuisine VARCHAR(100),
        location VARCHAR(255),
        price_range VARCHAR(50)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS menu_items (
        id SERIAL PRIMARY KEY,
        restaurant_id INT REFERENCES restaurants(id),
        name VARCHAR(255) NOT NULL,
        description TEXT,
        price NUMERIC(10, 2)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS reservations (
        id SERIAL PRIMARY KEY,
        restaurant_id INT REFERENCES restaurants(id),
        user_id VARCHAR(255),
        reservation_time TIMESTAMPTZ,
        party_size INT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS orders (
        id SERIAL PRIMARY KEY,
        restaurant_id INT REFERENCES restaurants(id),
        user_id VARCHAR(255),
        order_status VARCHAR(50)
    )
    """,
)


class Database:
    """Owns the asyncpg pool. Created once at startup and passed to the adapters below."""

    def __init__(self, dsn: str, min_size: int = 2, max_size: int = 10) -> None:
        self.pool: Optional[asyncpg.Pool] = None
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size

    async def connect(self) -> None:
        if self.pool:
            return
        if not self._dsn:
            raise RuntimeError("DATABASE_URL is empty. Export DATABASE_URL or set it in .env.")
        self.pool = await asyncpg.create_pool(self._dsn, min_size=self._min_size, max_size=self._max_size)
        logger.info("Database pool opened")

    async def close(self) -> None:
        if self.pool:
            await self.pool.close()
            self.pool = None

    def require_pool(self) -> asyncpg.Pool:
        if self.pool is None:
            raise StoreError("Database pool is not connected")
        return self.pool

    async def init_schema(self, seed_sample_data: bool = True) -> None:
        """Create tables if missing and insert sample rows into an empty catalog."""
        pool = self.require_pool()
        try:
            async with pool.acquire() as conn:
                async with conn.transaction():
                    for statement in SCHEMA_STATEMENTS:
                        await conn.execute(statement)

                    if not seed_sample_data:
                        return
                    count = await conn.fetchval("SELECT COUNT(*) FROM restaurants")
                    if count:
                        logger.info("Database already initialized. Skipping sample data insertion.")
                        return

                    ids = []
                    for name, cuisine, location, price_range in SAMPLE_RESTAURANTS:
                        ids.append(
                            await conn.fetchval(
                                """
                                INSERT INTO restaurants (name, cuisine, location, price_range)
                                VALUES ($1, $2, $3, $4)
                                RETURNING id
                                """,
                                name, cuisine, location, price_range,
                            )
                        )
                    await conn.executemany(
                        """
                        INSERT INTO menu_items (restaurant_id, name, description, price)
                        VALUES ($1, $2, $3, $4)
                        """,
                        [(ids[pos - 1], name, desc, price) for pos, name, desc, price in SAMPLE_MENU_ITEMS],
                    )
                    logger.info("Database initialized with sample data.")
        except (asyncpg.PostgresError, OSError) as e:
            logger.exception("Database initialization error")
            raise StoreError("Database initialization failed") from e


class PostgresCatalogReader(CatalogReaderPort):
    def __init__(self, db: Database) -> None:
        self._db = db

    async def list_restaurants(self, limit: int) -> list[Restaurant]:
        try:
            async with self._db.require_pool().acquire() as conn:
                rows = await conn.fetch(
                    """
                    SELECT id, name, cuisine, location, price_range
                    FROM restaurants
                    ORDER BY id
                    LIMIT $1
                    """,
                    limit,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StoreError("Failed to list restaurants") from e
        return [Restaurant(**dict(row)) for row in rows]

    async def list_menu_items(self, restaurant_id: int) -> list[MenuItem]:
        try:
            async with self._db.require_pool().acquire() as conn:
                rows = await conn.fetch(
                    """
                    SELECT id, restaurant_id, name, description, price
                    FROM menu_items
                    WHERE restaurant_id = $1
                    ORDER BY id
                    """,
                    restaurant_id,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StoreError(f"Failed to list menu items for restaurant {restaurant_id}") from e
        return [MenuItem(**dict(row)) for row in rows]


class PostgresTransactionWriter(TransactionWriterPort):
    def __init__(self, db: Database) -> None:
        self._db = db

    async def create_reservation(
        self, restaurant_id: int, user_id: str, party_size: int, reservation_time: datetime
    ) -> int:
        try:
            async with self._db.require_pool().acquire() as conn:
                return await conn.fetchval(
                    """
                    INSERT INTO reservations (restaurant_id, user_id, reservation_time, party_size)
                    VALUES ($1, $2, $3, $4)
                    RETURNING id
                    """,
                    restaurant_id, user_id, reservation_time, party_size,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StoreError(f"Failed to create reservation for restaurant {restaurant_id}") from e

    async def create_order(self, restaurant_id: int, user_id: str, status: str) -> int:
        try:
            async with self._db.require_pool().acquire() as conn:
                return await conn.fetchval(
                    """
                    INSERT INTO orders (restaurant_id, user_id, order_status)
                    VALUES ($1, $2, $3)
                    RETURNING id
                    """,
                    restaurant_id, user_id, status,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StoreError(f"Failed to create order for restaurant {restaurant_id}") from e
