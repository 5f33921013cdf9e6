"""
News persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

COLUMNS = ("topic", "content_text", "picture", "remark", "date_time")


async def list_news(conn: asyncpg.Connection) -> list[dict[str, Any]]:
    return await db.fetch_all(
        conn,
        """
        SELECT id, topic, content_text, picture, remark, date_time
        FROM news
        ORDER BY id
        """,
    )


async def get_news(conn: asyncpg.Connection, news_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        conn,
        """
        SELECT id, topic, content_text, picture, remark, date_time
        FROM news
        WHERE id = $1
        """,
        news_id,
    )


async def create_news(conn: asyncpg.Connection, fields: dict[str, Any]) -> int:
    row = await db.fetch_one(
        conn,
        """
        INSERT INTO news (topic, content_text, picture, remark, date_time)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id
        """,
        *[fields.get(column) for column in COLUMNS],
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert news item.")
    return int(row["id"])


async def update_news(conn: asyncpg.Connection, news_id: int, fields: dict[str, Any]) -> int:
    changes = {column: fields[column] for column in COLUMNS if column in fields}
    set_clause, values = db.build_set_clause(changes)
    return await db.execute(
        conn,
        f"""
        UPDATE news
        SET {set_clause}
        WHERE id = ${len(values) + 1}
        """,
        *values,
        news_id,
    )


async def delete_news(conn: asyncpg.Connection, news_id: int) -> int:
    return await db.execute(
        conn,
        """
        DELETE FROM news
        WHERE id = $1
        """,
        news_id,
    )
