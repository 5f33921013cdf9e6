"""
Event persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

COLUMNS = (
    "event_name",
    "event_class",
    "event_description",
    "event_date_time",
    "event_gender",
    "status",
    "event_location",
    "sport_id",
)


async def list_events(conn: asyncpg.Connection) -> list[dict[str, Any]]:
    return await db.fetch_all(
        conn,
        """
        SELECT id, event_name, event_class, event_description, event_date_time,
               event_gender, status, event_location, sport_id
        FROM events
        ORDER BY id
        """,
    )


async def get_event(conn: asyncpg.Connection, event_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        conn,
        """
        SELECT id, event_name, event_class, event_description, event_date_time,
               event_gender, status, event_location, sport_id
        FROM events
        WHERE id = $1
        """,
        event_id,
    )


async def event_exists(conn: asyncpg.Connection, event_id: int) -> bool:
    row = await db.fetch_one(
        conn,
        """
        SELECT 1 AS ok
        FROM events
        WHERE id = $1
        LIMIT 1
        """,
        event_id,
    )
    return row is not None


async def create_event(conn: asyncpg.Connection, fields: dict[str, Any]) -> int:
    row = await db.fetch_one(
        conn,
        """
        INSERT INTO events (event_name, event_class, event_description, event_date_time,
                            event_gender, status, event_location, sport_id)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING id
        """,
        *[fields.get(column) for column in COLUMNS],
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert event.")
    return int(row["id"])


async def update_event(conn: asyncpg.Connection, event_id: int, fields: dict[str, Any]) -> int:
    """
    Partial update: only the given columns are written.

    Unknown keys are ignored. Returns the number of rows updated.
    """
    changes = {column: fields[column] for column in COLUMNS if column in fields}
    set_clause, values = db.build_set_clause(changes)
    return await db.execute(
        conn,
        f"""
        UPDATE events
        SET {set_clause}
        WHERE id = ${len(values) + 1}
        """,
        *values,
        event_id,
    )


async def delete_event(conn: asyncpg.Connection, event_id: int) -> int:
    return await db.execute(
        conn,
        """
        DELETE FROM events
        WHERE id = $1
        """,
        event_id,
    )
