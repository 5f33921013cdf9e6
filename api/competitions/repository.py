"""
Competition persistence (raw SQL).

`competes_in.score` is a text column holding JSON; values are encoded before
they are bound and decoded by the service on the way out.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db


async def list_by_athlete(conn: asyncpg.Connection, athlete_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        conn,
        """
        SELECT
          c.id,
          e.event_name,
          e.event_class,
          e.event_date_time,
          e.event_gender,
          e.status,
          a.first_name,
          a.last_name,
          a.bib,
          a.country,
          a.date_of_birth,
          c.score,
          c.remark
        FROM competes_in c
        JOIN athletes a ON c.athlete_id = a.id
        JOIN events e ON c.event_id = e.id
        WHERE c.athlete_id = $1
        ORDER BY e.event_date_time, c.id
        """,
        athlete_id,
    )


async def list_by_event(conn: asyncpg.Connection, event_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        conn,
        """
        SELECT
          c.id,
          a.id AS athlete_id,
          a.first_name,
          a.last_name,
          a.bib,
          a.country,
          a.date_of_birth,
          c.score,
          c.remark,
          e.id AS event_id,
          e.event_name,
          e.event_class,
          e.event_description,
          e.event_date_time,
          e.event_gender,
          e.status
        FROM competes_in c
        JOIN athletes a ON c.athlete_id = a.id
        JOIN events e ON c.event_id = e.id
        WHERE c.event_id = $1
        ORDER BY c.id
        """,
        event_id,
    )


async def create_competition(
    conn: asyncpg.Connection,
    *,
    athlete_id: int,
    event_id: int,
    score: str | None,
    remark: str | None,
) -> int:
    row = await db.fetch_one(
        conn,
        """
        INSERT INTO competes_in (athlete_id, event_id, score, remark)
        VALUES ($1, $2, $3, $4)
        RETURNING id
        """,
        athlete_id,
        event_id,
        score,
        remark,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert competition record.")
    return int(row["id"])


async def replace_competition(
    conn: asyncpg.Connection,
    competition_id: int,
    *,
    athlete_id: int | None,
    event_id: int | None,
    score: str | None,
    remark: str | None,
) -> int:
    return await db.execute(
        conn,
        """
        UPDATE competes_in
        SET athlete_id = $1, event_id = $2, score = $3, remark = $4
        WHERE id = $5
        """,
        athlete_id,
        event_id,
        score,
        remark,
        competition_id,
    )


async def delete_competition(conn: asyncpg.Connection, competition_id: int) -> int:
    return await db.execute(
        conn,
        """
        DELETE FROM competes_in
        WHERE id = $1
        """,
        competition_id,
    )
