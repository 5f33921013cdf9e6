"""
Athlete persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

# Writable columns, in insert order. `password` holds a bcrypt hash.
COLUMNS = (
    "email",
    "first_name",
    "last_name",
    "role",
    "avatar",
    "password",
    "country",
    "bib",
    "gender",
    "date_of_birth",
    "coach",
    "sport_type",
    "affiliation",
    "phone_number",
    "disability_class",
    "equipment",
    "medicine",
    "remark",
)

# Everything except the password hash.
_SELECT_COLUMNS = """
    id, email, first_name, last_name, role, avatar, country, bib, gender,
    date_of_birth, coach, sport_type, affiliation, phone_number,
    disability_class, equipment, medicine, remark
"""


async def list_athletes(conn: asyncpg.Connection) -> list[dict[str, Any]]:
    return await db.fetch_all(
        conn,
        f"""
        SELECT {_SELECT_COLUMNS}
        FROM athletes
        ORDER BY id
        """,
    )


async def get_athlete(conn: asyncpg.Connection, athlete_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        conn,
        f"""
        SELECT {_SELECT_COLUMNS}
        FROM athletes
        WHERE id = $1
        """,
        athlete_id,
    )


async def athlete_exists(conn: asyncpg.Connection, athlete_id: int) -> bool:
    row = await db.fetch_one(
        conn,
        """
        SELECT 1 AS ok
        FROM athletes
        WHERE id = $1
        LIMIT 1
        """,
        athlete_id,
    )
    return row is not None


async def create_athlete(conn: asyncpg.Connection, fields: dict[str, Any]) -> int:
    placeholders = ", ".join(f"${i}" for i in range(1, len(COLUMNS) + 1))
    row = await db.fetch_one(
        conn,
        f"""
        INSERT INTO athletes ({", ".join(COLUMNS)})
        VALUES ({placeholders})
        RETURNING id
        """,
        *[fields.get(column) for column in COLUMNS],
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert athlete.")
    return int(row["id"])


async def replace_athlete(conn: asyncpg.Connection, athlete_id: int, fields: dict[str, Any]) -> int:
    """
    Overwrite every writable column; columns missing from `fields` become NULL.

    Returns the number of rows updated (0 or 1).
    """
    set_clause, values = db.build_set_clause({column: fields.get(column) for column in COLUMNS})
    return await db.execute(
        conn,
        f"""
        UPDATE athletes
        SET {set_clause}
        WHERE id = ${len(values) + 1}
        """,
        *values,
        athlete_id,
    )


async def delete_athlete(conn: asyncpg.Connection, athlete_id: int) -> int:
    return await db.execute(
        conn,
        """
        DELETE FROM athletes
        WHERE id = $1
        """,
        athlete_id,
    )
