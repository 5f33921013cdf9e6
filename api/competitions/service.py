"""
Competition business logic.

Scope:
- listing an athlete's or an event's competition rows (denormalized joins)
- create / full replace / delete of competes_in rows
- JSON encoding of `score` on write, decoding on read
"""

from __future__ import annotations

import json
import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from athletes import repository as athlete_repository
from events import repository as event_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

_BAD_REFERENCE = "athlete_id or event_id does not reference an existing record."


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Competition record not found.")


def encode_score(score: Any) -> str | None:
    if score is None:
        return None
    return json.dumps(score, ensure_ascii=False)


def decode_score(raw: Any) -> Any:
    """
    Stored scores are JSON text written by `encode_score`.

    Legacy rows hold plain text. Text that happens to be valid JSON (e.g. "10",
    "true") decodes like any other stored score; anything else is returned as is.
    """
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _decode_rows(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    for row in rows:
        row["score"] = decode_score(row.get("score"))
    return rows


async def list_by_athlete(conn: asyncpg.Connection, athlete_id: int) -> list[dict[str, Any]]:
    rows = await repository.list_by_athlete(conn, athlete_id)
    if rows:
        return _decode_rows(rows)

    # Both cases are 404; the message tells them apart.
    if not await athlete_repository.athlete_exists(conn, athlete_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found.")
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="No competitions found for the specified athlete.",
    )


async def list_by_event(conn: asyncpg.Connection, event_id: int) -> list[dict[str, Any]]:
    rows = await repository.list_by_event(conn, event_id)
    if rows:
        return _decode_rows(rows)

    if not await event_repository.event_exists(conn, event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found.")
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="No athletes found for the specified event.",
    )


async def create_competition(conn: asyncpg.Connection, payload: schemas.CompetitionIn) -> dict[str, Any]:
    if not payload.athlete_id or not payload.event_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: athlete_id and event_id are required",
        )

    try:
        competition_id = await repository.create_competition(
            conn,
            athlete_id=payload.athlete_id,
            event_id=payload.event_id,
            score=encode_score(payload.score),
            remark=payload.remark,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_BAD_REFERENCE) from exc

    logger.info(
        "competition_created id=%s athlete_id=%s event_id=%s",
        competition_id,
        payload.athlete_id,
        payload.event_id,
    )
    return {"message": "Competition record created successfully", "id": competition_id}


async def update_competition(
    conn: asyncpg.Connection,
    competition_id: int,
    payload: schemas.CompetitionIn,
) -> dict[str, Any]:
    try:
        updated = await repository.replace_competition(
            conn,
            competition_id,
            athlete_id=payload.athlete_id,
            event_id=payload.event_id,
            score=encode_score(payload.score),
            remark=payload.remark,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_BAD_REFERENCE) from exc
    except asyncpg.NotNullViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="athlete_id and event_id are required",
        ) from exc

    if updated == 0:
        raise _not_found()
    logger.info("competition_updated id=%s", competition_id)
    return {"message": "Competition record updated successfully.", "id": competition_id}


async def delete_competition(conn: asyncpg.Connection, competition_id: int) -> dict[str, Any]:
    deleted = await repository.delete_competition(conn, competition_id)
    if deleted == 0:
        raise _not_found()
    logger.info("competition_deleted id=%s", competition_id)
    return {"message": "Competition record deleted successfully.", "id": competition_id}
