"""
Athlete business logic: required-field checks and status mapping.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from core import security

from . import repository, schemas

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("email", "first_name", "last_name")


def _to_columns(payload: schemas.AthleteIn) -> dict[str, Any]:
    fields = payload.model_dump()
    password = fields.get("password")
    if password:
        try:
            fields["password"] = security.hash_password(password)
        except security.PasswordError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    else:
        fields["password"] = None
    return fields


async def list_athletes(conn: asyncpg.Connection) -> list[dict[str, Any]]:
    return await repository.list_athletes(conn)


async def get_athlete(conn: asyncpg.Connection, athlete_id: int) -> dict[str, Any]:
    row = await repository.get_athlete(conn, athlete_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found.")
    return row


async def create_athlete(conn: asyncpg.Connection, payload: schemas.AthleteIn) -> dict[str, Any]:
    if not all(getattr(payload, name) for name in REQUIRED_FIELDS):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")

    athlete_id = await repository.create_athlete(conn, _to_columns(payload))
    logger.info("athlete_created id=%s", athlete_id)
    return {"message": "Athlete created successfully", "id": athlete_id}


async def update_athlete(
    conn: asyncpg.Connection,
    athlete_id: int,
    payload: schemas.AthleteIn,
) -> dict[str, Any]:
    # Full replacement: fields left out of the body are written as NULL.
    updated = await repository.replace_athlete(conn, athlete_id, _to_columns(payload))
    if updated == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found.")
    logger.info("athlete_updated id=%s", athlete_id)
    return {"message": "Athlete updated successfully.", "id": athlete_id}


async def delete_athlete(conn: asyncpg.Connection, athlete_id: int) -> dict[str, Any]:
    deleted = await repository.delete_athlete(conn, athlete_id)
    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found.")
    logger.info("athlete_deleted id=%s", athlete_id)
    return {"message": "Athlete deleted successfully.", "id": athlete_id}
