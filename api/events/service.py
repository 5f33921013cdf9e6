"""
Event business logic.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("event_date_time",)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found.")


async def list_events(conn: asyncpg.Connection) -> list[dict[str, Any]]:
    return await repository.list_events(conn)


async def get_event(conn: asyncpg.Connection, event_id: int) -> dict[str, Any]:
    row = await repository.get_event(conn, event_id)
    if row is None:
        raise _not_found()
    return row


async def create_event(conn: asyncpg.Connection, payload: schemas.EventIn) -> dict[str, Any]:
    if not payload.event_date_time:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="event_date_time is required")

    event_id = await repository.create_event(conn, payload.model_dump())
    logger.info("event_created id=%s", event_id)
    return {"message": "Event added successfully.", "id": event_id}


async def update_event(
    conn: asyncpg.Connection,
    event_id: int,
    payload: schemas.EventIn,
) -> dict[str, Any]:
    # Only keys the client actually sent; an explicit null still clears the column.
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields provided for update.")
    if any(not changes[name] for name in REQUIRED_FIELDS if name in changes):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Required fields cannot be cleared.")

    updated = await repository.update_event(conn, event_id, changes)
    if updated == 0:
        raise _not_found()
    logger.info("event_updated id=%s fields=%s", event_id, ",".join(sorted(changes)))
    return {"message": "Event updated successfully.", "id": event_id}


async def delete_event(conn: asyncpg.Connection, event_id: int) -> dict[str, Any]:
    deleted = await repository.delete_event(conn, event_id)
    if deleted == 0:
        raise _not_found()
    logger.info("event_deleted id=%s", event_id)
    return {"message": "Event deleted successfully.", "id": event_id}
