"""
News business logic.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("topic", "content_text")


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="News item not found.")


async def list_news(conn: asyncpg.Connection) -> list[dict[str, Any]]:
    return await repository.list_news(conn)


async def get_news(conn: asyncpg.Connection, news_id: int) -> dict[str, Any]:
    row = await repository.get_news(conn, news_id)
    if row is None:
        raise _not_found()
    return row


async def create_news(conn: asyncpg.Connection, payload: schemas.NewsIn) -> dict[str, Any]:
    if not all(getattr(payload, name) for name in REQUIRED_FIELDS):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")

    news_id = await repository.create_news(conn, payload.model_dump())
    logger.info("news_created id=%s", news_id)
    return {"message": "News item created successfully", "id": news_id}


async def update_news(
    conn: asyncpg.Connection,
    news_id: int,
    payload: schemas.NewsIn,
) -> dict[str, Any]:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields provided for update.")
    if any(not changes[name] for name in REQUIRED_FIELDS if name in changes):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Required fields cannot be cleared.")

    updated = await repository.update_news(conn, news_id, changes)
    if updated == 0:
        raise _not_found()
    logger.info("news_updated id=%s fields=%s", news_id, ",".join(sorted(changes)))
    return {"message": "News item updated successfully.", "id": news_id}


async def delete_news(conn: asyncpg.Connection, news_id: int) -> dict[str, Any]:
    deleted = await repository.delete_news(conn, news_id)
    if deleted == 0:
        raise _not_found()
    logger.info("news_deleted id=%s", news_id)
    return {"message": "News item deleted successfully.", "id": news_id}
