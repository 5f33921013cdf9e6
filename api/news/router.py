"""
News API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/news", summary="Retrieve a list of all news items")
async def list_news(conn: asyncpg.Connection = Depends(db.get_connection)) -> list[dict]:
    return await service.list_news(conn)


@router.get("/news/{news_id}", summary="Retrieve a specific news item by ID")
async def get_news(
    news_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.get_news(conn, news_id)


@router.post("/news", status_code=status.HTTP_201_CREATED, summary="Create a news item")
async def create_news(
    request: schemas.NewsIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.create_news(conn, request)


@router.put("/news/{news_id}", summary="Update some fields of a news item")
async def update_news(
    news_id: int,
    request: schemas.NewsIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.update_news(conn, news_id, request)


@router.delete("/news/{news_id}", summary="Delete a news item")
async def delete_news(
    news_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.delete_news(conn, news_id)
