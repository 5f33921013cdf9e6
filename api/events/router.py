"""
Event API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/events", summary="Retrieve a list of all events")
async def list_events(conn: asyncpg.Connection = Depends(db.get_connection)) -> list[dict]:
    return await service.list_events(conn)


@router.get("/events/{event_id}", summary="Retrieve a specific event by ID")
async def get_event(
    event_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.get_event(conn, event_id)


@router.post("/events", status_code=status.HTTP_201_CREATED, summary="Create a new event")
async def create_event(
    request: schemas.EventIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.create_event(conn, request)


@router.put("/events/{event_id}", summary="Update some fields of an event")
async def update_event(
    event_id: int,
    request: schemas.EventIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.update_event(conn, event_id, request)


@router.delete("/events/{event_id}", summary="Delete an event")
async def delete_event(
    event_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.delete_event(conn, event_id)
