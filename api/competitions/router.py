"""
Competition API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter()


@router.get(
    "/competitions/athletes/{athlete_id}",
    summary="Retrieve all competitions an athlete takes part in",
)
async def list_competitions_for_athlete(
    athlete_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> list[dict]:
    return await service.list_by_athlete(conn, athlete_id)


@router.get(
    "/competitions/events/{event_id}",
    summary="Retrieve all athletes competing in an event",
)
async def list_competitions_for_event(
    event_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> list[dict]:
    return await service.list_by_event(conn, event_id)


@router.post("/competitions", status_code=status.HTTP_201_CREATED, summary="Register an athlete for an event")
async def create_competition(
    request: schemas.CompetitionIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.create_competition(conn, request)


@router.put("/competitions/{competition_id}", summary="Replace a competition record")
async def update_competition(
    competition_id: int,
    request: schemas.CompetitionIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.update_competition(conn, competition_id, request)


@router.delete("/competitions/{competition_id}", summary="Delete a competition record")
async def delete_competition(
    competition_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.delete_competition(conn, competition_id)
