"""
Athlete API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/athletes", summary="Retrieve a list of all athletes")
async def list_athletes(conn: asyncpg.Connection = Depends(db.get_connection)) -> list[dict]:
    return await service.list_athletes(conn)


@router.get("/athletes/{athlete_id}", summary="Retrieve a specific athlete by ID")
async def get_athlete(
    athlete_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.get_athlete(conn, athlete_id)


@router.post("/athletes", status_code=status.HTTP_201_CREATED, summary="Create a new athlete")
async def create_athlete(
    request: schemas.AthleteIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.create_athlete(conn, request)


@router.put("/athletes/{athlete_id}", summary="Replace an athlete's details")
async def update_athlete(
    athlete_id: int,
    request: schemas.AthleteIn,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.update_athlete(conn, athlete_id, request)


@router.delete("/athletes/{athlete_id}", summary="Delete an athlete")
async def delete_athlete(
    athlete_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    return await service.delete_athlete(conn, athlete_id)
