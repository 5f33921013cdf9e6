"""
Pydantic schemas for event endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class EventIn(BaseModel):
    event_name: str | None = None
    event_class: str | None = None
    event_description: str | None = None
    event_date_time: datetime | None = None
    event_gender: str | None = None
    status: str | None = None
    event_location: str | None = None
    # Older clients send the sport foreign key as `SPORT_id`.
    sport_id: int | None = Field(default=None, validation_alias=AliasChoices("sport_id", "SPORT_id"))
