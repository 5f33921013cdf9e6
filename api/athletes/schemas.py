"""
Athlete request models.

Every field is optional at the schema level; required-field checks live in
the service so that missing, null and empty values all produce the same 400.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class AthleteIn(BaseModel):
    email: str | None = Field(default=None, max_length=320)
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    avatar: str | None = None
    password: str | None = Field(default=None, max_length=128)
    country: str | None = None
    bib: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    coach: str | None = None
    sport_type: str | None = None
    affiliation: str | None = None
    phone_number: str | None = None
    disability_class: str | None = None
    equipment: str | None = None
    medicine: str | None = None
    remark: str | None = None
