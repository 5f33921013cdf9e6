"""
Pydantic schemas for competition (competes_in) endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CompetitionIn(BaseModel):
    athlete_id: int | None = None
    event_id: int | None = None
    # Free-form result payload, e.g. {"points": 10} or {"time": "10.52"}.
    score: Any = None
    remark: str | None = None
