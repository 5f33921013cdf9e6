"""
Pydantic schemas for news endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class NewsIn(BaseModel):
    topic: str | None = None
    content_text: str | None = None
    picture: str | None = None
    remark: str | None = None
    date_time: datetime | None = None
