"""
Shared fixtures.

Endpoint tests swap every repository function for an in-memory table so the
full router -> service -> repository chain runs without PostgreSQL.
Repository tests use `RecordingConnection` to inspect the SQL and bound
parameters instead.
"""

from __future__ import annotations

import copy
from typing import Any

import asyncpg
import pytest
from fastapi.testclient import TestClient

from athletes import repository as athlete_repository
from competitions import repository as competition_repository
from core import db
from events import repository as event_repository
from main import app
from news import repository as news_repository


class FakeTable:
    def __init__(self, columns: tuple[str, ...], not_null: tuple[str, ...] = ()) -> None:
        self.columns = columns
        self.not_null = not_null
        self.rows: dict[int, dict[str, Any]] = {}
        self._next_id = 1

    def _check_not_null(self, fields: dict[str, Any]) -> None:
        for column in self.not_null:
            if column in fields and fields[column] is None:
                raise asyncpg.NotNullViolationError(f"null value in column \"{column}\" violates not-null constraint")

    def insert(self, fields: dict[str, Any]) -> int:
        self._check_not_null({c: fields.get(c) for c in self.not_null})
        row_id = self._next_id
        self._next_id += 1
        self.rows[row_id] = {"id": row_id, **{c: fields.get(c) for c in self.columns}}
        return row_id

    def get(self, row_id: int) -> dict[str, Any] | None:
        row = self.rows.get(row_id)
        return copy.deepcopy(row) if row is not None else None

    def all(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(self.rows[k]) for k in sorted(self.rows)]

    def update(self, row_id: int, fields: dict[str, Any]) -> int:
        row = self.rows.get(row_id)
        if row is None:
            return 0
        self._check_not_null(fields)
        row.update({c: v for c, v in fields.items() if c in self.columns})
        return 1

    def delete(self, row_id: int) -> int:
        return 1 if self.rows.pop(row_id, None) is not None else 0


class FakeDatabase:
    def __init__(self) -> None:
        self.athletes = FakeTable(athlete_repository.COLUMNS)
        self.events = FakeTable(event_repository.COLUMNS, not_null=("event_date_time",))
        self.competes_in = FakeTable(("athlete_id", "event_id", "score", "remark"))
        self.news = FakeTable(news_repository.COLUMNS, not_null=("topic", "content_text"))

    def _check_references(self, athlete_id: int | None, event_id: int | None) -> None:
        if athlete_id is None or event_id is None:
            raise asyncpg.NotNullViolationError("null value violates not-null constraint")
        if athlete_id not in self.athletes.rows or event_id not in self.events.rows:
            raise asyncpg.ForeignKeyViolationError("insert or update violates foreign key constraint")

    def join(self, *, athlete_id: int | None = None, event_id: int | None = None) -> list[dict[str, Any]]:
        out = []
        for row in self.competes_in.all():
            if athlete_id is not None and row["athlete_id"] != athlete_id:
                continue
            if event_id is not None and row["event_id"] != event_id:
                continue
            athlete = self.athletes.rows[row["athlete_id"]]
            event = self.events.rows[row["event_id"]]
            out.append(
                {
                    "id": row["id"],
                    "athlete_id": athlete["id"],
                    "first_name": athlete["first_name"],
                    "last_name": athlete["last_name"],
                    "bib": athlete["bib"],
                    "country": athlete["country"],
                    "date_of_birth": athlete["date_of_birth"],
                    "score": row["score"],
                    "remark": row["remark"],
                    "event_id": event["id"],
                    "event_name": event["event_name"],
                    "event_class": event["event_class"],
                    "event_date_time": event["event_date_time"],
                    "event_gender": event["event_gender"],
                    "status": event["status"],
                }
            )
        return out

    def install(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def public(row: dict[str, Any] | None) -> dict[str, Any] | None:
            if row is not None:
                row.pop("password", None)
            return row

        async def list_athletes(conn):
            return [public(r) for r in self.athletes.all()]

        async def get_athlete(conn, athlete_id):
            return public(self.athletes.get(athlete_id))

        async def athlete_exists(conn, athlete_id):
            return athlete_id in self.athletes.rows

        async def create_athlete(conn, fields):
            return self.athletes.insert(fields)

        async def replace_athlete(conn, athlete_id, fields):
            return self.athletes.update(athlete_id, {c: fields.get(c) for c in athlete_repository.COLUMNS})

        async def delete_athlete(conn, athlete_id):
            return self.athletes.delete(athlete_id)

        monkeypatch.setattr(athlete_repository, "list_athletes", list_athletes)
        monkeypatch.setattr(athlete_repository, "get_athlete", get_athlete)
        monkeypatch.setattr(athlete_repository, "athlete_exists", athlete_exists)
        monkeypatch.setattr(athlete_repository, "create_athlete", create_athlete)
        monkeypatch.setattr(athlete_repository, "replace_athlete", replace_athlete)
        monkeypatch.setattr(athlete_repository, "delete_athlete", delete_athlete)

        async def list_events(conn):
            return self.events.all()

        async def get_event(conn, event_id):
            return self.events.get(event_id)

        async def event_exists(conn, event_id):
            return event_id in self.events.rows

        async def create_event(conn, fields):
            return self.events.insert(fields)

        async def update_event(conn, event_id, fields):
            return self.events.update(event_id, fields)

        async def delete_event(conn, event_id):
            return self.events.delete(event_id)

        monkeypatch.setattr(event_repository, "list_events", list_events)
        monkeypatch.setattr(event_repository, "get_event", get_event)
        monkeypatch.setattr(event_repository, "event_exists", event_exists)
        monkeypatch.setattr(event_repository, "create_event", create_event)
        monkeypatch.setattr(event_repository, "update_event", update_event)
        monkeypatch.setattr(event_repository, "delete_event", delete_event)

        async def list_by_athlete(conn, athlete_id):
            return self.join(athlete_id=athlete_id)

        async def list_by_event(conn, event_id):
            return self.join(event_id=event_id)

        async def create_competition(conn, *, athlete_id, event_id, score, remark):
            self._check_references(athlete_id, event_id)
            return self.competes_in.insert(
                {"athlete_id": athlete_id, "event_id": event_id, "score": score, "remark": remark}
            )

        async def replace_competition(conn, competition_id, *, athlete_id, event_id, score, remark):
            if competition_id not in self.competes_in.rows:
                return 0
            self._check_references(athlete_id, event_id)
            return self.competes_in.update(
                competition_id,
                {"athlete_id": athlete_id, "event_id": event_id, "score": score, "remark": remark},
            )

        async def delete_competition(conn, competition_id):
            return self.competes_in.delete(competition_id)

        monkeypatch.setattr(competition_repository, "list_by_athlete", list_by_athlete)
        monkeypatch.setattr(competition_repository, "list_by_event", list_by_event)
        monkeypatch.setattr(competition_repository, "create_competition", create_competition)
        monkeypatch.setattr(competition_repository, "replace_competition", replace_competition)
        monkeypatch.setattr(competition_repository, "delete_competition", delete_competition)

        async def list_news(conn):
            return self.news.all()

        async def get_news(conn, news_id):
            return self.news.get(news_id)

        async def create_news(conn, fields):
            return self.news.insert(fields)

        async def update_news(conn, news_id, fields):
            return self.news.update(news_id, fields)

        async def delete_news(conn, news_id):
            return self.news.delete(news_id)

        monkeypatch.setattr(news_repository, "list_news", list_news)
        monkeypatch.setattr(news_repository, "get_news", get_news)
        monkeypatch.setattr(news_repository, "create_news", create_news)
        monkeypatch.setattr(news_repository, "update_news", update_news)
        monkeypatch.setattr(news_repository, "delete_news", delete_news)


class RecordingConnection:
    """
    Stand-in for an asyncpg connection that records every call.

    `fetchrow_result`, `fetch_result` and `execute_status` control what the
    next calls return.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.fetchrow_result: dict[str, Any] | None = None
        self.fetch_result: list[dict[str, Any]] = []
        self.execute_status = "UPDATE 1"

    async def fetchrow(self, sql: str, *args: Any):
        self.calls.append(("fetchrow", sql, args))
        return self.fetchrow_result

    async def fetch(self, sql: str, *args: Any):
        self.calls.append(("fetch", sql, args))
        return self.fetch_result

    async def execute(self, sql: str, *args: Any):
        self.calls.append(("execute", sql, args))
        return self.execute_status

    @property
    def last(self) -> tuple[str, str, tuple[Any, ...]]:
        return self.calls[-1]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDatabase:
    database = FakeDatabase()
    database.install(monkeypatch)
    return database


@pytest.fixture
def client(fake_db: FakeDatabase):
    async def fake_connection():
        yield object()

    app.dependency_overrides[db.get_connection] = fake_connection
    try:
        # No context manager: the lifespan (real pool) is not started.
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def recording_conn() -> RecordingConnection:
    return RecordingConnection()
