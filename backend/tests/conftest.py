from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from noteapp.screens.controllers import NoteSession
from noteapp.storage.event_log import EventLog
from noteapp.storage.notes_store import NotesStore


class TickingClock:
    """Clock that moves one second forward on every read."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture()
def clock():
    return TickingClock()


@pytest.fixture()
def store(clock):
    return NotesStore(clock=clock)


@pytest.fixture()
def session(store):
    return NoteSession(store=store, event_log=EventLog())


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # fresh app (and note session) per test, audit file in tmp
    monkeypatch.setenv("APP_EVENT_LOG", str(tmp_path / "events.log"))
    monkeypatch.delenv("APP_TITLE", raising=False)

    from noteapp.main import create_app

    return TestClient(create_app())
