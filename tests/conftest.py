import types
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import pytest
import requests

from clockify_time_sheet.timesheet.model import RawEntry

BASE = datetime(2022, 10, 1, 8, 0, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Optional[Any] = None, text: str = ""):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text

    def json(self):
        return self._json_data

    def raise_for_status(self):
        if 400 <= self.status_code:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)


def at(minutes: int) -> datetime:
    """Minutes after 2022-10-01 08:00 UTC."""
    return BASE + timedelta(minutes=minutes)


def entry(task_id: str, start: int, end: int, description: str = None) -> RawEntry:
    return RawEntry(task_id, at(start), at(end), description or f"Task {task_id}")


@pytest.fixture
def fake_get(monkeypatch):
    """Route requests.get to a list of prepared responses and record the calls."""
    calls = []
    responses = []

    def get(url, params=None, headers=None, timeout=None):
        calls.append(types.SimpleNamespace(url=url, params=params, headers=headers, timeout=timeout))
        return responses.pop(0)

    monkeypatch.setattr("requests.get", get)
    return types.SimpleNamespace(calls=calls, responses=responses)


def _pin_timezone(monkeypatch, tz):
    import time
    if not hasattr(time, "tzset"):
        pytest.skip("local timezone cannot be changed on this platform")
    monkeypatch.setenv("TZ", tz)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def utc_local(monkeypatch):
    """Pin the local timezone to UTC so local conversions are deterministic."""
    yield from _pin_timezone(monkeypatch, "UTC")


@pytest.fixture
def berlin_local(monkeypatch):
    """Central European time, UTC+1 in winter and UTC+2 in summer."""
    yield from _pin_timezone(monkeypatch, "CET-1CEST,M3.5.0,M10.5.0/3")


__all__ = ["FakeResponse", "at", "entry"]
