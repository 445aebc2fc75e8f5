from __future__ import annotations

import itertools
from datetime import date

import pytest

from src.church_attendance.church_attendance.attendance.memory_repository import InMemoryAttendanceRepository
from src.church_attendance.church_attendance.attendance.model import AttendanceEntry, AttendanceRecord
from src.church_attendance.church_attendance.attendance.service import AttendanceService


@pytest.fixture
def make_record():
    ids = itertools.count(1)

    def _make(service_date: date, **counts) -> AttendanceRecord:
        return AttendanceRecord(record_id=f"r{next(ids)}", service_date=service_date, **counts)

    return _make


@pytest.fixture
def repo() -> InMemoryAttendanceRepository:
    return InMemoryAttendanceRepository()


@pytest.fixture
def service(repo) -> AttendanceService:
    ids = itertools.count(1)
    return AttendanceService(repo, id_factory=lambda: f"id-{next(ids)}")


@pytest.fixture
def entry():
    def _entry(service_date: date, **counts) -> AttendanceEntry:
        return AttendanceEntry(service_date=service_date, **counts)

    return _entry


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.church_attendance.church_attendance.main import create_app

    flask_app = create_app()
    return flask_app


@pytest.fixture
def client(app, monkeypatch):
    monkeypatch.setattr(
        "src.church_attendance.church_attendance.attendance.controller.today_local",
        lambda: date(2024, 1, 30),
    )
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["church_attendance"]
