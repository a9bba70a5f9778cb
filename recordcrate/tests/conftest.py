"""
Pytest configuration and fixtures for recordcrate tests.
"""

from __future__ import annotations

import json

import pytest
from httpx import ASGITransport, AsyncClient

from recordcrate.api.app import app
from recordcrate.api.state import AppState, get_state
from recordcrate.client.api import RecordsClient
from recordcrate.models.record import Record

OK_COMPUTER = Record(album="OK Computer", artist="Radiohead", year="1997", genre="Rock")
KIND_OF_BLUE = Record(album="Kind of Blue", artist="Miles Davis", year="1959", genre="Jazz")


@pytest.fixture
def records() -> list[Record]:
    return [OK_COMPUTER, KIND_OF_BLUE]


def _write_fixture(path, records):
    path.write_text(json.dumps([r.model_dump() for r in records]))


@pytest.fixture
def app_state(tmp_path, records):
    """AppState over a temporary fixture and public dir, with no echo delay."""
    records_path = tmp_path / "records.json"
    _write_fixture(records_path, records)
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    state = AppState(records_path=records_path, public_dir=public_dir, create_delay_sec=0)
    app.dependency_overrides[get_state] = lambda: state
    yield state
    app.dependency_overrides.clear()


@pytest.fixture
def empty_fixture(app_state):
    """Server whose fixture is an empty list."""
    _write_fixture(app_state.records_path, [])
    return app_state


@pytest.fixture
async def client(app_state):
    """Raw HTTP client against the app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def records_client(app_state):
    """RecordsClient talking to the app in-process."""
    async with RecordsClient("http://test", transport=ASGITransport(app=app)) as rc:
        yield rc
