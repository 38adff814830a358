"""
Pytest fixtures for the catalog tests.

Provides the five seed items, a temporary data file holding them, an
ItemStore over that file, and a FastAPI TestClient wired to it.
"""

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.store import ItemStore  # noqa: E402

SEED_ITEMS = [
    {"id": 1, "name": "Laptop Pro", "category": "Electronics", "price": 2499},
    {"id": 2, "name": "Noise Cancelling Headphones", "category": "Electronics", "price": 399},
    {"id": 3, "name": "Ultra-Wide Monitor", "category": "Electronics", "price": 999},
    {"id": 4, "name": "Ergonomic Chair", "category": "Furniture", "price": 799},
    {"id": 5, "name": "Standing Desk", "category": "Furniture", "price": 1199},
]


class StepClock:
    """Deterministic clock: each call returns a time one second later."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture()
def seed_items():
    return [dict(item) for item in SEED_ITEMS]


@pytest.fixture()
def data_file(tmp_path, seed_items) -> Path:
    """A temporary items.json holding the seed items."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps(seed_items, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def empty_data_file(tmp_path) -> Path:
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture()
def store(data_file) -> ItemStore:
    return ItemStore(data_file)


@pytest.fixture()
def clock():
    return StepClock()


@pytest.fixture()
def app(data_file, clock):
    from api.app import create_app
    return create_app(data_path=data_file, clock=clock)


@pytest.fixture()
def client(app):
    """TestClient over a fresh app backed by the seed data file."""
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c
