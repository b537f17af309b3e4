"""
Test Configuration and Fixtures

This module provides:
- A session-scoped FastAPI TestClient running the real app lifespan (DI wiring)
- Per-test reset of the in-memory room repository for HTTP tests
- Shared room builders for domain and use case tests

Architecture:
- Unit tests (marked ``unit``): pure domain and use case tests, no HTTP client
- Integration tests: go through the TestClient or the real in-memory repository
"""

from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from src.service.room.domain.aggregate.room_aggregate import Room
from src.service.room.driven_adapter.repo.room_repo_in_memory_impl import RoomRepoInMemoryImpl


# Rows 1..4 spanning E, F, G, H: 26 seats, 3 preferential (valid between 2 and 5)
VALID_SEAT_CONFIG: list[dict[str, Any]] = [
    {'row_id': 1, 'last_column_letter': 'E', 'preferential_letters': ['A', 'B']},
    {'row_id': 2, 'last_column_letter': 'F', 'preferential_letters': ['C']},
    {'row_id': 3, 'last_column_letter': 'G', 'preferential_letters': []},
    {'row_id': 4, 'last_column_letter': 'H', 'preferential_letters': []},
]
VALID_SCREEN: dict[str, Any] = {'size': 20, 'type': '2D_3D'}


@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_room_repo(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Unit tests never touch the container
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    container.room_repo.reset()
    yield
    container.room_repo.reset()


@pytest.fixture
def seat_config() -> list[dict[str, Any]]:
    return [
        dict(row, preferential_letters=list(row['preferential_letters']))
        for row in VALID_SEAT_CONFIG
    ]


@pytest.fixture
def screen_config() -> dict[str, Any]:
    return dict(VALID_SCREEN)


@pytest.fixture
def room(seat_config: list[dict[str, Any]], screen_config: dict[str, Any]) -> Room:
    return Room.create(identifier=1, seat_config=seat_config, screen=screen_config).unwrap()


@pytest.fixture
def future_start() -> datetime:
    """A whole-hour UTC instant far enough ahead that nothing counts as past."""
    tomorrow = datetime.now(timezone.utc) + timedelta(days=2)
    return tomorrow.replace(hour=14, minute=0, second=0, microsecond=0)


@pytest.fixture
def room_repo() -> RoomRepoInMemoryImpl:
    return RoomRepoInMemoryImpl()
