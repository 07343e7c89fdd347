from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from labbook.infrastructure.store.memory_store import MemoryStorage
from labbook.infrastructure.store.seed_data import SEED_ASSETS
from labbook.main import app
from labbook.wiring.dependencies import get_storage


@pytest.fixture
def store() -> MemoryStorage:
    return MemoryStorage(seed_assets=SEED_ASSETS)


@pytest.fixture
def client(store: MemoryStorage):
    app.dependency_overrides[get_storage] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def booking_payload() -> dict:
    return {
        "assetId": 1,
        "userEmail": "alice@physics-lab.org",
        "purpose": "Characterise the PLL loop filter response",
        "bookingDate": "2025-01-10",
        "timeSlot": "10:00",
        "duration": 2,
    }
