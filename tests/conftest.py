"""Shared pytest fixtures — seeded record store and async test client."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_record_store
from app.main import app
from app.models.records import CropRecord
from app.services.record_store import RotationRecordStore
from app.services.rotation_plan_service import RotationPlanManager
from app.services.seed_loader import parse_seed_rows

SEED_ROWS: list[dict[str, Any]] = [
	{
		"Id": 1,
		"farmId": 1,
		"type": "Corn",
		"plantingDate": "2023-04-15",
		"expectedHarvest": "2023-09-20",
		"location": "North Field",
		"quantity": 100,
		"status": "harvested",
	},
	{
		"Id": 2,
		"farmId": 1,
		"type": "Soybeans",
		"plantingDate": "2024-05-01",
		"expectedHarvest": "2024-10-05",
		"location": "North Field",
		"quantity": 100,
		"status": "harvested",
	},
	{
		"Id": 3,
		"farmId": 2,
		"type": "Wheat",
		"plantingDate": "2023-10-10",
		"expectedHarvest": "2024-07-01",
		"location": "East Plot",
		"quantity": 200,
		"status": "harvested",
	},
	{
		"Id": 4,
		"farmId": 2,
		"type": "Potatoes",
		"plantingDate": "2026-04-02",
		"expectedHarvest": "2026-08-30",
		"location": "West Plot",
		"quantity": 0,
		"status": "growing",
	},
	{
		"Id": 5,
		"farmId": 1,
		"type": "rotation_plan",
		"status": "planned",
		"cropSequence": ["Corn", "Soybeans", "Wheat"],
		"startYear": 2027,
		"duration": 3,
		"notes": "Fix nitrogen after corn.",
	},
	{
		"Id": 6,
		"farmId": 2,
		"type": "rotation_plan",
		"status": "planned",
		"cropSequence": ["Wheat", "Oats"],
		"startYear": 2027,
		"duration": 2,
		"notes": "Cereal block for the east plot.",
	},
]


@pytest.fixture
def seed_records() -> list[CropRecord]:
	return parse_seed_rows(SEED_ROWS)


@pytest.fixture
def store(seed_records: list[CropRecord]) -> RotationRecordStore:
	"""A fresh in-memory store seeded with four crops and two plans."""
	return RotationRecordStore(seed_records)


@pytest.fixture
def plan_manager(store: RotationRecordStore) -> RotationPlanManager:
	"""Plan manager pinned to 2025 so year checks do not drift with the calendar."""
	return RotationPlanManager(store, current_year=lambda: 2025)


@pytest.fixture
async def client(store: RotationRecordStore) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and the record store injected."""

	app.dependency_overrides[get_record_store] = lambda: store
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
