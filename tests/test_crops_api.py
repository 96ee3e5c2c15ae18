from __future__ import annotations

import pytest
from httpx import AsyncClient

from app.services.record_store import RotationRecordStore


@pytest.mark.asyncio
async def test_list_crops_excludes_rotation_plans(client: AsyncClient) -> None:
    response = await client.get("/api/v1/crops")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 4
    assert [item["id"] for item in body["items"]] == [1, 2, 3, 4]
    assert all(item["kind"] == "crop" for item in body["items"])


@pytest.mark.asyncio
async def test_list_crops_filters_by_search_and_status(client: AsyncClient) -> None:
    response = await client.get("/api/v1/crops", params={"search": "field", "status": "harvested"})

    assert response.status_code == 200
    assert [item["crop_type"] for item in response.json()["items"]] == ["Corn", "Soybeans"]


@pytest.mark.asyncio
async def test_create_and_get_crop(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/crops",
        json={
            "farm_id": 3,
            "crop_type": "Carrots",
            "planting_date": "2026-05-01",
            "expected_harvest": "2026-08-01",
            "location": "Bed 4",
            "quantity": 40,
        },
    )

    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 7
    assert created["kind"] == "crop"
    assert created["status"] == "planted"

    fetched = await client.get(f"/api/v1/crops/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


@pytest.mark.asyncio
async def test_create_crop_rejects_negative_quantity(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/crops",
        json={"farm_id": 1, "crop_type": "Corn", "quantity": -3},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_crop_merges_fields(client: AsyncClient, store: RotationRecordStore) -> None:
    response = await client.put("/api/v1/crops/1", json={"quantity": 150})

    assert response.status_code == 200
    body = response.json()
    assert body["quantity"] == 150
    assert body["crop_type"] == "Corn"
    assert body["location"] == "North Field"
    assert store.get(1).quantity == 150


@pytest.mark.asyncio
async def test_delete_crop_then_get_is_404(client: AsyncClient) -> None:
    deleted = await client.delete("/api/v1/crops/3")
    assert deleted.status_code == 200
    assert deleted.json()["crop_type"] == "Wheat"

    missing = await client.get("/api/v1/crops/3")
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["get", "delete"])
async def test_unknown_crop_maps_to_404(client: AsyncClient, method: str) -> None:
    response = await getattr(client, method)("/api/v1/crops/404")
    assert response.status_code == 404
    assert "404" in response.json()["detail"]


@pytest.mark.asyncio
async def test_update_unknown_crop_maps_to_404(client: AsyncClient) -> None:
    response = await client.put("/api/v1/crops/404", json={"quantity": 1})
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", ["1e999", "-1e999", "NaN"])
async def test_create_crop_rejects_non_finite_quantity(
    client: AsyncClient,
    store: RotationRecordStore,
    quantity: str,
) -> None:
    body = '{"farm_id": 1, "crop_type": "Corn", "status": "harvested", "quantity": %s}' % quantity
    response = await client.post(
        "/api/v1/crops",
        content=body,
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422
    assert len(store) == 6

    history = await client.get("/api/v1/rotation/history")
    assert history.status_code == 200


@pytest.mark.asyncio
async def test_update_crop_rejects_infinite_quantity(client: AsyncClient, store: RotationRecordStore) -> None:
    response = await client.put(
        "/api/v1/crops/1",
        content='{"quantity": 1e999}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422
    assert store.get(1).quantity == 100
