"""Rotation plan and rotation analytics routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies import get_crop_service
from app.models.records import CropRecord
from app.routes.errors import map_error
from app.schemas.rotation import (
	CategoryChart,
	RotationHistoryRead,
	RotationPlanInput,
	RotationPlanListRead,
	TimelineChart,
)
from app.services.crop_service import CropService

router = APIRouter(prefix="/rotation", tags=["rotation"])


def _map_error(exc: Exception) -> HTTPException:
	return map_error(exc, "rotation planner failure")


@router.get("/plans", response_model=RotationPlanListRead)
async def list_rotation_plans(
	search: str | None = Query(default=None, max_length=100),
	farm_id: int | None = Query(default=None),
	service: CropService = Depends(get_crop_service),
) -> RotationPlanListRead:
	try:
		plans = service.list_rotation_plans(search_term=search, farm_id=farm_id)
	except Exception as exc:
		raise _map_error(exc) from exc
	return RotationPlanListRead(items=plans, total=len(plans))


@router.post("/plans", response_model=CropRecord, status_code=status.HTTP_201_CREATED)
async def create_rotation_plan(
	payload: RotationPlanInput,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.create_rotation_plan(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/plans/{plan_id}", response_model=CropRecord)
async def get_rotation_plan(
	plan_id: int,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.get_rotation_plan_by_id(plan_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.put("/plans/{plan_id}", response_model=CropRecord)
async def update_rotation_plan(
	plan_id: int,
	payload: RotationPlanInput,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.update_rotation_plan(plan_id, payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.delete("/plans/{plan_id}", response_model=CropRecord)
async def delete_rotation_plan(
	plan_id: int,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.delete_rotation_plan(plan_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/history", response_model=RotationHistoryRead)
async def get_rotation_history(
	farm_id: int | None = Query(default=None),
	service: CropService = Depends(get_crop_service),
) -> RotationHistoryRead:
	try:
		items = service.get_rotation_history(farm_id)
	except Exception as exc:
		raise _map_error(exc) from exc
	return RotationHistoryRead(farm_id=farm_id, items=items)


@router.get("/charts/timeline", response_model=TimelineChart)
async def get_timeline_chart(
	farm_id: int | None = Query(default=None),
	service: CropService = Depends(get_crop_service),
) -> TimelineChart:
	try:
		return service.get_timeline_chart(farm_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/charts/soil-health", response_model=CategoryChart)
async def get_soil_health_chart(
	farm_id: int | None = Query(default=None),
	service: CropService = Depends(get_crop_service),
) -> CategoryChart:
	try:
		return service.get_soil_health_chart(farm_id)
	except Exception as exc:
		raise _map_error(exc) from exc
