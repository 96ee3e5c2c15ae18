"""Crop record CRUD routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies import get_crop_service
from app.models.records import CropRecord
from app.routes.errors import map_error
from app.schemas.crops import CropCreate, CropListRead, CropUpdate
from app.services.crop_service import CropService

router = APIRouter(prefix="/crops", tags=["crops"])


def _map_error(exc: Exception) -> HTTPException:
	return map_error(exc, "Unexpected crop service failure")


@router.get("", response_model=CropListRead)
async def list_crops(
	search: str | None = Query(default=None, max_length=100),
	crop_status: str | None = Query(default=None, alias="status"),
	service: CropService = Depends(get_crop_service),
) -> CropListRead:
	try:
		crops = service.search_crops(search, crop_status)
	except Exception as exc:
		raise _map_error(exc) from exc
	return CropListRead(items=crops, total=len(crops))


@router.post("", response_model=CropRecord, status_code=status.HTTP_201_CREATED)
async def create_crop(
	payload: CropCreate,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.create(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{record_id}", response_model=CropRecord)
async def get_crop(
	record_id: int,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.get_by_id(record_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.put("/{record_id}", response_model=CropRecord)
async def update_crop(
	record_id: int,
	payload: CropUpdate,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.update(record_id, payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.delete("/{record_id}", response_model=CropRecord)
async def delete_crop(
	record_id: int,
	service: CropService = Depends(get_crop_service),
) -> CropRecord:
	try:
		return service.delete(record_id)
	except Exception as exc:
		raise _map_error(exc) from exc
