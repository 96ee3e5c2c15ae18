"""FastAPI dependencies resolving per-process state."""

from __future__ import annotations

from fastapi import Depends, Request

from app.services.crop_service import CropService
from app.services.record_store import RotationRecordStore


def get_record_store(request: Request) -> RotationRecordStore:
	store = getattr(request.app.state, "record_store", None)
	if store is None:
		raise RuntimeError("record store is not initialized")
	return store


def get_crop_service(store: RotationRecordStore = Depends(get_record_store)) -> CropService:
	return CropService(store)
