"""Pydantic request/response schemas for ordinary crop records."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from app.models.enums import CropStatusEnum
from app.models.records import CropRecord


class CropCreate(BaseModel):
	farm_id: int
	crop_type: str = Field(min_length=1, max_length=100)
	status: CropStatusEnum = CropStatusEnum.planted
	planting_date: date | None = None
	expected_harvest: date | None = None
	location: str = Field(default="", max_length=255)
	quantity: float = Field(default=0.0, ge=0, allow_inf_nan=False)
	notes: str | None = None


class CropUpdate(BaseModel):
	farm_id: int | None = None
	crop_type: str | None = Field(default=None, min_length=1, max_length=100)
	status: CropStatusEnum | None = None
	planting_date: date | None = None
	expected_harvest: date | None = None
	location: str | None = Field(default=None, max_length=255)
	quantity: float | None = Field(default=None, ge=0, allow_inf_nan=False)
	notes: str | None = None


class CropListRead(BaseModel):
	items: list[CropRecord]
	total: int
