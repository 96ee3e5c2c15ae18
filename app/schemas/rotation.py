"""Pydantic schemas for rotation plans, enriched history, and chart payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.records import CropRecord


class YieldData(BaseModel):
	actual: float
	expected: int
	previous: int


class HistoryRecord(CropRecord):
	"""A harvested record with its derived soil-health score and yield figures."""

	soil_health_score: int = Field(ge=0, le=100)
	yield_data: YieldData


class RotationPlanInput(BaseModel):
	"""Raw plan form input.

	Kept deliberately loose so the plan manager can report failures per field
	(``farm_id`` may arrive as a numeric string, sequence slots may be blank).
	"""

	farm_id: int | str | None = None
	crop_sequence: list[str] = Field(default_factory=list)
	start_year: int | None = None
	duration: int | None = None
	notes: str | None = None


class RotationPlanListRead(BaseModel):
	items: list[CropRecord]
	total: int


class RotationHistoryRead(BaseModel):
	farm_id: int | None = None
	items: list[HistoryRecord] = Field(default_factory=list)


class ChartSeries(BaseModel):
	name: str
	type: str | None = None
	data: list[int | float] = Field(default_factory=list)


class TimelineChart(BaseModel):
	title: str = "Crop Rotation Impact Analysis"
	x_axis_title: str = "Planting Period"
	categories: list[str] = Field(default_factory=list)
	series: list[ChartSeries] = Field(default_factory=list)


class CategoryChart(BaseModel):
	title: str = "Soil Health Impact by Crop Type"
	x_axis_title: str = "Crop Types"
	categories: list[str] = Field(default_factory=list)
	series: list[ChartSeries] = Field(default_factory=list)
