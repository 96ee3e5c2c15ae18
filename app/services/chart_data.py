"""Shape enriched rotation history into chart series."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from app.models.records import CropRecord
from app.schemas.rotation import CategoryChart, ChartSeries, HistoryRecord, TimelineChart
from app.services import soil_health, yield_projection

TIMELINE_CATEGORY_FORMAT = "%b %Y"


def enrich(record: CropRecord) -> HistoryRecord:
	"""Attach the derived soil-health score and yield projection to a record."""
	return HistoryRecord(
		**record.model_dump(include=set(CropRecord.model_fields)),
		soil_health_score=soil_health.score(record.crop_type),
		yield_data=yield_projection.project(record.quantity),
	)


def enrich_all(records: Iterable[CropRecord]) -> list[HistoryRecord]:
	return [enrich(record) for record in records]


def _planting_order(record: HistoryRecord) -> tuple[bool, date]:
	return (record.planting_date is None, record.planting_date or date.min)


def build_timeline(history: Sequence[HistoryRecord]) -> TimelineChart:
	"""Soil-health line and yield columns over planting month, oldest first.

	Undated records sort last and are labelled ``"Undated"`` so every series
	stays index-aligned with the categories.
	"""
	ordered = sorted(history, key=_planting_order)
	categories = [
		record.planting_date.strftime(TIMELINE_CATEGORY_FORMAT) if record.planting_date else "Undated"
		for record in ordered
	]
	return TimelineChart(
		categories=categories,
		series=[
			ChartSeries(
				name="Soil Health Score",
				type="line",
				data=[record.soil_health_score for record in ordered],
			),
			ChartSeries(
				name="Yield",
				type="column",
				data=[record.yield_data.actual for record in ordered],
			),
		],
	)


def build_soil_health_by_crop(history: Sequence[HistoryRecord]) -> CategoryChart:
	"""Average soil-health score per crop type, in first-seen order."""
	scores_by_crop: dict[str, list[int]] = {}
	for record in history:
		if not record.is_harvested or record.is_plan or record.crop_type is None:
			continue
		scores_by_crop.setdefault(record.crop_type, []).append(record.soil_health_score)

	averages = [
		yield_projection.round_half_up(sum(scores) / len(scores))
		for scores in scores_by_crop.values()
	]
	return CategoryChart(
		categories=list(scores_by_crop),
		series=[ChartSeries(name="Average Soil Health Score", type="column", data=averages)],
	)
