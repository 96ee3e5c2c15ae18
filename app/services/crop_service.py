"""Crop records and rotation analytics, as exposed to the routes."""

from __future__ import annotations

from app.models.enums import RecordKind
from app.models.records import CropRecord
from app.schemas.crops import CropCreate, CropUpdate
from app.schemas.rotation import (
	CategoryChart,
	HistoryRecord,
	RotationPlanInput,
	TimelineChart,
)
from app.services import chart_data, query_filter
from app.services.record_store import RotationRecordStore
from app.services.rotation_classifier import classify
from app.services.rotation_plan_service import RotationPlanManager


class CropService:
	"""Service for crop CRUD, rotation plans, and history analytics."""

	def __init__(self, store: RotationRecordStore, plans: RotationPlanManager | None = None):
		self.store = store
		self.plans = plans or RotationPlanManager(store)

	# ── Crop CRUD ───────────────────────────────────────────────────────────

	def list_all(self) -> list[CropRecord]:
		return self.store.list()

	def search_crops(self, search_term: str | None = None, status: str | None = None) -> list[CropRecord]:
		crops = [record for record in self.store.list() if not record.is_plan]
		return query_filter.filter_crops(crops, search_term, status)

	def get_by_id(self, record_id: int) -> CropRecord:
		return self.store.get(record_id)

	def create(self, payload: CropCreate) -> CropRecord:
		return self.store.insert({**payload.model_dump(), "kind": RecordKind.crop})

	def update(self, record_id: int, payload: CropUpdate) -> CropRecord:
		return self.store.replace(record_id, payload.model_dump(exclude_unset=True))

	def delete(self, record_id: int) -> CropRecord:
		return self.store.remove(record_id)

	# ── Rotation plans ──────────────────────────────────────────────────────

	def list_rotation_plans(
		self,
		search_term: str | None = None,
		farm_id: int | str | None = None,
	) -> list[CropRecord]:
		plans = classify(self.store.list()).plans
		return query_filter.filter_plans(plans, search_term=search_term, farm_id=farm_id)

	def get_rotation_plan_by_id(self, plan_id: int) -> CropRecord:
		return self.plans.get_plan(plan_id)

	def create_rotation_plan(self, payload: RotationPlanInput) -> CropRecord:
		return self.plans.create_plan(payload)

	def update_rotation_plan(self, plan_id: int, payload: RotationPlanInput) -> CropRecord:
		return self.plans.update_plan(plan_id, payload)

	def delete_rotation_plan(self, plan_id: int) -> CropRecord:
		return self.plans.delete_plan(plan_id)

	# ── History analytics ───────────────────────────────────────────────────

	def get_rotation_history(self, farm_id: int | None = None) -> list[HistoryRecord]:
		history = classify(self.store.list(), farm_id=farm_id).history
		return chart_data.enrich_all(history)

	def get_timeline_chart(self, farm_id: int | None = None) -> TimelineChart:
		return chart_data.build_timeline(self.get_rotation_history(farm_id))

	def get_soil_health_chart(self, farm_id: int | None = None) -> CategoryChart:
		return chart_data.build_soil_health_by_crop(self.get_rotation_history(farm_id))
