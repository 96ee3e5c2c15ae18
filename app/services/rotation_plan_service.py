"""Validated create/update/delete of rotation-plan records."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any

from app.errors import NotFound, ValidationError
from app.models.enums import CropStatusEnum, RecordKind
from app.models.records import MAX_SEQUENCE_LENGTH, CropRecord
from app.schemas.rotation import RotationPlanInput
from app.services.record_store import RotationRecordStore

DEFAULT_PLAN_DURATION_YEARS = 3
REQUIRED_SEQUENCE_SLOTS = 2

_logger = logging.getLogger("farmrotation.rotation_plans")


def _current_year() -> int:
	return date.today().year


class RotationPlanManager:
	"""Writes rotation plans through the record store.

	Input is validated completely before the store is touched, so a rejected
	request never leaves a partial write behind.
	"""

	def __init__(self, store: RotationRecordStore, current_year: Callable[[], int] = _current_year):
		self.store = store
		self.current_year = current_year

	def create_plan(self, payload: RotationPlanInput) -> CropRecord:
		fields = self._validated_fields(payload)
		plan = self.store.insert(
			{
				**fields,
				"kind": RecordKind.rotation_plan,
				"status": CropStatusEnum.planned,
			}
		)
		_logger.info("rotation_plan_created", extra={"plan_id": plan.id, "farm_id": plan.farm_id})
		return plan

	def update_plan(self, plan_id: int, payload: RotationPlanInput) -> CropRecord:
		fields = self._validated_fields(payload)
		self.get_plan(plan_id)
		plan = self.store.replace(plan_id, fields)
		_logger.info("rotation_plan_updated", extra={"plan_id": plan_id, "farm_id": plan.farm_id})
		return plan

	def delete_plan(self, plan_id: int) -> CropRecord:
		self.get_plan(plan_id)
		plan = self.store.remove(plan_id)
		_logger.info("rotation_plan_deleted", extra={"plan_id": plan_id})
		return plan

	def get_plan(self, plan_id: int) -> CropRecord:
		try:
			record = self.store.get(plan_id)
		except NotFound:
			raise NotFound(f"Rotation plan {plan_id} not found") from None
		if not record.is_plan:
			raise NotFound(f"Rotation plan {plan_id} not found")
		return record

	def _validated_fields(self, payload: RotationPlanInput) -> dict[str, Any]:
		farm_id = self._coerce_farm_id(payload.farm_id)
		sequence = self._clean_sequence(payload.crop_sequence)

		if payload.start_year is None:
			raise ValidationError("start_year", "is required")
		current = self.current_year()
		if payload.start_year < current:
			raise ValidationError("start_year", f"must be {current} or later")

		duration = payload.duration if payload.duration is not None else DEFAULT_PLAN_DURATION_YEARS
		if duration < 1:
			raise ValidationError("duration", "must be at least one year")

		return {
			"farm_id": farm_id,
			"crop_sequence": sequence,
			"start_year": payload.start_year,
			"duration": duration,
			"notes": payload.notes,
		}

	@staticmethod
	def _coerce_farm_id(raw: int | str | None) -> int:
		if raw is None or (isinstance(raw, str) and not raw.strip()):
			raise ValidationError("farm_id", "is required")
		try:
			return int(raw)
		except (TypeError, ValueError) as exc:
			raise ValidationError("farm_id", f"expected an integer, got {raw!r}") from exc

	@staticmethod
	def _clean_sequence(raw: list[str]) -> list[str]:
		if len(raw) > MAX_SEQUENCE_LENGTH:
			raise ValidationError(
				"crop_sequence",
				f"holds at most {MAX_SEQUENCE_LENGTH} entries",
			)
		slots = [(crop or "").strip() for crop in raw]
		slots += [""] * (MAX_SEQUENCE_LENGTH - len(slots))
		for year, crop in enumerate(slots[:REQUIRED_SEQUENCE_SLOTS], start=1):
			if not crop:
				raise ValidationError(f"crop_sequence[{year - 1}]", f"year {year} crop is required")
		return [crop for crop in slots if crop]
