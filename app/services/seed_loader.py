"""Load the static crop dataset that seeds the in-memory store at startup."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from app.errors import UpstreamUnavailable
from app.models.enums import CropStatusEnum, RecordKind
from app.models.records import CropRecord
from app.services.rotation_plan_service import DEFAULT_PLAN_DURATION_YEARS

ROTATION_PLAN_SENTINEL = "rotation_plan"

_logger = logging.getLogger("farmrotation.seed_loader")


class SeedCropRow(BaseModel):
	"""One row of the external dataset, in its camelCase shape.

	``type`` carries either a crop type or the ``rotation_plan`` sentinel.
	"""

	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	id: int = Field(alias="Id")
	farm_id: int = Field(alias="farmId")
	type: str
	status: CropStatusEnum = CropStatusEnum.planted
	planting_date: date | None = Field(default=None, alias="plantingDate")
	expected_harvest: date | None = Field(default=None, alias="expectedHarvest")
	quantity: float = Field(default=0.0, ge=0, allow_inf_nan=False)
	location: str = ""
	crop_sequence: list[str] | None = Field(default=None, alias="cropSequence")
	start_year: int | None = Field(default=None, alias="startYear")
	duration: int | None = None
	notes: str | None = None

	def to_record(self) -> CropRecord:
		is_plan = self.type == ROTATION_PLAN_SENTINEL
		return CropRecord(
			id=self.id,
			farm_id=self.farm_id,
			kind=RecordKind.rotation_plan if is_plan else RecordKind.crop,
			crop_type=None if is_plan else self.type,
			status=self.status,
			planting_date=self.planting_date,
			expected_harvest=self.expected_harvest,
			quantity=self.quantity,
			location=self.location,
			crop_sequence=[crop for crop in self.crop_sequence if crop] if self.crop_sequence else None,
			start_year=self.start_year,
			duration=DEFAULT_PLAN_DURATION_YEARS if is_plan and self.duration is None else self.duration,
			notes=self.notes,
		)


def parse_seed_rows(rows: Any) -> list[CropRecord]:
	if not isinstance(rows, list):
		raise UpstreamUnavailable("seed dataset must be a JSON array of crop rows")
	try:
		return [SeedCropRow.model_validate(row).to_record() for row in rows]
	except PydanticValidationError as exc:
		raise UpstreamUnavailable(f"seed dataset is malformed: {exc}") from exc


def load_seed_records(path: Path) -> list[CropRecord]:
	"""Read and validate the seed file; any failure is fatal for startup."""
	try:
		raw = json.loads(Path(path).read_text(encoding="utf-8"))
	except OSError as exc:
		raise UpstreamUnavailable(f"seed dataset {path} could not be read: {exc}") from exc
	except json.JSONDecodeError as exc:
		raise UpstreamUnavailable(f"seed dataset {path} is not valid JSON: {exc}") from exc

	records = parse_seed_rows(raw)
	_logger.info("seed_loaded", extra={"path": str(path), "records": len(records)})
	return records
