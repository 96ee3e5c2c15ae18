"""CropRecord: the single entity type behind planted crops and rotation plans.

Plans and crops share one collection and one model.  ``kind`` tells them
apart; plan-only fields (``crop_sequence``, ``start_year``, ``duration``) stay
``None`` on crops, and ``crop_type`` stays ``None`` on plans.

Soil-health score and yield projection are never stored here; they are
derived on read (see ``app.schemas.rotation.HistoryRecord``).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, Field

from app.models.enums import CropStatusEnum, RecordKind

MAX_SEQUENCE_LENGTH = 3


class CropRecord(BaseModel):
    """A stored crop or rotation-plan record."""

    id: int
    farm_id: int
    kind: RecordKind = RecordKind.crop
    crop_type: str | None = None
    status: CropStatusEnum = CropStatusEnum.planted
    planting_date: date | None = None
    expected_harvest: date | None = None
    quantity: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    location: str = ""
    crop_sequence: Annotated[list[str], Field(max_length=MAX_SEQUENCE_LENGTH)] | None = None
    start_year: int | None = None
    duration: int | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_plan(self) -> bool:
        return self.kind == RecordKind.rotation_plan

    @property
    def is_harvested(self) -> bool:
        return self.status == CropStatusEnum.harvested

    def __repr__(self) -> str:
        return (
            f"<CropRecord id={self.id} farm={self.farm_id} "
            f"kind={self.kind.value!r} status={self.status.value!r}>"
        )
