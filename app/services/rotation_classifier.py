"""Partition crop records into rotation plans and rotation history."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from app.models.records import CropRecord


@dataclass(slots=True)
class RotationPartition:
	plans: list[CropRecord] = field(default_factory=list)
	history: list[CropRecord] = field(default_factory=list)


def classify(records: Iterable[CropRecord], farm_id: int | None = None) -> RotationPartition:
	"""Split ``records`` into plans and harvested history, in store order.

	Each subset is selected by its own predicate; a record matching both lands
	in both lists.
	"""
	partition = RotationPartition()
	for record in records:
		if farm_id is not None and record.farm_id != farm_id:
			continue
		if record.is_plan:
			partition.plans.append(record)
		if record.is_harvested:
			partition.history.append(record)
	return partition
