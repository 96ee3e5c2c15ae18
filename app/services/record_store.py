"""In-memory record store shared by crops and rotation plans."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from app.errors import NotFound
from app.models.records import CropRecord

_logger = logging.getLogger("farmrotation.record_store")


class RotationRecordStore:
	"""Owns the mutable record collection and assigns record identities.

	Records are kept in an insertion-ordered dict keyed by id.  Ids come from a
	monotonic counter seeded from the largest id present at construction, so an
	id is never handed out twice even after the record holding it is removed.
	Every read returns deep copies; callers never see later mutations through a
	reference they already hold.
	"""

	def __init__(self, records: Iterable[CropRecord] = ()):
		self._lock = threading.RLock()
		self._records: dict[int, CropRecord] = {}
		for record in records:
			if record.id in self._records:
				raise ValueError(f"duplicate record id {record.id} in seed data")
			self._records[record.id] = record.model_copy(deep=True)
		self._last_id = max(self._records, default=0)

	def __len__(self) -> int:
		return len(self._records)

	@property
	def next_id(self) -> int:
		return self._last_id + 1

	def list(self) -> list[CropRecord]:
		with self._lock:
			return [record.model_copy(deep=True) for record in self._records.values()]

	def get(self, record_id: int) -> CropRecord:
		with self._lock:
			return self._require(record_id).model_copy(deep=True)

	def insert(self, partial: Mapping[str, Any]) -> CropRecord:
		with self._lock:
			fields = {key: value for key, value in partial.items() if key != "id"}
			fields.setdefault("created_at", datetime.now(UTC))
			record = CropRecord.model_validate({**fields, "id": self._last_id + 1})
			self._last_id = record.id
			self._records[record.id] = record
			_logger.info("record_inserted", extra={"record_id": record.id, "kind": record.kind.value})
			return record.model_copy(deep=True)

	def replace(self, record_id: int, partial: Mapping[str, Any]) -> CropRecord:
		with self._lock:
			existing = self._require(record_id)
			merged = existing.model_dump()
			merged.update({key: value for key, value in partial.items() if key != "id"})
			merged["updated_at"] = datetime.now(UTC)
			record = CropRecord.model_validate(merged)
			self._records[record_id] = record
			_logger.info("record_replaced", extra={"record_id": record_id, "fields": sorted(partial)})
			return record.model_copy(deep=True)

	def remove(self, record_id: int) -> CropRecord:
		with self._lock:
			self._require(record_id)
			record = self._records.pop(record_id)
			_logger.info("record_removed", extra={"record_id": record_id})
			return record

	def _require(self, record_id: int) -> CropRecord:
		record = self._records.get(record_id)
		if record is None:
			raise NotFound(f"Record {record_id} not found")
		return record
