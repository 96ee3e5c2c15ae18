"""Free-text and scope filters applied to records before display."""

from __future__ import annotations

from collections.abc import Iterable

from app.errors import ValidationError
from app.models.records import CropRecord

ALL_STATUSES = "all"


def _normalize_farm_id(farm_id: int | str | None) -> int | None:
	if farm_id is None or farm_id == "":
		return None
	try:
		return int(farm_id)
	except (TypeError, ValueError) as exc:
		raise ValidationError("farm_id", f"expected an integer, got {farm_id!r}") from exc


def _contains(haystack: str | None, needle: str) -> bool:
	return haystack is not None and needle in haystack.lower()


def plan_matches_search(plan: CropRecord, search_term: str | None) -> bool:
	if not search_term:
		return True
	needle = search_term.lower()
	if any(_contains(crop, needle) for crop in plan.crop_sequence or ()):
		return True
	return _contains(plan.notes, needle)


def filter_plans(
	plans: Iterable[CropRecord],
	search_term: str | None = None,
	farm_id: int | str | None = None,
) -> list[CropRecord]:
	"""Keep plans matching the search term AND the farm scope; blank criteria pass."""
	target_farm = _normalize_farm_id(farm_id)
	return [
		plan
		for plan in plans
		if plan_matches_search(plan, search_term)
		and (target_farm is None or plan.farm_id == target_farm)
	]


def filter_crops(
	crops: Iterable[CropRecord],
	search_term: str | None = None,
	status: str | None = None,
) -> list[CropRecord]:
	"""Match crop type or location case-insensitively, then narrow by status."""
	needle = (search_term or "").lower()
	result = []
	for crop in crops:
		if needle and not (_contains(crop.crop_type, needle) or _contains(crop.location, needle)):
			continue
		if status and status != ALL_STATUSES and crop.status.value != status:
			continue
		result.append(crop)
	return result
