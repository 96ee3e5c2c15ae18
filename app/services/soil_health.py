"""Heuristic soil-health score per crop type.

The score looks only at the crop type of a single record.  Rotation order,
neighbouring seasons and farm soil data are ignored.
"""

from __future__ import annotations

DEFAULT_SOIL_HEALTH_SCORE = 70

SOIL_HEALTH_BY_CROP: dict[str, int] = {
	"Corn": 65,
	"Soybeans": 85,
	"Wheat": 75,
	"Tomatoes": 60,
	"Potatoes": 55,
	"Carrots": 70,
	"Lettuce": 80,
	"Peppers": 65,
	"Barley": 78,
	"Oats": 82,
}


def score(crop_type: str | None) -> int:
	"""Return the 0-100 soil-health score for ``crop_type`` (70 when unknown)."""
	if crop_type is None:
		return DEFAULT_SOIL_HEALTH_SCORE
	return SOIL_HEALTH_BY_CROP.get(crop_type, DEFAULT_SOIL_HEALTH_SCORE)
