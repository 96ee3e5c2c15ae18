from __future__ import annotations

import pytest

from app.errors import ValidationError
from app.services import soil_health, yield_projection
from app.services.yield_projection import round_half_up


@pytest.mark.parametrize(
	("crop_type", "expected"),
	[
		("Corn", 65),
		("Soybeans", 85),
		("Wheat", 75),
		("Tomatoes", 60),
		("Potatoes", 55),
		("Carrots", 70),
		("Lettuce", 80),
		("Peppers", 65),
		("Barley", 78),
		("Oats", 82),
	],
)
def test_score_uses_lookup_table(crop_type: str, expected: int) -> None:
	assert soil_health.score(crop_type) == expected


@pytest.mark.parametrize("crop_type", ["Rice", "Spinach", "corn", "", None])
def test_unknown_crop_types_score_default(crop_type: str | None) -> None:
	assert soil_health.score(crop_type) == 70


def test_score_is_deterministic() -> None:
	assert {soil_health.score("Barley") for _ in range(5)} == {78}


def test_project_applies_expected_and_previous_factors() -> None:
	data = yield_projection.project(100)
	assert data.actual == 100
	assert data.expected == 95
	assert data.previous == 88


def test_project_zero_quantity() -> None:
	data = yield_projection.project(0)
	assert (data.actual, data.expected, data.previous) == (0, 0, 0)


def test_project_rounds_halves_up() -> None:
	data = yield_projection.project(10)
	assert data.expected == 10
	assert data.previous == 9

	fractional = yield_projection.project(12.5)
	assert fractional.actual == 12.5
	assert fractional.expected == 12
	assert fractional.previous == 11


def test_project_rejects_negative_quantity() -> None:
	with pytest.raises(ValidationError) as exc_info:
		yield_projection.project(-1)
	assert exc_info.value.field == "quantity"


def test_round_half_up_helper() -> None:
	assert round_half_up(2.5) == 3
	assert round_half_up(67.5) == 68
	assert round_half_up(67.49) == 67


@pytest.mark.parametrize("quantity", [float("inf"), float("nan")])
def test_project_rejects_non_finite_quantity(quantity: float) -> None:
	with pytest.raises(ValidationError) as exc_info:
		yield_projection.project(quantity)
	assert exc_info.value.field == "quantity"
