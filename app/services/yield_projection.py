"""Yield projection derived from a harvested quantity."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from app.errors import ValidationError
from app.schemas.rotation import YieldData

EXPECTED_FACTOR = Decimal("0.95")
PREVIOUS_FACTOR = Decimal("0.88")


def round_half_up(value: Decimal | float | int) -> int:
	"""Round to the nearest integer, halves away from zero."""
	if not isinstance(value, Decimal):
		value = Decimal(str(value))
	return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def project(quantity: float) -> YieldData:
	if not math.isfinite(quantity):
		raise ValidationError("quantity", "must be a finite number")
	if quantity < 0:
		raise ValidationError("quantity", "must be non-negative")
	exact = Decimal(str(quantity))
	return YieldData(
		actual=quantity,
		expected=round_half_up(exact * EXPECTED_FACTOR),
		previous=round_half_up(exact * PREVIOUS_FACTOR),
	)
