"""Domain error taxonomy shared by services and routes."""

from __future__ import annotations


class NotFound(LookupError):
	"""Raised when an operation references a record id that does not exist."""


class ValidationError(ValueError):
	"""Raised when input fails a precondition; ``field`` names the offender."""

	def __init__(self, field: str, message: str):
		super().__init__(f"{field}: {message}")
		self.field = field
		self.message = message


class UpstreamUnavailable(RuntimeError):
	"""Raised when the seed dataset cannot be loaded at startup."""
