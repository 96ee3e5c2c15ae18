"""Shared mapping from domain errors to HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from app.errors import ValidationError


def map_error(exc: Exception, fallback: str) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValidationError):
		return HTTPException(
			status_code=status.HTTP_400_BAD_REQUEST,
			detail={"error": "validation_error", "field": exc.field, "message": exc.message},
		)
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=fallback)
