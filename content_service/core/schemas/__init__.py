"""Shared response schemas."""

from content_service.core.schemas.problem_details import ProblemDetails

__all__ = ["ProblemDetails"]
