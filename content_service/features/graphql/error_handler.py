"""GraphQL error handling and production error masking.

Application errors (``AppException`` with a 4xx status) are user-facing:
their ``type`` becomes ``extensions.code`` and their status
``extensions.status``. Anything else is internal and, in production, is
replaced by a generic message. Every error is logged server-side with full
details.

Usage:
    schema = ContentSchema(
        query=Query,
        mutation=Mutation,
        extensions=[ErrorFormattingExtension],
    )
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError
import strawberry
from strawberry.extensions import SchemaExtension

from content_service.core.exceptions import AppException
from content_service.core.settings import get_app_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred. Please try again later."


class ErrorCategory:
    """Error codes for errors that do not carry their own ``type``."""

    INTERNAL = "INTERNAL_ERROR"


# ============================================================================
# Error Classification
# ============================================================================


def is_user_facing_error(error: GraphQLError) -> bool:
    """Determine if error should be shown to the client as-is.

    User-facing errors are:
    - GraphQL syntax and validation errors (no original exception)
    - Application errors with a 4xx status

    Args:
        error: GraphQL error to check

    Returns:
        True if error is safe to show to user, False if it should be masked
    """
    original = error.original_error
    if original is None:
        return True
    return isinstance(original, AppException) and original.status_code < 500


def _rebuild(error: GraphQLError, message: str, extensions: dict[str, Any]) -> GraphQLError:
    return GraphQLError(
        message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=error.original_error,
        extensions={**(error.extensions or {}), **extensions},
    )


# ============================================================================
# Error Formatting
# ============================================================================


def format_error(error: GraphQLError, *, is_production: bool) -> GraphQLError:
    """Attach structured codes to an error, masking internals in production.

    Args:
        error: Original GraphQL error
        is_production: Whether internal details must be hidden

    Returns:
        Error safe to return to the client
    """
    original = error.original_error

    if isinstance(original, AppException) and original.status_code < 500:
        return _rebuild(
            error,
            original.detail,
            {"code": original.type, "status": original.status_code},
        )

    if original is None:
        return error

    if is_production:
        return mask_internal_error(error)

    return _rebuild(
        error,
        error.message,
        {
            "code": ErrorCategory.INTERNAL,
            "debug": {
                "exception_type": type(original).__name__,
                "exception_message": str(original),
            },
        },
    )


def mask_internal_error(error: GraphQLError) -> GraphQLError:
    """Replace internal error details with a generic message.

    Location and path are preserved; the original exception is dropped.
    """
    return GraphQLError(
        INTERNAL_ERROR_MESSAGE,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        extensions={"code": ErrorCategory.INTERNAL},
    )


# ============================================================================
# Error Logging
# ============================================================================


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log error with full details for server-side debugging.

    Args:
        error: GraphQL error to log
        execution_context: Execution context with operation info
    """
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_path": error.path,
    }

    if execution_context is not None:
        if execution_context.operation_name:
            log_context["operation_name"] = execution_context.operation_name
        correlation_id = getattr(execution_context.context, "correlation_id", None)
        if correlation_id:
            log_context["correlation_id"] = correlation_id

    original = error.original_error
    if original is not None:
        log_context["exception_type"] = type(original).__name__
        log_context["exception_message"] = str(original)

    if is_user_facing_error(error):
        logger.info("GraphQL user-facing error", extra=log_context)
        return

    if original is not None:
        log_context["stack_trace"] = "".join(
            traceback.format_exception(type(original), original, original.__traceback__),
        )
    logger.error("GraphQL internal error", extra=log_context)


# ============================================================================
# Schema integration
# ============================================================================


class ErrorFormattingExtension(SchemaExtension):
    """Rewrite result errors with ``format_error`` once the operation finishes."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if not errors:
            return
        is_production = get_app_settings().is_production
        result.errors = [format_error(error, is_production=is_production) for error in errors]


class ContentSchema(strawberry.Schema):
    """Schema that logs errors through ``log_error`` instead of Strawberry's logger."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


__all__ = [
    "ContentSchema",
    "ErrorCategory",
    "ErrorFormattingExtension",
    "format_error",
    "is_user_facing_error",
    "log_error",
    "mask_internal_error",
]
