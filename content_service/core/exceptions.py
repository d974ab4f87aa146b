"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=404,
            detail="Post not found",
            type="post-not-found",
            extra={"post_id": 42},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code."""
        titles = {
            400: "Bad Request",
            404: "Not Found",
            409: "Conflict",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            502: "Bad Gateway",
            503: "Service Unavailable",
        }
        return titles.get(status_code, "Error")


class NotFoundException(AppException):
    """Exception raised when a resource is not found.

    Node lookups never raise this; an unresolvable global id is a plain
    ``None``. Mutations that must act on an existing entity do.
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ValidationException(AppException):
    """Exception raised for validation errors.

    Example:
        raise ValidationException(
            detail="Option value is too long",
            type="validation-error",
            extra={"field": "value"},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        super().__init__(
            status_code=422,
            detail=detail,
            type=type,
            title="Validation Error",
            instance=instance,
            extra=extra,
        )


# ============================================================================
# Node identity and pagination errors
# ============================================================================


class InvalidTagError(ValidationException):
    """A node kind cannot be encoded (empty, or contains the separator)."""

    def __init__(self, tag: str, detail: str | None = None) -> None:
        super().__init__(
            detail=detail or f"Invalid node type tag: {tag!r}",
            type="invalid-tag",
            extra={"tag": tag},
        )
        self.tag = tag


class MalformedIdentifierError(ValidationException):
    """A global identifier is not a valid encoding of ``kind:local_id``."""

    def __init__(self, global_id: str, reason: str) -> None:
        super().__init__(
            detail=f"Malformed global identifier: {reason}",
            type="malformed-identifier",
            extra={"global_id": global_id},
        )
        self.global_id = global_id
        self.reason = reason


class UnknownTagError(ValidationException):
    """A global identifier decodes cleanly but names an unregistered kind."""

    def __init__(self, tag: str, known: list[str] | None = None) -> None:
        super().__init__(
            detail=f"Unknown node type: {tag!r}",
            type="unknown-tag",
            extra={"tag": tag, "known_tags": known or []},
        )
        self.tag = tag


class InvalidCursorError(ValidationException):
    """A connection cursor (``after``/``before``) cannot be decoded."""

    def __init__(self, cursor: str, argument: str | None = None) -> None:
        name = argument or "cursor"
        super().__init__(
            detail=f"Invalid cursor supplied for '{name}'",
            type="invalid-cursor",
            extra={"argument": name, "cursor": cursor},
        )
        self.cursor = cursor
        self.argument = argument


class InvalidArgumentError(ValidationException):
    """Paging counts or inputs are out of range."""

    def __init__(self, detail: str, argument: str | None = None) -> None:
        super().__init__(
            detail=detail,
            type="invalid-argument",
            extra={"argument": argument} if argument else None,
        )
        self.argument = argument


class RegistryConfigurationError(AppException):
    """The node registry was built with missing or overlapping kinds.

    Raised once at startup, never per request.
    """

    def __init__(self, detail: str, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            status_code=500,
            detail=detail,
            type="registry-configuration",
            title="Registry Misconfigured",
            extra=extra,
        )


__all__ = [
    "AppException",
    "InvalidArgumentError",
    "InvalidCursorError",
    "InvalidTagError",
    "MalformedIdentifierError",
    "NotFoundException",
    "RegistryConfigurationError",
    "UnknownTagError",
    "ValidationException",
]
