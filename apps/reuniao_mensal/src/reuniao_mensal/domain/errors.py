"""Domain exceptions used across API, CLI and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidRequestError(DomainError):
    """Raised when user sends semantically invalid input."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_REQUEST",
            message=message
            or compose_error_message(
                cause="Request data violates recurrence rules.",
                action="Adjust the input fields and try again.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class InvalidConfigurationError(DomainError):
    """Raised when a recurrence rule or zone cannot be configured."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_CONFIGURATION",
            message=message
            or compose_error_message(
                cause="Recurrence configuration is not valid.",
                action="Use an ordinal between 1 and 5 and a known timezone.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )


class InvalidStepsAheadError(DomainError):
    """Raised when a past occurrence is requested with negative steps."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_STEPS_AHEAD",
            message=message
            or compose_error_message(
                cause="steps_ahead must not be negative.",
                action="Request the current occurrence (0) or a future one.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )
