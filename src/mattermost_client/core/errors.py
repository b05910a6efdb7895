"""Error types and the application error payload."""

from __future__ import annotations

from dataclasses import dataclass


class MattermostClientError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class MattermostTransportError(MattermostClientError):
    """Body or network could not be read."""


class MattermostDeserializationError(MattermostClientError):
    """Body was read but does not match the requested shape."""


class MattermostClientClosedError(MattermostClientError):
    """Raised when client is used after close."""


class MattermostValidationError(MattermostClientError):
    """Invalid input / configuration rejected."""


class MattermostApplicationError(MattermostClientError):
    """Structured error returned by the remote service."""

    def __init__(self, error: "ApiError") -> None:
        super().__init__(
            error.message,
            http_status=error.status_code,
            cause="application",
        )
        self.error = error


@dataclass(slots=True, frozen=True)
class ApiError:
    """Application-level error payload.

    ``id``, ``message`` and ``status_code`` are required so that ordinary
    entity bodies are not mistaken for errors.
    """

    id: str
    message: str
    status_code: int
    detailed_error: str = ""
    request_id: str = ""
    is_oauth: bool = False

    def to_exception(self) -> MattermostApplicationError:
        return MattermostApplicationError(self)


__all__ = [
    "MattermostClientError",
    "MattermostTransportError",
    "MattermostDeserializationError",
    "MattermostClientClosedError",
    "MattermostValidationError",
    "MattermostApplicationError",
    "ApiError",
]
