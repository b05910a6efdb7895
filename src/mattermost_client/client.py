"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import TypeVar

from .config import MattermostClientConfig
from .core.api_response import ApiResponse
from .core.deserialization import TypeToken
from .core.errors import MattermostClientClosedError, MattermostValidationError
from .core.transport import SyncTransport

T = TypeVar("T")


def validate_client_config(config: MattermostClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise MattermostValidationError(str(exc)) from exc


class MattermostClient:
    """Public Mattermost API client."""

    def __init__(
        self,
        *,
        config: MattermostClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or MattermostClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False

    def get(
        self,
        endpoint: str,
        entity_class: type[T],
        *,
        params: Mapping[str, str] | None = None,
    ) -> ApiResponse[T]:
        self._ensure_open()
        response = self._transport.request("GET", endpoint, params=params)
        return ApiResponse.of_class(response, entity_class)

    def get_generic(
        self,
        endpoint: str,
        type_token: TypeToken[T],
        *,
        params: Mapping[str, str] | None = None,
    ) -> ApiResponse[T]:
        self._ensure_open()
        response = self._transport.request("GET", endpoint, params=params)
        return ApiResponse.of_type(response, type_token)

    def ping(self) -> ApiResponse[bool]:
        """Check server health; True when the server answers ``status: OK``."""

        self._ensure_open()
        response = self._transport.request("GET", "system/ping")
        return ApiResponse.of_class(response, dict).check_status_ok()

    def logout(self) -> ApiResponse[bool]:
        self._ensure_open()
        response = self._transport.request("POST", "users/logout")
        return ApiResponse.of_class(response, dict).check_status_ok()

    def _ensure_open(self) -> None:
        if self._closed:
            raise MattermostClientClosedError("MattermostClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "MattermostClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "MattermostClient",
    "validate_client_config",
]
