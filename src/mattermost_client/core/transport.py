"""Sync HTTP transport producing response handles."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from ..config import MattermostClientConfig
from .errors import MattermostTransportError
from .response_handle import ResponseHandle

logger = logging.getLogger("mattermost_client")


class TransportClient(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> httpx.Response: ...

    def close(self) -> None: ...


def build_default_headers(config: MattermostClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json, text/plain",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
        "X-Requested-With": "XMLHttpRequest",
    }


def build_default_timeout(config: MattermostClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


class SyncTransport:
    """Synchronous transport for the Mattermost API.

    Performs exactly one exchange per call and never looks at the HTTP
    status; interpreting the body is left to :class:`ApiResponse`.
    """

    def __init__(
        self,
        config: MattermostClientConfig,
        *,
        client: TransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        normalized_base_url = config.base_url.rstrip("/") + "/"
        self._client = client or httpx.Client(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> ResponseHandle:
        if self._closed:
            raise MattermostTransportError("transport is already closed", cause="closed")

        normalized_endpoint = self._normalize_endpoint(endpoint)
        method = method.upper()
        logger.debug("request start method=%s endpoint=%s", method, normalized_endpoint)
        try:
            response = self._client.request(
                method,
                normalized_endpoint,
                params=params,
                json=json,
            )
        except httpx.HTTPError as exc:
            logger.error(
                "request network error method=%s endpoint=%s error=%s",
                method,
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise MattermostTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        logger.info(
            "response received method=%s endpoint=%s http_status=%s",
            method,
            normalized_endpoint,
            response.status_code,
        )
        return ResponseHandle(response)

    @staticmethod
    def _normalize_endpoint(endpoint: str) -> str:
        return endpoint.lstrip("/")


__all__ = [
    "TransportClient",
    "SyncTransport",
    "build_default_headers",
    "build_default_timeout",
]
