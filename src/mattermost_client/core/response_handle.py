"""Completed HTTP exchange as seen by the response wrapper."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from .deserialization import TypeToken, convert, decode_json, decode_text
from .errors import MattermostTransportError
from .media_type import MediaType

T = TypeVar("T")

logger = logging.getLogger("mattermost_client")


class ResponseHandle:
    """Wraps an ``httpx.Response`` with single-read body semantics.

    Without :meth:`buffer_body` the body can be read once; the first read
    releases the underlying response. After buffering, the bytes are kept
    and every read decodes them afresh, so callers never share a document.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._buffer: bytes | None = None
        self._consumed = False
        self._read_failed = False
        self._closed = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def is_buffered(self) -> bool:
        return self._buffer is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def http_response(self) -> httpx.Response:
        return self._response

    def header(self, name: str) -> str | None:
        return self._response.headers.get(name)

    def media_type(self) -> MediaType | None:
        return MediaType.parse(self.header("Content-Type"))

    def buffer_body(self) -> None:
        if self._buffer is not None:
            return
        self._buffer = self._read_bytes()
        logger.debug(
            "response body buffered http_status=%s size=%s",
            self.status_code,
            len(self._buffer),
        )

    def read_body_as_text(self) -> str:
        """Decode the body with the declared charset, falling back to UTF-8.

        Decoding is lossy: undecodable bytes become U+FFFD rather than
        raising.
        """

        media_type = self.media_type()
        charset = media_type.charset if media_type is not None else None
        return decode_text(self._read_bytes(), charset=charset)

    def read_body_as_class(self, entity_class: type[T]) -> T:
        if entity_class is str:
            return self.read_body_as_text()  # type: ignore[return-value]
        if entity_class is bytes:
            return self._read_bytes()  # type: ignore[return-value]
        return convert(self._read_document(), entity_class, http_status=self.status_code)

    def read_body_as_type_token(self, type_token: TypeToken[T]) -> T:
        return convert(self._read_document(), type_token.type, http_status=self.status_code)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._buffer = None
        self._response.close()

    def _read_document(self) -> Any:
        return decode_json(self._read_bytes(), http_status=self.status_code)

    def _read_bytes(self) -> bytes:
        if self._closed:
            raise MattermostTransportError(
                "response is already closed",
                http_status=self.status_code,
                cause="closed",
            )
        if self._buffer is not None:
            return self._buffer
        if self._read_failed:
            raise MattermostTransportError(
                "response body could not be read",
                http_status=self.status_code,
                cause="network",
            )
        if self._consumed:
            raise MattermostTransportError(
                "response body was already consumed; buffer it for repeated reads",
                http_status=self.status_code,
                cause="consumed",
            )
        try:
            body = self._response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            self._read_failed = True
            logger.warning(
                "response body read failed http_status=%s error=%s",
                self.status_code,
                exc.__class__.__name__,
            )
            raise MattermostTransportError(
                "response body could not be read",
                http_status=self.status_code,
                cause="network",
            ) from exc
        finally:
            self._response.close()
        self._consumed = True
        return body

    def __repr__(self) -> str:
        return (
            f"<ResponseHandle [{self.status_code}] buffered={self.is_buffered} "
            f"closed={self._closed}>"
        )


__all__ = [
    "ResponseHandle",
]
