from __future__ import annotations

import json
from collections.abc import Iterator, Mapping

import httpx

from mattermost_client.core.response_handle import ResponseHandle


class FailingStream(httpx.SyncByteStream):
    def __iter__(self) -> Iterator[bytes]:
        raise httpx.ReadError("connection reset while reading body")


def make_response(
    body: bytes | str | object = b"",
    *,
    status_code: int = 200,
    content_type: str | None = "application/json",
    headers: Mapping[str, str] | None = None,
) -> httpx.Response:
    if isinstance(body, str):
        content = body.encode("utf-8")
    elif isinstance(body, bytes):
        content = body
    else:
        content = json.dumps(body).encode("utf-8")
    merged: dict[str, str] = {}
    if content_type is not None:
        merged["Content-Type"] = content_type
    merged.update(headers or {})
    return httpx.Response(status_code, headers=merged, content=content)


def make_handle(
    body: bytes | str | object = b"",
    *,
    status_code: int = 200,
    content_type: str | None = "application/json",
    headers: Mapping[str, str] | None = None,
) -> ResponseHandle:
    return ResponseHandle(
        make_response(
            body,
            status_code=status_code,
            content_type=content_type,
            headers=headers,
        )
    )


def make_failing_handle(*, content_type: str | None = "application/json") -> ResponseHandle:
    headers = {"Content-Type": content_type} if content_type is not None else {}
    return ResponseHandle(httpx.Response(200, headers=headers, stream=FailingStream()))
