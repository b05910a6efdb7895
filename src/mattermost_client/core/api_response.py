"""Typed view over a completed API response."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Generic, TypeVar, get_origin

from .deserialization import TypeToken
from .errors import (
    ApiError,
    MattermostDeserializationError,
    MattermostTransportError,
)
from .media_type import TEXT_PLAIN
from .response_handle import ResponseHandle

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("mattermost_client")

STATUS = "status"
STATUS_OK = "ok"

_STATUS_MAP: TypeToken[dict[str, str] | None] = TypeToken(dict[str, str] | None)


class ApiResponse(ABC, Generic[T]):
    """API response.

    Built only through :meth:`of_class`, :meth:`of_type` and :meth:`of_value`;
    the three variants differ in how :meth:`read_entity` produces its value.
    """

    __slots__ = ("_response",)

    def __init__(self, response: ResponseHandle) -> None:
        self._response = response

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("ApiResponse variants are closed; use the ApiResponse.of_* factories")

    @abstractmethod
    def read_entity(self) -> T:
        """Return the typed body."""

    def read_error(self) -> ApiError:
        return self._response.read_body_as_class(ApiError)

    def has_error(self) -> bool:
        """Return True when the body parses as an :class:`ApiError`.

        The decision is content-based; the HTTP status is not consulted.
        The body is buffered first so it stays readable, and read or parse
        failures are reported as False.
        """

        try:
            self._response.buffer_body()
            self.read_error()
        except (MattermostTransportError, MattermostDeserializationError) as exc:
            logger.debug(
                "no api error in response http_status=%s reason=%s",
                self._response.status_code,
                exc.__class__.__name__,
            )
            return False
        return True

    def raw_response(self) -> ResponseHandle:
        return self._response

    def etag(self) -> str | None:
        return self._response.header("Etag")

    def check_status_ok(self) -> "ApiResponse[bool]":
        """Interpret the body as the standard ``ok`` acknowledgement."""

        response = self._response
        response.buffer_body()
        if TEXT_PLAIN.compatible_with(response.media_type()):
            success = response.read_body_as_text().rstrip().casefold() == STATUS_OK
        else:
            status_map = response.read_body_as_type_token(_STATUS_MAP)
            success = (
                status_map is not None
                and status_map.get(STATUS, "").casefold() == STATUS_OK
            )
        logger.debug(
            "status ok probe http_status=%s success=%s",
            response.status_code,
            success,
        )
        return ApiResponse.of_value(response, success)

    def close(self) -> None:
        self._response.close()

    def __enter__(self) -> "ApiResponse[T]":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    @staticmethod
    def of_class(response: ResponseHandle, entity_class: type[U]) -> "ApiResponse[U]":
        _require_handle(response)
        if not isinstance(entity_class, type) or get_origin(entity_class) is not None:
            raise TypeError("entity_class must be a class; use of_type for parametric types")
        return _EntityResponse(response, entity_class)

    @staticmethod
    def of_type(response: ResponseHandle, type_token: TypeToken[U]) -> "ApiResponse[U]":
        _require_handle(response)
        if not isinstance(type_token, TypeToken):
            raise TypeError("type_token must be a TypeToken")
        return _GenericResponse(response, type_token)

    @staticmethod
    def of_value(response: ResponseHandle, data: U) -> "ApiResponse[U]":
        _require_handle(response)
        return _SimpleResponse(response, data)


class _EntityResponse(ApiResponse[T]):
    __slots__ = ("_entity_class",)

    def __init__(self, response: ResponseHandle, entity_class: type[T]) -> None:
        super().__init__(response)
        self._entity_class = entity_class

    def read_entity(self) -> T:
        return self._response.read_body_as_class(self._entity_class)

    def __repr__(self) -> str:
        return f"<ApiResponse entity_class={self._entity_class.__qualname__} {self._response!r}>"


class _GenericResponse(ApiResponse[T]):
    __slots__ = ("_type_token",)

    def __init__(self, response: ResponseHandle, type_token: TypeToken[T]) -> None:
        super().__init__(response)
        self._type_token = type_token

    def read_entity(self) -> T:
        return self._response.read_body_as_type_token(self._type_token)

    def __repr__(self) -> str:
        return f"<ApiResponse type_token={self._type_token!r} {self._response!r}>"


class _SimpleResponse(ApiResponse[T]):
    __slots__ = ("_data",)

    def __init__(self, response: ResponseHandle, data: T) -> None:
        super().__init__(response)
        self._data = data

    def read_entity(self) -> T:
        return self._data

    def __repr__(self) -> str:
        return f"<ApiResponse data={self._data!r} {self._response!r}>"


def _require_handle(response: object) -> None:
    if not isinstance(response, ResponseHandle):
        raise TypeError("response must be a ResponseHandle")


__all__ = [
    "ApiResponse",
    "STATUS",
    "STATUS_OK",
]
