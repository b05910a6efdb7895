"""Public package exports for the Mattermost API client."""

from .client import MattermostClient
from .config import MattermostClientConfig, TransportConfig
from .core.api_response import ApiResponse
from .core.deserialization import TypeToken
from .core.errors import (
    ApiError,
    MattermostApplicationError,
    MattermostClientClosedError,
    MattermostClientError,
    MattermostDeserializationError,
    MattermostTransportError,
    MattermostValidationError,
)
from .core.media_type import MediaType
from .core.response_handle import ResponseHandle

__all__ = [
    "MattermostClient",
    "MattermostClientConfig",
    "TransportConfig",
    "ApiResponse",
    "TypeToken",
    "ResponseHandle",
    "MediaType",
    "ApiError",
    "MattermostClientError",
    "MattermostTransportError",
    "MattermostDeserializationError",
    "MattermostClientClosedError",
    "MattermostValidationError",
    "MattermostApplicationError",
]
