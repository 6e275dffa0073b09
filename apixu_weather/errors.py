from enum import Enum
from typing import Any, Dict, Optional, Type


class ErrorKind(str, Enum):
    SUCCESS = "success"
    BAD_REQUEST = "bad_request"
    AUTHENTICATION_FAILED = "authentication_failed"
    QUOTA_EXCEEDED = "quota_exceeded"
    UPSTREAM_ERROR = "upstream_error"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSPORT_ERROR = "transport_error"


class WeatherError(RuntimeError):
    """Base error for a failed weather lookup."""

    kind = ErrorKind.UPSTREAM_ERROR
    default_message = "upstream error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(WeatherError):
    kind = ErrorKind.BAD_REQUEST
    default_message = "bad request"


class AuthenticationFailed(WeatherError):
    kind = ErrorKind.AUTHENTICATION_FAILED
    default_message = "authentication error"


class QuotaExceeded(WeatherError):
    kind = ErrorKind.QUOTA_EXCEEDED
    default_message = "API key exceeded monthly quota"


class UpstreamError(WeatherError):
    kind = ErrorKind.UPSTREAM_ERROR
    default_message = "upstream error"


class MalformedResponse(WeatherError):
    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = "malformed response"


class TransportError(WeatherError):
    kind = ErrorKind.TRANSPORT_ERROR
    default_message = "request failed before a response was received"


_ERRORS: Dict[ErrorKind, Type[WeatherError]] = {
    cls.kind: cls
    for cls in (BadRequest, AuthenticationFailed, QuotaExceeded, UpstreamError, MalformedResponse, TransportError)
}

_STATUS_KINDS = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.AUTHENTICATION_FAILED,
    403: ErrorKind.QUOTA_EXCEEDED,
}

# Codes documented for the Apixu error envelope.
_EMBEDDED_KINDS = {
    1002: ErrorKind.AUTHENTICATION_FAILED,  # key not provided
    1003: ErrorKind.BAD_REQUEST,  # q not provided
    1005: ErrorKind.BAD_REQUEST,  # request url invalid
    1006: ErrorKind.BAD_REQUEST,  # no location found
    2006: ErrorKind.AUTHENTICATION_FAILED,  # key invalid
    2007: ErrorKind.QUOTA_EXCEEDED,
    2008: ErrorKind.QUOTA_EXCEEDED,  # key disabled
}


def _embedded_kind(error_code: Any) -> Optional[ErrorKind]:
    if isinstance(error_code, bool):
        return None
    try:
        return _EMBEDDED_KINDS.get(int(error_code))
    except (TypeError, ValueError):
        return None


def classify(status_code: int, error_code: Any = None, has_error: bool = False) -> ErrorKind:
    """Map an HTTP status (and optional embedded error) onto an ErrorKind.

    An embedded error wins over the status: known embedded codes map to their
    own kind and anything else is UPSTREAM_ERROR.
    """
    if has_error or error_code is not None:
        return _embedded_kind(error_code) or ErrorKind.UPSTREAM_ERROR
    if 200 <= status_code < 300:
        return ErrorKind.SUCCESS
    return _STATUS_KINDS.get(status_code, ErrorKind.UPSTREAM_ERROR)


def error_for(kind: ErrorKind, message: Optional[str] = None) -> WeatherError:
    if kind is ErrorKind.SUCCESS:
        raise ValueError("no error to build for a successful response")
    return _ERRORS[kind](message)
