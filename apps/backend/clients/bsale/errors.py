from enum import Enum
from typing import Any, TypedDict


class FieldError(TypedDict, total=False):
    field: str
    message: str


class ErrorEnvelope(TypedDict, total=False):
    """Error body returned by the Bsale API on failure."""

    code: str | int
    message: str
    errors: list[FieldError]


class ErrorKind(str, Enum):
    BASE = "base"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    API = "api"


class BsaleError(Exception):
    """Base class for all Bsale API errors."""

    kind: ErrorKind = ErrorKind.BASE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BsaleAuthenticationError(BsaleError):
    """Raised on 401, or before any request when the access token has expired."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class BsaleAuthorizationError(BsaleError):
    """Raised on 403: the token lacks permission for the resource."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class BsaleNotFoundError(BsaleError):
    """Raised on 404."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str):
        super().__init__(f"Resource not found: {resource}")
        self.resource = resource


class BsaleValidationError(BsaleError):
    """Raised on 400 and 422. Field-level errors are kept when the API sends them."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: list[FieldError] | None = None):
        super().__init__(message)
        self.errors = errors


class BsaleRateLimitError(BsaleError):
    """Raised on 429 when the request quota is exceeded."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, retry_after: int | None = None):
        message = "Rate limit exceeded"
        if retry_after:
            message += f". Retry after {retry_after}s"
        super().__init__(message)
        self.retry_after = retry_after


class BsaleNetworkError(BsaleError):
    """Raised on timeouts or connection failures."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, original_error: BaseException | None = None):
        super().__init__(message)
        self.original_error = original_error


class BsaleAPIError(BsaleError):
    """Raised on any other non-2xx response (typically 5xx)."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: ErrorEnvelope | Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
