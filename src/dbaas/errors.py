from __future__ import annotations

from enum import Enum

# Error titles returned by the API
ERROR_NOT_FOUND_TITLE = "Not Found"
ERROR_BAD_REQUEST_TITLE = "Bad Request"


class ErrorCategory(str, Enum):
    TRANSPORT = "transport"
    SERVER = "server"
    CLIENT = "client"
    DECODE = "decode"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"


class DBaaSError(Exception):
    """
    Base class for every error raised by this library.

    `category` tells which stage failed; `code`, `title` and `message`
    are filled from the API error body when there is one.
    """

    category: ErrorCategory = ErrorCategory.CLIENT

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        title: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.title = title


class TransportError(DBaaSError):
    """The HTTP request could not be completed at all."""

    category = ErrorCategory.TRANSPORT

    def __init__(self, message: str, *, method: str, path: str) -> None:
        super().__init__(message)
        self.method = method
        self.path = path


class ServiceError(DBaaSError):
    """
    The service answered with a 5xx status.

    The body is kept raw since its shape is not guaranteed.
    """

    category = ErrorCategory.SERVER

    def __init__(self, status_code: int, body: bytes, path: str) -> None:
        text = body.decode("utf-8", errors="replace")
        super().__init__(
            f"http status {status_code}: service failed.\n{text}\n{path}",
            code=status_code,
        )
        self.body = body
        self.path = path

    @property
    def status_code(self) -> int:
        return self.code or 0


class APIError(DBaaSError):
    """A 4xx response decoded from `{"error": {"code", "title", "message"}}`."""

    category = ErrorCategory.CLIENT

    def __init__(self, code: int, title: str, message: str) -> None:
        super().__init__(message, code=code, title=title)

    def __str__(self) -> str:
        return f"{self.title}: {self.message}. Code: {self.code}"

    @property
    def status_code(self) -> int:
        return self.code or 0


class BadRequestError(APIError):
    pass


class NotFoundError(APIError):
    pass


class DecodeError(DBaaSError):
    """A successful response could not be turned into the expected model."""

    category = ErrorCategory.DECODE


class InvalidIDError(DBaaSError, ValueError):
    category = ErrorCategory.VALIDATION


class ConfigurationError(DBaaSError):
    category = ErrorCategory.CONFIGURATION


_API_ERRORS_BY_CODE: dict[int, type[APIError]] = {
    400: BadRequestError,
    404: NotFoundError,
}


def api_error(code: int, title: str, message: str) -> APIError:
    """Builds the most specific APIError subclass for `code`."""
    error_cls = _API_ERRORS_BY_CODE.get(code, APIError)
    return error_cls(code=code, title=title, message=message)
