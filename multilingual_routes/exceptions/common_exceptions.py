from typing import Any, Iterable, Optional

from multilingual_routes.exceptions.http_exceptions import HttpException
from multilingual_routes.utils.serialisation import get_exception_error_type


class AppException(Exception):
    """
    Base class for package errors.

    Raised from inside a request, HandleExceptionsMiddleware logs it and
    answers with ``http_status_code`` and a JSON body built from
    ``error_type`` (derived from the class name when not given),
    ``message`` and ``data``.
    """

    http_status_code = 500

    def __init__(self, message: str, *, http_status_code: Optional[int] = None,
                 error_type: Optional[str] = None, data: Optional[dict[str, Any]] = None):
        super().__init__(message)
        if http_status_code is not None:
            self.http_status_code = http_status_code
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data

    def to_http_exception(self) -> HttpException:
        return HttpException(self.http_status_code, error_type=self.error_type, message=self.message, data=self.data)

    def to_response(self):
        return self.to_http_exception().to_response()


class EnvInvalidException(ValueError):
    """An environment variable holds a value the configuration cannot use."""

    def __init__(self, env_name: str, value: Optional[str] = None, supported_values: Optional[Iterable[str]] = None):
        self.env_name = env_name
        self.value = value
        parts = [f"[ENV INVALID] `{env_name}`"]
        if value is not None:
            parts.append(f"has unsupported value `{value}`")
        if supported_values:
            parts.append(f"(expected one of: {', '.join(supported_values)})")
        super().__init__(" ".join(parts))
