from typing import Any, Optional

from quart import jsonify

from multilingual_routes.utils.serialisation import get_exception_error_type


class HttpException(Exception):
    """An error that already knows its HTTP response: status code plus a JSON body."""

    status_code = 500

    def __init__(self, status_code: Optional[int] = None, *, error_type: Optional[str] = None,
                 message: Optional[str] = None, data: Optional[Any] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        self.error_type = error_type or get_exception_error_type(self)
        self.message = message
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        return {"error_type": self.error_type, "message": self.message, "data": self.data}

    def to_response(self):
        return jsonify(self.to_dict()), self.status_code


class ServerErrorException(HttpException):
    status_code = 500


class NotFoundException(HttpException):
    status_code = 404
