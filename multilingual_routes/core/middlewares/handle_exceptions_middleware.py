import logging
import os
from typing import Any, Callable, Awaitable

from multilingual_routes.contracts.middleware import Middleware
from multilingual_routes.exceptions import HttpException, ServerErrorException
from multilingual_routes.exceptions.common_exceptions import AppException


class HandleExceptionsMiddleware(Middleware):
    """Middleware for handling exceptions for HTTP requests."""

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        try:
            return await next_handler(*args, **kwargs)
        except HttpException as e:
            return e.to_response()
        except AppException as e:
            logging.exception("Application exception while handling request", exc_info=e)
            if os.getenv("ENV") == "debug":
                raise e

            return e.to_response()
        except Exception as e:
            logging.exception("Unhandled exception while handling request", exc_info=e)
            if os.getenv("ENV") == "debug":
                raise e

            return ServerErrorException().to_response()
