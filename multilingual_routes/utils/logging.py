import logging
import os
import sys
from pathlib import Path

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s - %(name)s - %(message)s'

_log_file_path: Path | None = None


def resolve_log_file(log_file_name: str | None = None) -> Path:
    """``<PROJECT_ROOT or cwd>/log/<name>``; the name defaults to ``LOG_FILE_NAME`` or ``app.log``."""
    project_root = Path(os.getenv("PROJECT_ROOT") or os.getcwd())
    return project_root / "log" / (log_file_name or os.getenv("LOG_FILE_NAME", "app.log"))


def _log_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.critical("Uncaught exception crashed the application", exc_info=(exc_type, exc_value, exc_traceback))


def setup_logging(log_file_name: str | None = None) -> Path:
    """
    Route the root logger to ``log/<file>`` (plus the console when ``ENV=debug``).

    The level comes from ``LOG_LEVEL`` (default ``DEBUG``) so registration
    and locale fallback messages are visible during development. Calling it
    again with the same file is a no-op.

    Returns:
        The log file in use.
    """
    global _log_file_path

    log_file = resolve_log_file(log_file_name)
    if _log_file_path == log_file:
        return log_file

    log_file.parent.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [logging.FileHandler(str(log_file), mode='a')]
    handlers[0].setFormatter(logging.Formatter(FILE_FORMAT))
    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv('LOG_LEVEL', 'DEBUG').upper())
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    sys.excepthook = _log_uncaught_exception

    _log_file_path = log_file
    logging.info(f"Logging to {log_file}")
    return log_file


def get_log_file_path() -> Path | None:
    return _log_file_path
