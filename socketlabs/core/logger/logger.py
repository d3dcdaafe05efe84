import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "socketlabs"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class AppLogger:
    _instance: Optional["AppLogger"] = None
    _logger: Optional[logging.Logger] = None

    def __new__(cls) -> "AppLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._logger is None:
            self._setup_logger()

    def _setup_logger(self) -> None:
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.INFO)
        self._file_handlers = {}
        self._console_handler = None

        # Silent until the application opts in to console or file output.
        self._logger.addHandler(logging.NullHandler())

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def security_logger(self) -> logging.Logger:
        return logging.getLogger(f"{LOGGER_NAME}.security")

    def add_console_handler(self, level: str = "DEBUG") -> logging.Handler:
        if self._console_handler is not None:
            return self._console_handler

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(LEVEL_MAP.get(level.upper(), logging.DEBUG))

        simple_formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%H:%M:%S"
        )
        console_handler.setFormatter(simple_formatter)

        self._logger.addHandler(console_handler)
        self._console_handler = console_handler
        return console_handler

    def remove_console_handler(self) -> None:
        if self._console_handler is None:
            return
        self._logger.removeHandler(self._console_handler)
        self._console_handler.close()
        self._console_handler = None

    def set_level(self, level: str) -> None:
        """
        Set the logging level.

        Args:
            level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        """
        if level.upper() in LEVEL_MAP:
            self._logger.setLevel(LEVEL_MAP[level.upper()])
            self._logger.debug(f"Log level set to {level.upper()}")
        else:
            self._logger.warning(f"Invalid log level: {level}")

    def add_file_handler(
        self,
        filename: str,
        level: str = "DEBUG",
        log_dir: Union[str, Path] = "logs",
    ) -> logging.Handler:
        log_path = Path(log_dir) / filename
        if log_path in self._file_handlers:
            return self._file_handlers[log_path]

        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        handler.setLevel(LEVEL_MAP.get(level.upper(), logging.DEBUG))

        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(funcName)s() | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        self._logger.addHandler(handler)
        self._file_handlers[log_path] = handler
        self._logger.info(f"Added additional file handler: {log_path}")
        return handler

    def remove_file_handler(self, handler: logging.Handler) -> None:
        self._logger.removeHandler(handler)
        for path, known in list(self._file_handlers.items()):
            if known is handler:
                del self._file_handlers[path]
        handler.close()


_app_logger = AppLogger()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return _app_logger.logger.getChild(name)
    return _app_logger.logger


def get_security_logger() -> logging.Logger:
    return _app_logger.security_logger


def set_log_level(level: str) -> None:
    _app_logger.set_level(level)


def enable_console_logging(level: str = "DEBUG") -> logging.Handler:
    return _app_logger.add_console_handler(level)


def disable_console_logging() -> None:
    _app_logger.remove_console_handler()


def add_log_file(
    filename: str, level: str = "DEBUG", log_dir: Union[str, Path] = "logs"
) -> logging.Handler:
    return _app_logger.add_file_handler(filename, level, log_dir)


def remove_log_file(handler: logging.Handler) -> None:
    _app_logger.remove_file_handler(handler)


def truncate_api_key(api_key: Optional[str]) -> str:
    if not api_key:
        return "<none>"
    return f"{api_key[:4]}..." if len(api_key) > 4 else "****"


def log_injection_attempt(
    server_id: int,
    api_key_truncated: str,
    message_count: int,
    status: str = "SENT",
    details: str = "",
) -> None:
    security_logger = get_security_logger()
    security_logger.info(
        "INJECTION | Status: %s | ServerId: %s | API_Key: %s | Messages: %s | Details: %s",
        status,
        server_id,
        api_key_truncated,
        message_count,
        details,
    )
