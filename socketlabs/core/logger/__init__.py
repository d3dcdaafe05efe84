from .logger import (
    AppLogger,
    add_log_file,
    disable_console_logging,
    enable_console_logging,
    get_logger,
    get_security_logger,
    log_injection_attempt,
    remove_log_file,
    set_log_level,
    truncate_api_key,
)

__all__ = [
    "AppLogger",
    "add_log_file",
    "disable_console_logging",
    "enable_console_logging",
    "get_logger",
    "get_security_logger",
    "log_injection_attempt",
    "remove_log_file",
    "set_log_level",
    "truncate_api_key",
]
