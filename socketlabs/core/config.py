import os
from typing import Optional

from dotenv import load_dotenv

from socketlabs.core.logger import (
    add_log_file,
    enable_console_logging,
    get_logger,
    set_log_level,
)

load_dotenv()

logger = get_logger(__name__)

DEFAULT_API_URL = "https://inject.socketlabs.com/api/v1/email"
MAX_SERVER_ID = 65535


class ConfigurationError(Exception):
    pass


class Settings:
    def __init__(self):
        logger.debug("Loading client settings...")
        self.debug: bool = os.getenv("DEBUG", "false").lower() == "true"

        # Injection API credentials
        self._server_id: Optional[str] = os.getenv("SOCKETLABS_SERVER_ID")
        self._api_key: Optional[str] = os.getenv("SOCKETLABS_API_KEY")

        # Transport configuration
        self.api_url: str = os.getenv("SOCKETLABS_API_URL", DEFAULT_API_URL)
        self._timeout: str = os.getenv("SOCKETLABS_TIMEOUT", "30")

        # Logging configuration
        self.log_level: str = os.getenv("SOCKETLABS_LOG_LEVEL", "INFO").upper()
        self.log_file: Optional[str] = os.getenv("SOCKETLABS_LOG_FILE")

        self._validate_config()
        logger.debug("Client settings validated.")

    def _validate_config(self) -> None:
        logger.debug("Validating client configuration...")

        if not self.api_url.startswith(("http://", "https://")):
            logger.error(f"SOCKETLABS_API_URL must be an http(s) URL, got: {self.api_url}")
            raise ConfigurationError(
                f"SOCKETLABS_API_URL must be an http(s) URL, got: {self.api_url}"
            )

        try:
            self.timeout: float = float(self._timeout)
        except (ValueError, TypeError):
            logger.error(f"SOCKETLABS_TIMEOUT must be a number, got: {self._timeout}")
            raise ConfigurationError(
                f"SOCKETLABS_TIMEOUT must be a number, got: {self._timeout}"
            )

        if self.timeout <= 0:
            logger.error("SOCKETLABS_TIMEOUT must be greater than 0")
            raise ConfigurationError("SOCKETLABS_TIMEOUT must be greater than 0")

        if self._server_id is not None:
            self._parse_server_id(self._server_id)

        logger.debug("Client configuration validation complete.")

    @staticmethod
    def _parse_server_id(value: str) -> int:
        try:
            server_id = int(value)
        except (ValueError, TypeError):
            logger.error(f"SOCKETLABS_SERVER_ID must be a valid number, got: {value}")
            raise ConfigurationError(
                f"SOCKETLABS_SERVER_ID must be a valid number, got: {value}"
            )

        if not 0 <= server_id <= MAX_SERVER_ID:
            logger.error(f"SOCKETLABS_SERVER_ID out of range: {server_id}")
            raise ConfigurationError(
                f"SOCKETLABS_SERVER_ID must be between 0 and {MAX_SERVER_ID}, got: {server_id}"
            )
        return server_id

    def validate_credentials(self) -> bool:
        missing_vars = []
        if not self._server_id:
            missing_vars.append("SOCKETLABS_SERVER_ID")
        if not self._api_key:
            missing_vars.append("SOCKETLABS_API_KEY")

        if missing_vars:
            logger.error(f"Missing credentials: {', '.join(missing_vars)}")
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )
        return True

    def configure_logging(self) -> None:
        set_log_level("DEBUG" if self.debug else self.log_level)
        enable_console_logging()
        if self.log_file:
            add_log_file(self.log_file, level="DEBUG")

    @property
    def has_credentials(self) -> bool:
        return bool(self._server_id and self._api_key)

    @property
    def server_id(self) -> int:
        self.validate_credentials()
        return self._parse_server_id(self._server_id)

    @property
    def api_key(self) -> str:
        self.validate_credentials()
        return self._api_key


def get_config() -> Settings:
    """Get the global configuration settings."""
    if settings is None:
        logger.critical("Configuration is not properly initialized.")
        raise ConfigurationError("Configuration is not properly initialized")
    return settings


try:
    settings = Settings()
except ConfigurationError as e:
    logger.critical(f"Configuration Error: {e}")
    logger.critical("Please check your environment variables and try again.")
    settings = None
