"""
Injection request: SocketLabs credentials plus the messages to send.
"""

from collections.abc import Iterator
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import Field, field_validator
from pydantic_core import PydanticSerializationError

from socketlabs.core import config
from socketlabs.core.exceptions import (
    MessageCountError,
    RequestError,
    SocketLabsError,
    UnexpectedError,
)
from socketlabs.core.logger import get_logger, log_injection_attempt, truncate_api_key

from .models.message import Message, WireModel
from .models.response import Response
from .transport import (
    DEFAULT_TIMEOUT,
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Transport,
    TransportResponse,
)

logger = get_logger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def _default_url() -> str:
    if config.settings is not None:
        return config.settings.api_url
    return config.DEFAULT_API_URL


def _default_timeout() -> float:
    if config.settings is not None:
        return config.settings.timeout
    return DEFAULT_TIMEOUT


class Request(WireModel):
    """
    Holds the Injection API credentials and the messages to send.

    A request needs at least one message. Sending the same request twice
    simply issues a second HTTP call.
    """

    server_id: int = Field(alias="ServerId", ge=0, le=config.MAX_SERVER_ID)
    api_key: str = Field(alias="ApiKey", repr=False)
    messages: List[Message] = Field(alias="Messages")

    @field_validator("messages", mode="before")
    @classmethod
    def validate_messages(cls, v):
        if isinstance(v, (list, tuple)) or isinstance(v, Iterator):
            v = list(v)
            if not v:
                raise MessageCountError()
        return v

    @classmethod
    def create(cls, server_id: int, api_key: str, messages: Iterable[Message]) -> "Request":
        return cls(server_id=server_id, api_key=api_key, messages=messages)

    @classmethod
    def from_settings(
        cls,
        messages: Sequence[Message],
        settings: Optional[config.Settings] = None,
    ) -> "Request":
        """Create a request using the credentials from the environment."""
        settings = settings or config.get_config()
        return cls.create(settings.server_id, settings.api_key, messages)

    def add_message(self, message: Message) -> None:
        self.messages.append(message)

    def to_payload(self) -> Dict:
        return self.to_wire()

    def _encode(self) -> bytes:
        try:
            return self.to_json().encode("utf-8")
        except PydanticSerializationError as e:
            logger.error(f"Failed to serialize injection request: {e}")
            raise UnexpectedError(f"Could not serialize request: {e}") from e

    def _log_attempt(self, status: str, details: str = "") -> None:
        log_injection_attempt(
            server_id=self.server_id,
            api_key_truncated=truncate_api_key(self.api_key),
            message_count=len(self.messages),
            status=status,
            details=details,
        )

    def _handle_response(self, result: TransportResponse) -> Response:
        if not result.is_success:
            snippet = result.body[:200].decode("utf-8", errors="replace")
            logger.error(
                f"SocketLabs responded with HTTP {result.status_code}: {snippet}"
            )
            self._log_attempt("FAILED", f"HTTP {result.status_code}")
            raise RequestError(
                f"Problem making request to SocketLabs: HTTP {result.status_code}",
                status_code=result.status_code,
            )

        response = Response.parse(result.body)
        self._log_attempt("SENT", response.error_code.value)

        if response.is_success:
            logger.info(f"Injection accepted for server {self.server_id}")
        else:
            logger.warning(
                f"Injection for server {self.server_id} returned {response.error_code.value}: "
                f"{response.error_code.description} (failed messages: {response.failed_indexes})"
            )
        return response

    def send(
        self, transport: Optional[Transport] = None, url: Optional[str] = None
    ) -> Response:
        """
        Send every message with a single POST to the Injection API.

        Raises:
            RequestError: The HTTP exchange failed or returned a non-2xx status.
            TooManyRedirects: The server kept redirecting.
            UnexpectedError: The transport failed in an unclassified way.
            MessageParsingError: The response body could not be decoded.
        """
        url = url or _default_url()
        transport = transport or HttpxTransport(timeout=_default_timeout())
        body = self._encode()

        logger.info(f"Injecting {len(self.messages)} message(s) for server {self.server_id}")
        try:
            result = transport.post(url, dict(JSON_HEADERS), body)
        except SocketLabsError as e:
            self._log_attempt("FAILED", type(e).__name__)
            raise

        return self._handle_response(result)

    async def send_async(
        self, transport: Optional[AsyncTransport] = None, url: Optional[str] = None
    ) -> Response:
        """Asynchronous version of ``send`` with the same error contract."""
        url = url or _default_url()
        transport = transport or AsyncHttpxTransport(timeout=_default_timeout())
        body = self._encode()

        logger.info(f"Injecting {len(self.messages)} message(s) for server {self.server_id}")
        try:
            result = await transport.post(url, dict(JSON_HEADERS), body)
        except SocketLabsError as e:
            self._log_attempt("FAILED", type(e).__name__)
            raise

        return self._handle_response(result)
