"""
HTTP transport used to deliver an injection request.

A transport only has to POST bytes to a URL and hand back the status code
and body. Failures are raised as one of the client's own errors:

* ``TooManyRedirects`` when the server redirects in a loop,
* ``RequestError`` when the exchange with a known URL failed,
* ``UnexpectedError`` for anything the client cannot classify.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from socketlabs.core.exceptions import (
    RequestError,
    SocketLabsError,
    TooManyRedirects,
    UnexpectedError,
)
from socketlabs.core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_REDIRECTS = 10

HTTPX_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError)


@dataclass
class TransportResponse:
    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Blocking transport: one POST per call, no retries."""

    @abstractmethod
    def post(self, url: str, headers: Dict[str, str], body: bytes) -> TransportResponse:
        raise NotImplementedError


class AsyncTransport(ABC):
    """Asynchronous counterpart of ``Transport``."""

    @abstractmethod
    async def post(
        self, url: str, headers: Dict[str, str], body: bytes
    ) -> TransportResponse:
        raise NotImplementedError


def classify_httpx_error(error: Exception) -> SocketLabsError:
    """Map an httpx failure onto the client's error kinds."""
    if isinstance(error, httpx.TooManyRedirects):
        return TooManyRedirects()

    if isinstance(error, httpx.DecodingError):
        return UnexpectedError(f"Could not decode response: {error}")

    if isinstance(error, httpx.RequestError):
        try:
            url = error.request.url
        except RuntimeError:
            return UnexpectedError(str(error))
        return RequestError(f"Problem making request to SocketLabs ({url}): {error}")

    return UnexpectedError(str(error))


class HttpxTransport(Transport):
    """
    Transport built on ``httpx.Client``.

    Without a client, a new one is opened and closed for every call. A
    caller-supplied client is reused and left open.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ):
        self._client = client
        self._timeout = timeout
        self._max_redirects = max_redirects

    def _new_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            max_redirects=self._max_redirects,
        )

    def post(self, url: str, headers: Dict[str, str], body: bytes) -> TransportResponse:
        try:
            if self._client is not None:
                response = self._client.post(url, headers=headers, content=body)
            else:
                with self._new_client() as client:
                    response = client.post(url, headers=headers, content=body)
        except HTTPX_ERRORS as e:
            logger.error(f"HTTP error posting to {url}: {type(e).__name__}: {e}")
            raise classify_httpx_error(e) from e

        logger.debug(f"POST {url} returned {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.content)


class AsyncHttpxTransport(AsyncTransport):
    """Transport built on ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ):
        self._client = client
        self._timeout = timeout
        self._max_redirects = max_redirects

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            max_redirects=self._max_redirects,
        )

    async def post(
        self, url: str, headers: Dict[str, str], body: bytes
    ) -> TransportResponse:
        try:
            if self._client is not None:
                response = await self._client.post(url, headers=headers, content=body)
            else:
                async with self._new_client() as client:
                    response = await client.post(url, headers=headers, content=body)
        except HTTPX_ERRORS as e:
            logger.error(f"HTTP error posting to {url}: {type(e).__name__}: {e}")
            raise classify_httpx_error(e) from e

        logger.debug(f"POST {url} returned {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.content)
