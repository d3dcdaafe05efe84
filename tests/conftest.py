"""
Pytest configuration and fixtures for all tests.
"""

import json
import os
import sys

import httpx
import pytest

# Make the repository root importable before any imports of the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Set up test environment variables before importing any modules
os.environ.setdefault("SOCKETLABS_SERVER_ID", "12345")
os.environ.setdefault("SOCKETLABS_API_KEY", "test-api-key")
os.environ.setdefault("SOCKETLABS_LOG_LEVEL", "WARNING")

from socketlabs import Message  # noqa: E402
from socketlabs.core.logger import disable_console_logging  # noqa: E402

INJECTION_URL = "https://inject.socketlabs.com/api/v1/email"

SUCCESS_BODY = {"ErrorCode": "Success", "TransactionReceipt": None, "MessageResults": None}


@pytest.fixture
def message():
    """The message from the basic end-to-end scenario."""
    message = Message.create("a@example.com")
    message.add_to("b@example.com")
    message.set_subject("Hi")
    message.set_text("Hello")
    return message


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def mock_handler(recorded_requests):
    """Build an httpx handler that records requests and answers with ``body``."""

    def build(body=None, status_code=200):
        payload = SUCCESS_BODY if body is None else body

        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if isinstance(payload, (bytes, str)):
                return httpx.Response(status_code, content=payload)
            return httpx.Response(status_code, content=json.dumps(payload).encode())

        return handler

    return build


@pytest.fixture(autouse=True)
def quiet_console():
    """Drop any console handler a test enabled so later tests start silent."""
    yield
    disable_console_logging()
