from typing import Optional

BUG_REPORT_URL = "https://github.com/brizental/socketlabs-rs/issues"


class SocketLabsError(Exception):
    """Base class for every error raised by the injection client."""


class InvalidAddressError(SocketLabsError):
    def __init__(self, address: str, detail: str = ""):
        self.address = address
        self.detail = detail
        message = f"Invalid email address: {address!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MessageCountError(SocketLabsError):
    def __init__(self, message: str = "You must have at least one Message per Request."):
        super().__init__(message)


class MessageParsingError(SocketLabsError):
    """The provider's response body could not be decoded."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error parsing message {detail}")


class RequestError(SocketLabsError):
    """The HTTP exchange with the provider failed."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class TooManyRedirects(SocketLabsError):
    def __init__(
        self, message: str = "Server redirecting too many times or making loop."
    ):
        super().__init__(message)


class UnexpectedError(SocketLabsError):
    """
    Transport failure that fits none of the other categories.

    Seeing this usually means the transport library changed in a way the
    client does not know about yet.
    """

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = f"Unexpected error. Please file a bug at: {BUG_REPORT_URL}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
