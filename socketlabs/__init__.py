"""
Unofficial Python client for the SocketLabs API.

Supported APIs:

* Injection

Unsupported APIs:

* Notification
* Marketing
* Inbound
* Reporting
* On-Demand
"""

from socketlabs.core.exceptions import (
    InvalidAddressError,
    MessageCountError,
    MessageParsingError,
    RequestError,
    SocketLabsError,
    TooManyRedirects,
    UnexpectedError,
)
from socketlabs.modules.injection import (
    DELIVERY_ADDRESS_FIELD,
    AddressResult,
    AddressResultErrorCode,
    AsyncHttpxTransport,
    AsyncTransport,
    Attachment,
    CustomHeader,
    Data,
    Email,
    HttpxTransport,
    MergeData,
    Message,
    MessageResult,
    MessageResultErrorCode,
    PostMessageErrorCode,
    Request,
    Response,
    Transport,
    TransportResponse,
)

__version__ = "0.1.0"

__all__ = [
    "AddressResult",
    "AddressResultErrorCode",
    "AsyncHttpxTransport",
    "AsyncTransport",
    "Attachment",
    "CustomHeader",
    "Data",
    "DELIVERY_ADDRESS_FIELD",
    "Email",
    "HttpxTransport",
    "InvalidAddressError",
    "MergeData",
    "Message",
    "MessageCountError",
    "MessageParsingError",
    "MessageResult",
    "MessageResultErrorCode",
    "PostMessageErrorCode",
    "Request",
    "RequestError",
    "Response",
    "SocketLabsError",
    "TooManyRedirects",
    "Transport",
    "TransportResponse",
    "UnexpectedError",
]
