from socketlabs.core.logger import get_logger

from .models import (
    DELIVERY_ADDRESS_FIELD,
    AddressResult,
    AddressResultErrorCode,
    Attachment,
    CustomHeader,
    Data,
    Email,
    MergeData,
    Message,
    MessageResult,
    MessageResultErrorCode,
    PostMessageErrorCode,
    ProviderErrorCode,
    Response,
)
from .request import Request
from .transport import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Transport,
    TransportResponse,
    classify_httpx_error,
)

logger = get_logger(__name__)
logger.debug("Initializing injection module.")

__models__ = {
    "Email": Email,
    "CustomHeader": CustomHeader,
    "Attachment": Attachment,
    "Data": Data,
    "MergeData": MergeData,
    "Message": Message,
    "AddressResult": AddressResult,
    "MessageResult": MessageResult,
    "Response": Response,
}

__error_codes__ = {
    "ProviderErrorCode": ProviderErrorCode,
    "PostMessageErrorCode": PostMessageErrorCode,
    "MessageResultErrorCode": MessageResultErrorCode,
    "AddressResultErrorCode": AddressResultErrorCode,
}

__transport__ = {
    "Transport": Transport,
    "AsyncTransport": AsyncTransport,
    "TransportResponse": TransportResponse,
    "HttpxTransport": HttpxTransport,
    "AsyncHttpxTransport": AsyncHttpxTransport,
    "classify_httpx_error": classify_httpx_error,
}

__all__ = (
    ["DELIVERY_ADDRESS_FIELD", "Request"]
    + list(__models__)
    + list(__error_codes__)
    + list(__transport__)
)
