from .error_codes import (
    AddressResultErrorCode,
    MessageResultErrorCode,
    PostMessageErrorCode,
    ProviderErrorCode,
)
from .message import (
    DELIVERY_ADDRESS_FIELD,
    Attachment,
    CustomHeader,
    Data,
    Email,
    MergeData,
    Message,
)
from .response import AddressResult, MessageResult, Response

__all__ = [
    "AddressResult",
    "AddressResultErrorCode",
    "Attachment",
    "CustomHeader",
    "Data",
    "DELIVERY_ADDRESS_FIELD",
    "Email",
    "MergeData",
    "Message",
    "MessageResult",
    "MessageResultErrorCode",
    "PostMessageErrorCode",
    "ProviderErrorCode",
    "Response",
]
