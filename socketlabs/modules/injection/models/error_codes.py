"""
Error codes returned by the Injection API.

Each enumeration is a closed set of provider codes plus the reserved
``UnknownErrorCode`` member. The provider may add codes at any time, so
decoding never fails: anything that is not a known code (including ``null``
or a non-string value) decodes to ``UnknownErrorCode``.
"""

from enum import Enum
from typing import Any

FALLBACK_TAG = "UnknownErrorCode"
FALLBACK_DESCRIPTION = "SocketLabs returned an unknown error code."


class ProviderErrorCode(str, Enum):
    """
    Base for the provider error code enumerations.

    Members are declared as ``Tag = ("Tag", "Human readable description")``.
    Subclasses must declare an ``UnknownErrorCode`` member.
    """

    def __new__(cls, tag: str, description: str):
        obj = str.__new__(cls, tag)
        obj._value_ = tag
        obj.description = description
        return obj

    @classmethod
    def _missing_(cls, value: Any) -> "ProviderErrorCode":
        return cls.fallback()

    @classmethod
    def fallback(cls) -> "ProviderErrorCode":
        return cls[FALLBACK_TAG]

    @classmethod
    def decode(cls, value: Any) -> "ProviderErrorCode":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.fallback()
        return cls(value)

    @property
    def is_unknown(self) -> bool:
        return self.value == FALLBACK_TAG

    def __str__(self) -> str:
        return self.description


class PostMessageErrorCode(ProviderErrorCode):
    """Status of the injection request as a whole."""

    Success = ("Success", "Success.")
    Warning = ("Warning", "There were one or more failed messages and/or recipients.")
    AccountDisabled = ("AccountDisabled", "The account has been disabled.")
    InternalError = (
        "InternalError",
        "Internal server error. (Please report to SocketLabs support if encountered.)",
    )
    InvalidAuthentication = (
        "InvalidAuthentication",
        "The ServerId/ApiKey combination is invalid.",
    )
    InvalidData = (
        "InvalidData",
        "PostBody parameter does not have a valid structure, or contains invalid or missing data.",
    )
    NoMessages = ("NoMessages", "There were no messages to inject included in the request.")
    EmptyMessage = ("EmptyMessage", "One or more messages have insufficient content to process.")
    OverQuota = ("OverQuota", "Rate limit exceeded.")
    TooManyErrors = ("TooManyErrors", "Authentication error limit exceeded.")
    TooManyMessages = ("TooManyMessages", "Too many messages in a single request.")
    TooManyRecipients = ("TooManyRecipients", "Too many recipients in a single message.")
    NoValidRecipients = (
        "NoValidRecipients",
        "A merge was attempted, but there were no valid recipients.",
    )
    UnknownErrorCode = (FALLBACK_TAG, FALLBACK_DESCRIPTION)


class MessageResultErrorCode(ProviderErrorCode):
    """Status of a single message within the request."""

    Warning = ("Warning", "The message has one or more bad recipients.")
    InvalidAttachment = ("InvalidAttachment", "The message has one or more invalid attachments.")
    MessageTooLarge = ("MessageTooLarge", "The message was larger than the allowed size.")
    EmptySubject = (
        "EmptySubject",
        "This message contained an empty subject line, which is not allowed.",
    )
    EmptyToAddress = ("EmptyToAddress", "This message does not contain a To address.")
    InvalidFromAddress = (
        "InvalidFromAddress",
        "This message does not contain a valid From address.",
    )
    NoValidBodyParts = (
        "NoValidBodyParts",
        "This message does not have a valid text HTML body specified.",
    )
    NoValidRecipients = (
        "NoValidRecipients",
        "There are no valid addresses specified as message recipients.",
    )
    InvalidMergeData = (
        "InvalidMergeData",
        "The included merge data does not follow the API specification.",
    )
    InvalidTemplateId = ("InvalidTemplateId", "The selected API Template does not exist.")
    MessageBodyConflict = (
        "MessageBodyConflict",
        "The Html Body and Text Body cannot be set when also specifying an API Template ID.",
    )
    UnknownErrorCode = (FALLBACK_TAG, FALLBACK_DESCRIPTION)


class AddressResultErrorCode(ProviderErrorCode):
    """Status of a single recipient address."""

    InvalidAddress = ("InvalidAddress", "The address did not meet specification requirements.")
    UnknownErrorCode = (FALLBACK_TAG, FALLBACK_DESCRIPTION)
