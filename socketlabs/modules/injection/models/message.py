"""
A representation of a valid email message for the SocketLabs Injection API.

Every model serializes to the provider's PascalCase JSON shape through
``to_wire()``. Optional fields that were never set are left out of the
payload entirely instead of being sent as ``null``.
"""

import base64
import mimetypes
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from socketlabs.core.exceptions import InvalidAddressError

# Merge field name the provider reserves for the recipient of the current message.
DELIVERY_ADDRESS_FIELD = "DeliveryAddress"

DEFAULT_CONTENT_TYPE = "application/octet-stream"

Pairs = Union[Mapping, Iterable[Tuple[str, str]]]


def _pairs(values: Pairs) -> Iterable[Tuple[str, str]]:
    if isinstance(values, Mapping):
        return values.items()
    return values


class WireModel(BaseModel):
    class Config:
        populate_by_name = True

    def to_wire(self) -> Dict[str, Any]:
        """Convert to the provider's JSON shape, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Email(WireModel):
    """
    An email address plus the optional name of its owner.

    The address is validated on construction and sent exactly as given; an
    invalid address raises ``InvalidAddressError``.
    """

    address: str = Field(alias="EmailAddress")
    display_name: Optional[str] = Field(alias="FriendlyName", default=None)

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v):
        if not isinstance(v, str):
            raise InvalidAddressError(str(v), "Address must be a string")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidAddressError(v, str(e)) from e
        return v

    @classmethod
    def create(cls, address: str, display_name: Optional[str] = None) -> "Email":
        return cls(address=address, display_name=display_name)

    def __str__(self) -> str:
        if self.display_name:
            return f"{self.display_name} <{self.address}>"
        return self.address


def _email(address: Union[str, Email], name: Optional[str] = None) -> Email:
    # A name given alongside an Email replaces the one it carries.
    if isinstance(address, Email):
        if name is None:
            return address
        return address.model_copy(update={"display_name": name})
    return Email.create(address, name)


class CustomHeader(WireModel):
    name: str = Field(alias="Name")
    value: str = Field(alias="Value")


def _headers(headers: Pairs) -> List[CustomHeader]:
    return [CustomHeader(name=name, value=value) for name, value in _pairs(headers)]


class Attachment(WireModel):
    """
    An attached content blob, such as an image or a document.

    ``content`` is sent as-is, so it must already be base64 encoded. Use
    ``from_bytes`` or ``from_path`` to build one from raw data.
    """

    name: str = Field(alias="Name")
    content: str = Field(alias="Content")
    content_id: str = Field(alias="ContentId")
    content_type: str = Field(alias="ContentType")
    headers: Optional[List[CustomHeader]] = Field(alias="CustomHeaders", default=None)

    @classmethod
    def from_bytes(
        cls,
        name: str,
        data: bytes,
        content_type: Optional[str] = None,
        content_id: Optional[str] = None,
    ) -> "Attachment":
        if content_type is None:
            content_type = mimetypes.guess_type(name)[0] or DEFAULT_CONTENT_TYPE
        return cls(
            name=name,
            content=base64.b64encode(data).decode("ascii"),
            content_id=content_id or name,
            content_type=content_type,
        )

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        content_type: Optional[str] = None,
        content_id: Optional[str] = None,
    ) -> "Attachment":
        path = Path(path)
        return cls.from_bytes(path.name, path.read_bytes(), content_type, content_id)

    def add_headers(self, headers: Pairs) -> None:
        if self.headers is None:
            self.headers = []
        self.headers.extend(_headers(headers))


class Data(WireModel):
    """A single ``field/value`` pair for the inline Merge feature."""

    field: str = Field(alias="Field")
    value: str = Field(alias="Value")


def _data(values: Pairs) -> List[Data]:
    return [Data(field=field, value=value) for field, value in _pairs(values)]


class MergeData(WireModel):
    """
    Data storage for the inline Merge feature.

    ``per_message`` holds merge field data for each message. Fields can be
    freely named, except for ``DeliveryAddress`` which the provider reserves
    for the recipient of the current message. ``global_`` holds data shared
    by every message in the injection.
    """

    per_message: List[Data] = Field(alias="PerMessage", default_factory=list)
    global_: List[Data] = Field(alias="Global", default_factory=list)


class Message(WireModel):
    """
    A single SocketLabs email message.

    Build one with ``Message.create`` and the ``add_*``/``set_*`` methods,
    then hand it to a ``Request``.
    """

    to: List[Email] = Field(alias="To", default_factory=list)
    from_: Email = Field(alias="From")
    subject: str = Field(alias="Subject", default="")
    text_body: str = Field(alias="TextBody", default="")
    html_body: Optional[str] = Field(alias="HtmlBody", default=None)
    # Identifier of a template stored in the Email Content Manager.
    api_template: Optional[str] = Field(alias="ApiTemplate", default=None)
    mailing_id: Optional[str] = Field(alias="MailingId", default=None)
    message_id: Optional[str] = Field(alias="MessageId", default=None)
    charset: Optional[str] = Field(alias="Charset", default=None)
    custom_headers: Optional[List[CustomHeader]] = Field(
        alias="CustomHeaders", default=None
    )
    cc: Optional[List[Email]] = Field(alias="Cc", default=None)
    bcc: Optional[List[Email]] = Field(alias="Bcc", default=None)
    reply_to: Optional[Email] = Field(alias="ReplyTo", default=None)
    attachments: Optional[List[Attachment]] = Field(alias="Attachments", default=None)
    merge_data: Optional[MergeData] = Field(alias="MergeData", default=None)

    @classmethod
    def create(cls, address: Union[str, Email], name: Optional[str] = None) -> "Message":
        """Create a message with every field empty except the sender."""
        return cls(from_=_email(address, name))

    def add_to(self, address: Union[str, Email], name: Optional[str] = None) -> None:
        self.to.append(_email(address, name))

    def add_cc(self, address: Union[str, Email], name: Optional[str] = None) -> None:
        email = _email(address, name)
        if self.cc is None:
            self.cc = [email]
        else:
            self.cc.append(email)

    def add_bcc(self, address: Union[str, Email], name: Optional[str] = None) -> None:
        email = _email(address, name)
        if self.bcc is None:
            self.bcc = [email]
        else:
            self.bcc.append(email)

    def set_from(self, address: Union[str, Email], name: Optional[str] = None) -> None:
        self.from_ = _email(address, name)

    def set_reply_to(self, address: Union[str, Email], name: Optional[str] = None) -> None:
        self.reply_to = _email(address, name)

    def set_subject(self, subject: str) -> None:
        self.subject = subject

    def set_text(self, text: str) -> None:
        self.text_body = text

    def set_html(self, html: str) -> None:
        self.html_body = html

    def set_api_template(self, api_template: str) -> None:
        self.api_template = api_template

    def set_mailing_id(self, mailing_id: str) -> None:
        self.mailing_id = mailing_id

    def set_message_id(self, message_id: str) -> None:
        self.message_id = message_id

    def set_charset(self, charset: str) -> None:
        self.charset = charset

    def add_headers(self, headers: Pairs) -> None:
        """
        Append one custom header per entry, in the order given.

        Accepts a mapping of header name to value or an iterable of
        ``(name, value)`` pairs. Existing headers are kept; duplicates are
        not merged.
        """
        if self.custom_headers is None:
            self.custom_headers = []
        self.custom_headers.extend(_headers(headers))

    def add_attachment(self, attachment: Attachment) -> None:
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)

    def _ensure_merge_data(self) -> MergeData:
        if self.merge_data is None:
            self.merge_data = MergeData()
        return self.merge_data

    def add_merge_data(
        self,
        per_message: Optional[Pairs] = None,
        global_: Optional[Pairs] = None,
    ) -> None:
        merge_data = self._ensure_merge_data()
        if per_message is not None:
            merge_data.per_message.extend(_data(per_message))
        if global_ is not None:
            merge_data.global_.extend(_data(global_))

    def add_per_message_data(self, field: str, value: str) -> None:
        self._ensure_merge_data().per_message.append(Data(field=field, value=value))

    def add_global_data(self, field: str, value: str) -> None:
        self._ensure_merge_data().global_.append(Data(field=field, value=value))
