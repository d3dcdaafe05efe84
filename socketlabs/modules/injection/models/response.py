"""
A representation of a response from the SocketLabs Injection API.
"""

from typing import Any, List, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    StrictBool,
    ValidationError,
    field_validator,
)

from socketlabs.core.exceptions import MessageParsingError

from .error_codes import (
    AddressResultErrorCode,
    MessageResultErrorCode,
    PostMessageErrorCode,
)


class AddressResult(BaseModel):
    """Status of a recipient address which generated a warning or an error."""

    email_address: str = Field(alias="EmailAddress")
    # Whether the message was deliverable to this address.
    accepted: StrictBool = Field(alias="Accepted")
    error_code: AddressResultErrorCode = Field(alias="ErrorCode")

    @field_validator("error_code", mode="before")
    @classmethod
    def decode_error_code(cls, v: Any) -> AddressResultErrorCode:
        return AddressResultErrorCode.decode(v)

    class Config:
        populate_by_name = True


class MessageResult(BaseModel):
    """Status of one message, identified by its position in the request."""

    index: int = Field(alias="Index", ge=0, le=65535)
    error_code: MessageResultErrorCode = Field(alias="ErrorCode")
    address_results: Optional[List[AddressResult]] = Field(
        default=None,
        validation_alias=AliasChoices("AddressResult", "AddressResults", "address_results"),
    )

    @field_validator("error_code", mode="before")
    @classmethod
    def decode_error_code(cls, v: Any) -> MessageResultErrorCode:
        return MessageResultErrorCode.decode(v)

    @property
    def rejected_addresses(self) -> List[str]:
        return [
            result.email_address
            for result in self.address_results or []
            if not result.accepted
        ]

    class Config:
        populate_by_name = True


class Response(BaseModel):
    """
    The provider's answer to an injection request.

    ``transaction_receipt`` is only set when an unexpected error occurred
    and can be handed to SocketLabs support. ``message_results`` only lists
    messages that failed or had bad recipients.
    """

    error_code: PostMessageErrorCode = Field(alias="ErrorCode")
    transaction_receipt: Optional[str] = Field(alias="TransactionReceipt", default=None)
    message_results: Optional[List[MessageResult]] = Field(
        alias="MessageResults", default=None
    )

    @field_validator("error_code", mode="before")
    @classmethod
    def decode_error_code(cls, v: Any) -> PostMessageErrorCode:
        return PostMessageErrorCode.decode(v)

    @classmethod
    def parse(cls, body: Union[bytes, str]) -> "Response":
        """
        Decode a response body.

        Raises:
            MessageParsingError: If the body is not valid JSON or a required
                field is missing.
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise MessageParsingError(str(e)) from e

    @property
    def is_success(self) -> bool:
        return self.error_code == PostMessageErrorCode.Success

    @property
    def failed_indexes(self) -> List[int]:
        return [result.index for result in self.message_results or []]

    class Config:
        populate_by_name = True
