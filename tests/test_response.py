"""
Tests for decoding the provider's response.
"""

import json

import pytest

from socketlabs import (
    AddressResultErrorCode,
    MessageParsingError,
    MessageResultErrorCode,
    PostMessageErrorCode,
    Response,
)


def _body(**fields):
    return json.dumps(fields)


class TestResponseDecoding:
    """Test Response.parse on well-formed bodies."""

    def test_success_with_nulls(self):
        """Test the plain success body decodes with absent optionals."""
        response = Response.parse(
            '{"ErrorCode":"Success","TransactionReceipt":null,"MessageResults":null}'
        )

        assert response.error_code is PostMessageErrorCode.Success
        assert response.transaction_receipt is None
        assert response.message_results is None
        assert response.is_success

    def test_success_with_only_error_code(self):
        """Test optional keys may be missing entirely."""
        response = Response.parse(b'{"ErrorCode":"Success"}')

        assert response.is_success
        assert response.failed_indexes == []

    def test_nested_results(self):
        """Test message and address results are decoded in order."""
        body = _body(
            ErrorCode="Warning",
            TransactionReceipt="receipt-1",
            MessageResults=[
                {
                    "Index": 0,
                    "ErrorCode": "Warning",
                    "AddressResult": [
                        {"EmailAddress": "bad@example.com", "Accepted": False, "ErrorCode": "InvalidAddress"},
                        {"EmailAddress": "ok@example.com", "Accepted": True, "ErrorCode": "InvalidAddress"},
                    ],
                },
                {"Index": 2, "ErrorCode": "EmptySubject", "AddressResult": None},
            ],
        )

        response = Response.parse(body)

        assert response.error_code is PostMessageErrorCode.Warning
        assert not response.is_success
        assert response.transaction_receipt == "receipt-1"
        assert response.failed_indexes == [0, 2]

        first, second = response.message_results
        assert first.error_code is MessageResultErrorCode.Warning
        assert first.address_results[0].email_address == "bad@example.com"
        assert first.address_results[0].accepted is False
        assert first.address_results[0].error_code is AddressResultErrorCode.InvalidAddress
        assert first.rejected_addresses == ["bad@example.com"]
        assert second.error_code is MessageResultErrorCode.EmptySubject
        assert second.address_results is None
        assert second.rejected_addresses == []

    def test_plural_address_results_key(self):
        """Test the AddressResults spelling is accepted too."""
        body = _body(
            ErrorCode="Warning",
            MessageResults=[
                {
                    "Index": 1,
                    "ErrorCode": "Warning",
                    "AddressResults": [
                        {"EmailAddress": "x@example.com", "Accepted": False, "ErrorCode": "InvalidAddress"}
                    ],
                }
            ],
        )

        result = Response.parse(body).message_results[0]

        assert result.address_results[0].email_address == "x@example.com"

    def test_extra_keys_are_ignored(self):
        """Test unknown top-level keys do not break decoding."""
        response = Response.parse(_body(ErrorCode="Success", NewField={"a": 1}))

        assert response.is_success


class TestUnknownErrorCodes:
    """Test unknown codes never fail the decode, at every level."""

    def test_unknown_top_level_code(self):
        """Test request-level fallback."""
        response = Response.parse(_body(ErrorCode="TotallyNewCode"))

        assert response.error_code is PostMessageErrorCode.UnknownErrorCode

    def test_null_top_level_code(self):
        """Test a null code is treated as unknown, not missing."""
        response = Response.parse(_body(ErrorCode=None))

        assert response.error_code is PostMessageErrorCode.UnknownErrorCode

    def test_unknown_nested_codes(self):
        """Test message- and address-level fallbacks are independent."""
        body = _body(
            ErrorCode="Warning",
            MessageResults=[
                {
                    "Index": 0,
                    "ErrorCode": "BrandNewMessageCode",
                    "AddressResult": [
                        {"EmailAddress": "x@example.com", "Accepted": False, "ErrorCode": 7}
                    ],
                }
            ],
        )

        response = Response.parse(body)
        result = response.message_results[0]

        assert response.error_code is PostMessageErrorCode.Warning
        assert result.error_code is MessageResultErrorCode.UnknownErrorCode
        assert result.address_results[0].error_code is AddressResultErrorCode.UnknownErrorCode


class TestMalformedResponses:
    """Test structural failures raise MessageParsingError."""

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"not json",
            b'{"ErrorCode": "Success"',
            b"[]",
            b'{"TransactionReceipt": null}',
        ],
    )
    def test_top_level_failures(self, body):
        """Test malformed JSON and a missing ErrorCode."""
        with pytest.raises(MessageParsingError) as exc_info:
            Response.parse(body)

        assert exc_info.value.detail

    def test_missing_message_result_fields(self):
        """Test Index and ErrorCode are required on MessageResult."""
        with pytest.raises(MessageParsingError):
            Response.parse(_body(ErrorCode="Warning", MessageResults=[{"ErrorCode": "Warning"}]))

        with pytest.raises(MessageParsingError):
            Response.parse(_body(ErrorCode="Warning", MessageResults=[{"Index": 0}]))

    @pytest.mark.parametrize("missing", ["EmailAddress", "Accepted", "ErrorCode"])
    def test_missing_address_result_fields(self, missing):
        """Test required AddressResult fields."""
        address = {"EmailAddress": "x@example.com", "Accepted": False, "ErrorCode": "InvalidAddress"}
        del address[missing]
        body = _body(
            ErrorCode="Warning",
            MessageResults=[{"Index": 0, "ErrorCode": "Warning", "AddressResult": [address]}],
        )

        with pytest.raises(MessageParsingError):
            Response.parse(body)

    def test_index_out_of_range(self):
        """Test Index must fit in 16 bits."""
        with pytest.raises(MessageParsingError):
            Response.parse(
                _body(ErrorCode="Warning", MessageResults=[{"Index": 70000, "ErrorCode": "Warning"}])
            )

    @pytest.mark.parametrize("accepted", ["yes", "true", 1, 0, None])
    def test_accepted_must_be_boolean(self, accepted):
        """Test Accepted only takes a JSON boolean."""
        address = {"EmailAddress": "x@example.com", "Accepted": accepted, "ErrorCode": "InvalidAddress"}
        body = _body(
            ErrorCode="Warning",
            MessageResults=[{"Index": 0, "ErrorCode": "Warning", "AddressResult": [address]}],
        )

        with pytest.raises(MessageParsingError):
            Response.parse(body)
