"""
Tests for the provider error code enumerations.
"""

import pytest

from socketlabs import (
    AddressResultErrorCode,
    MessageResultErrorCode,
    PostMessageErrorCode,
)

ALL_ENUMS = [PostMessageErrorCode, MessageResultErrorCode, AddressResultErrorCode]


class TestKnownCodes:
    """Test the closed sets of variants."""

    def test_post_message_variants(self):
        """Test request-level codes."""
        assert [code.value for code in PostMessageErrorCode] == [
            "Success",
            "Warning",
            "AccountDisabled",
            "InternalError",
            "InvalidAuthentication",
            "InvalidData",
            "NoMessages",
            "EmptyMessage",
            "OverQuota",
            "TooManyErrors",
            "TooManyMessages",
            "TooManyRecipients",
            "NoValidRecipients",
            "UnknownErrorCode",
        ]

    def test_message_result_variants(self):
        """Test message-level codes."""
        assert [code.value for code in MessageResultErrorCode] == [
            "Warning",
            "InvalidAttachment",
            "MessageTooLarge",
            "EmptySubject",
            "EmptyToAddress",
            "InvalidFromAddress",
            "NoValidBodyParts",
            "NoValidRecipients",
            "InvalidMergeData",
            "InvalidTemplateId",
            "MessageBodyConflict",
            "UnknownErrorCode",
        ]

    def test_address_result_variants(self):
        """Test address-level codes."""
        assert [code.value for code in AddressResultErrorCode] == [
            "InvalidAddress",
            "UnknownErrorCode",
        ]

    def test_description(self):
        """Test each code carries the provider's description."""
        assert PostMessageErrorCode.OverQuota.description == "Rate limit exceeded."
        assert str(AddressResultErrorCode.InvalidAddress) == (
            "The address did not meet specification requirements."
        )

    def test_same_tag_in_different_enums(self):
        """Test shared tags decode to the member of the requested enum."""
        assert PostMessageErrorCode.decode("Warning") is PostMessageErrorCode.Warning
        assert MessageResultErrorCode.decode("Warning") is MessageResultErrorCode.Warning
        assert PostMessageErrorCode.Warning.description != MessageResultErrorCode.Warning.description


class TestFallbackDecoding:
    """Test unknown codes decode to UnknownErrorCode instead of failing."""

    @pytest.mark.parametrize("enum", ALL_ENUMS)
    @pytest.mark.parametrize("value", ["TotallyNewCode", "success", "", None, 42, ["Success"]])
    def test_unknown_values(self, enum, value):
        """Test unknown, miscased and non-string values."""
        decoded = enum.decode(value)

        assert decoded is enum.UnknownErrorCode
        assert decoded.is_unknown

    @pytest.mark.parametrize("enum", ALL_ENUMS)
    def test_constructor_falls_back(self, enum):
        """Test calling the enum directly also falls back."""
        assert enum("NotACode") is enum.UnknownErrorCode

    def test_known_value_is_not_unknown(self):
        """Test a known code decodes exactly."""
        decoded = PostMessageErrorCode.decode("Success")

        assert decoded is PostMessageErrorCode.Success
        assert not decoded.is_unknown
        assert decoded == "Success"

    def test_decode_member_passthrough(self):
        """Test decoding a member returns it unchanged."""
        code = MessageResultErrorCode.EmptySubject

        assert MessageResultErrorCode.decode(code) is code
