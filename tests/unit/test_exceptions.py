"""Unit tests for Custom Exceptions."""

import pytest

from src.bluecat.utils.exceptions import (
    BAMAPIError,
    BAMAuthenticationError,
    BAMDecodeError,
    BAMRemoteError,
    BAMTransportError,
    BlueCatError,
)


class TestBAMAPIError:
    """Test BAMAPIError exception."""

    def test_creation(self):
        """Test creating BAMAPIError."""
        error = BAMAPIError("API request failed", status_code=400)

        assert str(error) == "API request failed"
        assert error.status_code == 400
        assert error.operation is None

    def test_operation_prefix(self):
        """Test the operation name tags the message."""
        error = BAMAPIError("API Error 500: boom", operation="getEntities", status_code=500)

        assert str(error) == "getEntities: API Error 500: boom"
        assert error.message == "API Error 500: boom"

    def test_original_error_kept(self):
        """Test wrapping an underlying exception."""
        cause = ConnectionError("refused")
        error = BAMTransportError("failed", operation="getParent", original_error=cause)

        assert error.original_error is cause


class TestHierarchy:
    """Test exception inheritance."""

    @pytest.mark.parametrize(
        "error_class",
        [BAMAuthenticationError, BAMTransportError, BAMDecodeError, BAMRemoteError],
    )
    def test_all_are_api_errors(self, error_class):
        """Test every error is catchable as BAMAPIError and BlueCatError."""
        assert issubclass(error_class, BAMAPIError)
        assert issubclass(error_class, BlueCatError)

    def test_authentication_defaults(self):
        """Test authentication error defaults."""
        error = BAMAuthenticationError()

        assert error.status_code is None
        assert error.operation == "login"
        assert str(error) == "login: Authentication failed"

    def test_authentication_for_other_operation(self):
        """Test a rejected token on a later call."""
        error = BAMAuthenticationError("Unauthorized", operation="getParent")

        assert str(error) == "getParent: Unauthorized"

    def test_authentication_keeps_status_code(self):
        """Test the HTTP status is carried only when one was received."""
        error = BAMAuthenticationError("Unauthorized", operation="getParent", status_code=401)

        assert error.status_code == 401
        assert error.operation == "getParent"

    def test_remote_error(self):
        """Test remote error carries no status code."""
        error = BAMRemoteError("Invalid value", operation="addACL")

        assert error.status_code is None
        assert str(error) == "addACL: Invalid value"

    def test_raise_and_catch(self):
        """Test catching through the base class."""
        with pytest.raises(BlueCatError, match="getKSK: bad"):
            raise BAMDecodeError("bad", operation="getKSK")
