"""Unit tests for session establishment."""

from dataclasses import FrozenInstanceError

import httpx
import pytest
import respx

from src.bluecat.bam.client import BAMClient, new_session
from src.bluecat.bam.session import BAMSession, extract_token
from src.bluecat.utils.exceptions import BAMAuthenticationError

BASE_URL = "https://bam.example.com/Services/REST/v1"
TOKEN = "BAMAuthToken: Mjk3MzM6MTU2NDY0NTk0NDcxNTphZG1pbg=="
LOGIN_TEXT = f'"Session Token-> {TOKEN} <- for User : apiuser"'


class TestExtractToken:
    """Test token extraction from login response text."""

    def test_token_in_surrounding_text(self):
        """Test token embedded in arbitrary text."""
        assert extract_token("xx BAMAuthToken: abc123== yy") == "BAMAuthToken: abc123=="

    def test_token_in_real_login_text(self):
        """Test token inside the quoted login sentence."""
        assert extract_token(LOGIN_TEXT) == TOKEN

    def test_token_at_end_of_body(self):
        """Test token with nothing after it."""
        assert extract_token("BAMAuthToken: abc123==") == "BAMAuthToken: abc123=="

    @pytest.mark.parametrize(
        "text",
        ["", "Authentication failed", "BAMAuthToken:", "BAMAuthToken:abc123", "bamauthtoken: abc"],
    )
    def test_no_token(self, text):
        """Test responses without the token pattern."""
        assert extract_token(text) is None


class TestBAMSession:
    """Test BAMSession handle."""

    def test_defaults(self):
        """Test default API prefix."""
        session = BAMSession(server="bam.example.com", token=TOKEN)

        assert session.uri == "/Services/REST/v1"
        assert session.base_url == BASE_URL

    def test_session_is_immutable(self):
        """Test that the token cannot be replaced."""
        session = BAMSession(server="bam.example.com", token=TOKEN)

        with pytest.raises(FrozenInstanceError):
            session.token = "other"  # type: ignore[misc]

    def test_repr_hides_token(self):
        """Test that the token never appears in repr."""
        session = BAMSession(server="bam.example.com", token=TOKEN)

        assert "Mjk3" not in repr(session)
        assert "bam.example.com" in repr(session)


class TestLogin:
    """Test BAMClient.login and new_session."""

    @respx.mock
    def test_login_success(self, bam_config):
        """Test successful login stores the token verbatim."""
        route = respx.get(f"{BASE_URL}/login").mock(
            return_value=httpx.Response(200, text=LOGIN_TEXT)
        )
        client = BAMClient(bam_config)

        session = client.login()

        assert session.token == TOKEN
        assert session.server == "bam.example.com"
        assert client.is_authenticated
        request = route.calls.last.request
        assert request.url.params["username"] == "apiuser"
        assert request.url.params["password"] == "s3cret"
        assert request.headers["Content-Type"] == "application/json"
        assert "Authorization" not in request.headers

    @respx.mock
    def test_login_encodes_credentials(self, bam_config):
        """Test that reserved URL characters in the password survive."""
        bam_config.password = "p&ss=w?rd#1"
        route = respx.get(f"{BASE_URL}/login").mock(
            return_value=httpx.Response(200, text=LOGIN_TEXT)
        )

        BAMClient(bam_config).login()

        assert route.calls.last.request.url.params["password"] == "p&ss=w?rd#1"

    @respx.mock
    def test_login_without_token(self, bam_config):
        """Test login response without a token."""
        respx.get(f"{BASE_URL}/login").mock(
            return_value=httpx.Response(200, text="Invalid username or password")
        )
        client = BAMClient(bam_config)

        with pytest.raises(BAMAuthenticationError) as exc_info:
            client.login()

        assert exc_info.value.operation == "login"
        assert client.session is None

    @respx.mock
    def test_login_error_status(self, bam_config):
        """Test login rejected with an HTTP error status."""
        respx.get(f"{BASE_URL}/login").mock(return_value=httpx.Response(500, text="boom"))

        with pytest.raises(BAMAuthenticationError, match="500") as exc_info:
            BAMClient(bam_config).login()

        assert exc_info.value.status_code == 500
        assert exc_info.value.operation == "login"

    @respx.mock
    def test_login_connection_error(self, bam_config):
        """Test network failure during login."""
        respx.get(f"{BASE_URL}/login").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(BAMAuthenticationError) as exc_info:
            BAMClient(bam_config).login()

        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        assert exc_info.value.status_code is None
        assert "s3cret" not in str(exc_info.value)

    @respx.mock
    def test_new_session(self):
        """Test the one-call session entry point."""
        respx.get(f"{BASE_URL}/login").mock(return_value=httpx.Response(200, text=LOGIN_TEXT))

        client = new_session("bam.example.com", "apiuser", "s3cret", verify_ssl=False, timeout=5)

        assert client.session.token == TOKEN
        assert client.config.verify_ssl is False
        assert client.config.timeout == 5
        client.close()

    @respx.mock
    def test_context_manager_logs_in(self, bam_config):
        """Test that entering the client performs login."""
        route = respx.get(f"{BASE_URL}/login").mock(
            return_value=httpx.Response(200, text=LOGIN_TEXT)
        )

        with BAMClient(bam_config) as client:
            assert client.is_authenticated

        assert route.call_count == 1
        assert client._client is None

    @respx.mock
    def test_lazy_login_on_first_call(self, bam_config):
        """Test that an operation logs in first when no session exists."""
        login = respx.get(f"{BASE_URL}/login").mock(
            return_value=httpx.Response(200, text=LOGIN_TEXT)
        )
        respx.get(f"{BASE_URL}/getEntityById").mock(
            return_value=httpx.Response(200, json={"id": 5})
        )
        client = BAMClient(bam_config)

        client.get_entity_by_id(5)
        client.get_entity_by_id(5)

        assert login.call_count == 1

    @respx.mock
    def test_lazy_login_failure_names_operation(self, bam_config):
        """Test a refused lazy login is reported against the calling operation."""
        respx.get(f"{BASE_URL}/login").mock(side_effect=httpx.ConnectError("refused"))
        route = respx.get(f"{BASE_URL}/getEntityById")
        client = BAMClient(bam_config)

        with pytest.raises(BAMAuthenticationError) as exc_info:
            client.get_entity_by_id(5)

        error = exc_info.value
        assert error.operation == "getEntityById"
        assert str(error).startswith("getEntityById: ")
        assert error.status_code is None
        assert isinstance(error.__cause__, BAMAuthenticationError)
        assert error.__cause__.operation == "login"
        assert isinstance(error.__cause__.original_error, httpx.ConnectError)
        assert not route.called
        assert client.session is None

    @respx.mock
    def test_lazy_login_rejected_keeps_status(self, bam_config):
        """Test a lazy login rejected by status keeps that status."""
        respx.get(f"{BASE_URL}/login").mock(return_value=httpx.Response(503, text="down"))
        client = BAMClient(bam_config)

        with pytest.raises(BAMAuthenticationError) as exc_info:
            client.get_system_info()

        assert exc_info.value.operation == "getSystemInfo"
        assert exc_info.value.status_code == 503

    @respx.mock
    def test_existing_session_is_reused(self, bam_config):
        """Test that a supplied session skips login."""
        login = respx.get(f"{BASE_URL}/login")
        route = respx.get(f"{BASE_URL}/getEntityById").mock(
            return_value=httpx.Response(200, json={"id": 5})
        )
        session = BAMSession(server="bam.example.com", token="BAMAuthToken: reused=")
        client = BAMClient(bam_config, session=session)

        client.get_entity_by_id(5)

        assert not login.called
        assert route.calls.last.request.headers["Authorization"] == "BAMAuthToken: reused="
