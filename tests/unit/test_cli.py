"""Unit tests for CLI interface."""

from unittest.mock import MagicMock, patch

import pytest
import typer
import yaml
from typer.testing import CliRunner

from src.bluecat.bam.response_models import APIEntity
from src.bluecat.cli import app
from src.bluecat.utils.exceptions import BAMAuthenticationError, BAMTransportError


@pytest.fixture
def bam_env(monkeypatch):
    """Configure BAM credentials through the environment."""
    monkeypatch.setenv("BAM_SERVER", "bam.example.com")
    monkeypatch.setenv("BAM_USERNAME", "apiuser")
    monkeypatch.setenv("BAM_PASSWORD", "s3cret")
    monkeypatch.delenv("BAM_VERIFY_SSL", raising=False)


class TestCLI:
    """Test CLI interface."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()
        self.logging_patch = patch("src.bluecat.cli.configure_logging")
        self.logging_patch.start()
        self.client_patch = patch("src.bluecat.cli.BAMClient")
        self.mock_client_class = self.client_patch.start()
        self.client = MagicMock()
        self.client.config.server = "bam.example.com"
        self.mock_client_class.return_value.__enter__.return_value = self.client

    def teardown_method(self):
        """Stop patches."""
        self.client_patch.stop()
        self.logging_patch.stop()

    def test_cli_app_structure(self):
        """Test CLI app structure."""
        assert isinstance(app, typer.Typer)

    def test_login_success(self, bam_env):
        """Test successful login command."""
        result = self.runner.invoke(app, ["login"])

        assert result.exit_code == 0
        assert "Logged in to bam.example.com" in result.stdout
        assert "s3cret" not in result.stdout

    def test_login_failure(self, bam_env):
        """Test login command with rejected credentials."""
        self.mock_client_class.return_value.__enter__.side_effect = BAMAuthenticationError(
            "No session token in login response"
        )

        result = self.runner.invoke(app, ["login"])

        assert result.exit_code == 1
        assert "Login failed" in result.stdout

    def test_no_server_configured(self, monkeypatch):
        """Test commands without any BAM settings."""
        monkeypatch.delenv("BAM_SERVER", raising=False)

        result = self.runner.invoke(app, ["login"])

        assert result.exit_code == 1
        assert "No BAM server configured" in result.stdout

    def test_missing_config_file(self, tmp_path):
        """Test --config pointing at a missing file."""
        result = self.runner.invoke(app, ["login", "--config", str(tmp_path / "none.yaml")])

        assert result.exit_code == 1
        assert "Configuration error" in result.stdout

    def test_config_file(self, tmp_path, monkeypatch):
        """Test --config is passed through to the client."""
        monkeypatch.delenv("BAM_SERVER", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "bam:\n  server: bam.lab\n  username: api\n  password: p\n  verify_ssl: true\n"
        )

        result = self.runner.invoke(app, ["login", "-c", str(config_file), "--insecure"])

        assert result.exit_code == 0
        config = self.mock_client_class.call_args[0][0]
        assert config.server == "bam.lab"
        assert config.verify_ssl is False

    def test_entity(self, bam_env):
        """Test entity command output."""
        self.client.get_entity_by_id.return_value = APIEntity(
            id=5, name="net1", type="IP4Network", properties="CIDR=10.0.0.0/24"
        )

        result = self.runner.invoke(app, ["entity", "5"])

        assert result.exit_code == 0
        assert "net1" in result.stdout
        assert "IP4Network" in result.stdout
        self.client.get_entity_by_id.assert_called_once_with(5)

    def test_entity_not_found(self, bam_env):
        """Test entity command for an unknown ID."""
        self.client.get_entity_by_id.return_value = APIEntity()

        result = self.runner.invoke(app, ["entity", "404"])

        assert result.exit_code == 1
        assert "No object with ID 404" in result.stdout

    def test_children(self, bam_env):
        """Test children command paging options."""
        self.client.get_entities.return_value = [
            APIEntity(id=1, name="a", type="IP4Network"),
            APIEntity(id=2, name="b", type="IP4Network"),
        ]

        result = self.runner.invoke(
            app, ["children", "100", "IP4Network", "--count", "50", "--start", "50"]
        )

        assert result.exit_code == 0
        assert "Total shown: 2" in result.stdout
        self.client.get_entities.assert_called_once_with(100, "IP4Network", count=50, start=50)

    def test_children_transport_error(self, bam_env):
        """Test library errors exit with code 1."""
        self.client.get_entities.side_effect = BAMTransportError(
            "HTTP request failed: refused", operation="getEntities"
        )

        result = self.runner.invoke(app, ["children", "100", "IP4Network"])

        assert result.exit_code == 1
        assert "getEntities" in result.stdout

    def test_search(self, bam_env):
        """Test search command."""
        self.client.search_by_object_types.return_value = [
            APIEntity(id=7, name="web", type="HostRecord")
        ]

        result = self.runner.invoke(app, ["search", "^web", "--types", "HostRecord"])

        assert result.exit_code == 0
        assert "web" in result.stdout
        self.client.search_by_object_types.assert_called_once_with(
            "^web", "HostRecord", count=10, start=0
        )

    def test_system_info(self, bam_env):
        """Test system-info splits name=value pairs."""
        self.client.get_system_info.return_value = "hostName=bam01|version=9.5.0|"

        result = self.runner.invoke(app, ["system-info"])

        assert result.exit_code == 0
        assert "hostName" in result.stdout
        assert "9.5.0" in result.stdout

    def test_next_ip(self, bam_env):
        """Test next-ip prints the address."""
        self.client.get_next_ip4_address.return_value = "10.0.0.7"

        result = self.runner.invoke(app, ["next-ip", "100"])

        assert result.exit_code == 0
        assert "10.0.0.7" in result.stdout

    def test_next_ip_exhausted(self, bam_env):
        """Test next-ip when the network is full."""
        self.client.get_next_ip4_address.return_value = ""

        result = self.runner.invoke(app, ["next-ip", "100"])

        assert result.exit_code == 1

    def test_init_config(self, tmp_path, monkeypatch):
        """Test init-config writes a file without a password."""
        monkeypatch.setenv("BAM_PASSWORD", "s3cret")
        output = tmp_path / "bluecat.yaml"

        result = self.runner.invoke(
            app, ["init-config", str(output), "-s", "bam.example.com", "-u", "api", "--insecure"]
        )

        assert result.exit_code == 0
        data = yaml.safe_load(output.read_text())
        assert data["bam"]["server"] == "bam.example.com"
        assert data["bam"]["verify_ssl"] is False
        assert "password" not in data["bam"]
