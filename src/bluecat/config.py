"""Configuration management for the BlueCat Address Manager client."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_API_PATH = "/Services/REST/v1"


@dataclass
class BAMConfig:
    """BlueCat Address Manager connection configuration."""

    server: str
    username: str
    password: str = field(repr=False)
    api_path: str = DEFAULT_API_PATH
    verify_ssl: bool = True  # Opt out per client, never globally
    timeout: float | None = None  # None keeps the httpx default

    @property
    def base_url(self) -> str:
        """Return ``https://{server}{api_path}`` without a trailing slash."""
        return f"https://{self.server}{self.api_path.rstrip('/')}"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "console"  # "console" or "json"
    file: Path | None = None


@dataclass
class ClientConfig:
    """
    Complete configuration for the BlueCat client and its CLI.

    This combines all configuration sections.
    """

    bam: BAMConfig | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> "ClientConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            ClientConfig instance
        """
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid configuration file structure in {config_path}: "
                f"expected dictionary, got {type(data).__name__}"
            )

        bam_data = data.get("bam")
        bam = None
        if bam_data:
            # Files written by to_file carry no password
            bam_data.setdefault("password", os.environ.get("BAM_PASSWORD", ""))
            bam = BAMConfig(**bam_data)

        logging_data = data.get("logging") or {}
        if logging_data.get("file"):
            logging_data["file"] = Path(logging_data["file"])
        logging = LoggingConfig(**logging_data)

        return cls(bam=bam, logging=logging)

    def to_file(self, config_path: Path) -> None:
        """
        Save configuration to YAML file.

        The password is never written; supply it through ``BAM_PASSWORD`` or
        edit the file by hand.

        Args:
            config_path: Path to save config file
        """
        bam = None
        if self.bam:
            bam = {k: v for k, v in self.bam.__dict__.items() if k != "password"}

        data = {
            "bam": bam,
            "logging": {
                k: str(v) if isinstance(v, Path) else v
                for k, v in self.logging.__dict__.items()
                if v is not None
            },
        }

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            BAM_SERVER: BAM host name (optionally with port)
            BAM_USERNAME: BAM API username
            BAM_PASSWORD: BAM API password
            BAM_API_PATH: REST path prefix (default: /Services/REST/v1)
            BAM_VERIFY_SSL: set to 'false' to skip certificate checks
            BAM_TIMEOUT: request timeout in seconds (default: httpx default)
            LOG_LEVEL: Logging level (default: INFO)
            LOG_FORMAT: console or json (default: console)

        Returns:
            ClientConfig instance

        Raises:
            ValueError: If BAM_SERVER is set but required credentials are missing
        """
        bam_config = None
        server = os.getenv("BAM_SERVER")
        if server:
            username = os.environ.get("BAM_USERNAME", "")
            password = os.environ.get("BAM_PASSWORD", "")

            missing_creds = []
            if not username:
                missing_creds.append("BAM_USERNAME")
            if not password:
                missing_creds.append("BAM_PASSWORD")

            if missing_creds:
                raise ValueError(
                    f"BAM_SERVER is set but required credentials are missing: "
                    f"{', '.join(missing_creds)}. "
                    f"Please set all required environment variables for BAM authentication."
                )

            verify_ssl_str = os.environ.get("BAM_VERIFY_SSL", "true").lower()
            verify_ssl = verify_ssl_str not in ("false", "0", "no", "off")

            timeout_str = os.environ.get("BAM_TIMEOUT")

            bam_config = BAMConfig(
                server=server,
                username=username,
                password=password,
                api_path=os.environ.get("BAM_API_PATH", DEFAULT_API_PATH),
                verify_ssl=verify_ssl,
                timeout=float(timeout_str) if timeout_str else None,
            )

        logging_config = LoggingConfig(
            level=os.environ.get("LOG_LEVEL", "INFO"),
            format=os.environ.get("LOG_FORMAT", "console"),
        )

        return cls(bam=bam_config, logging=logging_config)


def load_config(config_file: Path | None = None) -> ClientConfig:
    """
    Load configuration from file or environment variables.

    Args:
        config_file: Optional path to YAML config file

    Returns:
        ClientConfig instance

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return ClientConfig.from_file(config_file)
    return ClientConfig.from_env()
