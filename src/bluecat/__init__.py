"""BlueCat Client - Typed client for the BlueCat Address Manager REST API v1."""

from .bam import BAMClient, BAMSession, new_session
from .config import BAMConfig, ClientConfig

__version__ = "0.1.0"
__all__ = ["BAMClient", "BAMSession", "new_session", "BAMConfig", "ClientConfig"]
