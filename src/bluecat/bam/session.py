"""Session handle and token extraction for the BAM v1 login endpoint.

``GET /Services/REST/v1/login`` does not answer with JSON. The body is a
quoted sentence such as::

    "Session Token-> BAMAuthToken: Mjk3MzM6MTU2NDY0NTk0NDcxNTphZG1pbg== <- for User : admin"

The ``BAMAuthToken: <token>`` fragment is sent back verbatim as the
``Authorization`` header of every later call.
"""

import re
from dataclasses import dataclass

from ..config import DEFAULT_API_PATH

TOKEN_PATTERN = re.compile(r"BAMAuthToken:\s+[\w=]+")


def extract_token(text: str) -> str | None:
    """
    Find the session token in a login response body.

    Args:
        text: Raw login response text

    Returns:
        The token including its ``BAMAuthToken:`` prefix, or None if absent
    """
    match = TOKEN_PATTERN.search(text)
    if match is None:
        return None
    return match.group(0)


@dataclass(frozen=True)
class BAMSession:
    """
    Authenticated session with one BAM server.

    The token is never refreshed. Once the server expires it, every call
    fails with BAMAuthenticationError until the caller logs in again.
    """

    server: str
    token: str = ""
    uri: str = DEFAULT_API_PATH

    @property
    def base_url(self) -> str:
        """Return ``https://{server}{uri}``."""
        return f"https://{self.server}{self.uri.rstrip('/')}"

    def __repr__(self) -> str:
        return f"BAMSession(server={self.server!r}, uri={self.uri!r})"
