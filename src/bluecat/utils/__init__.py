"""Utility functions and exceptions."""

from .exceptions import (
    BAMAPIError,
    BAMAuthenticationError,
    BAMDecodeError,
    BAMRemoteError,
    BAMTransportError,
    BlueCatError,
)

__all__ = [
    "BlueCatError",
    "BAMAPIError",
    "BAMAuthenticationError",
    "BAMTransportError",
    "BAMDecodeError",
    "BAMRemoteError",
]
