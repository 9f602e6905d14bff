"""Custom exceptions for the BlueCat Address Manager client.

Exception Hierarchy:
-------------------
BlueCatError (base)
└── BAMAPIError (base for API errors)
    ├── BAMAuthenticationError  # Login failed, token not found, HTTP 401
    ├── BAMTransportError       # Network, TLS or timeout failure
    ├── BAMDecodeError          # Response body is not the expected JSON shape
    └── BAMRemoteError          # Success status, error text in the body

Usage Guidelines:
----------------
1. Every API error carries the name of the operation that raised it
   (e.g. "getEntityById"), available as ``error.operation``.

2. Nothing is retried locally. Callers decide whether a failure is worth
   another attempt.

3. The underlying exception (httpx or pydantic) is chained with
   ``raise ... from`` and also kept on ``original_error``.
"""


class BlueCatError(Exception):
    """Base exception for all client errors."""

    pass


class BAMAPIError(BlueCatError):
    """Base exception for BAM API errors."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize BAMAPIError.

        Args:
            message: Error message.
            operation: Optional name of the API operation that failed.
            status_code: Optional HTTP status code.
            original_error: Optional exception that caused this error.
        """
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code
        self.original_error = original_error

    def __str__(self) -> str:
        """
        Return string representation tagged with the operation name.

        Returns:
            str: Error message prefixed with the operation if set.
        """
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class BAMAuthenticationError(BAMAPIError):
    """Raised when BAM authentication fails."""

    def __init__(
        self,
        message: str = "Authentication failed",
        operation: str | None = "login",
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            message, operation=operation, status_code=status_code, original_error=original_error
        )


class BAMTransportError(BAMAPIError):
    """Raised when the HTTP request could not be completed."""

    pass


class BAMDecodeError(BAMAPIError):
    """Raised when a response body cannot be decoded into the expected type."""

    pass


class BAMRemoteError(BAMAPIError):
    """
    Raised when BAM reports an error inside a successful response.

    Several mutation endpoints answer HTTP 200 with a body such as
    ``Invalid value for parentId`` instead of an error status.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message, operation=operation)
