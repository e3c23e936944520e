"""Custom exceptions for the A2A task client.

Every error raised by a client operation carries a numeric JSON-RPC `code`
and a human readable `message`, so callers can branch on `code` without
caring whether the failure happened on the network, in decoding, or on the
agent itself.
"""

from typing import Any

from a2a_tasks.types import JSONRPCError
from a2a_tasks.utils.errors import INTERNAL_ERROR_CODE


class A2AClientError(Exception):
    """Base exception for A2A task client errors."""


class A2AClientJSONRPCError(A2AClientError):
    """Client exception carrying a JSON-RPC error.

    Errors reported by the agent are raised with their `code`, `message`
    and `data` preserved verbatim.
    """

    def __init__(self, code: int, message: str, data: Any | None = None):
        """Initializes the A2AClientJSONRPCError.

        Args:
            code: The JSON-RPC error code.
            message: A descriptive error message.
            data: Optional additional error information.
        """
        self.code = code
        self.message = message
        self.data = data
        self._display = f'JSON-RPC Error {code}: {message}'
        super().__init__(self._display)

    def __str__(self) -> str:
        """Returns the formatted error message."""
        return self._display

    @classmethod
    def from_error(cls, error: JSONRPCError) -> 'A2AClientJSONRPCError':
        """Builds the exception from a decoded `error` object."""
        return cls(error.code, error.message, error.data)

    @property
    def error(self) -> JSONRPCError:
        """The error as a `JSONRPCError` model."""
        return JSONRPCError(code=self.code, message=self.message, data=self.data)

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return (
            f'{self.__class__.__name__}(code={self.code!r}, '
            f'message={self.message!r})'
        )


class A2AClientJSONError(A2AClientJSONRPCError):
    """Client exception for malformed or unexpected response payloads."""

    def __init__(self, message: str, data: Any | None = None):
        """Initializes the A2AClientJSONError.

        Args:
            message: A descriptive error message.
            data: Optional additional error information.
        """
        super().__init__(INTERNAL_ERROR_CODE, message, data)
        self._display = f'JSON Error: {message}'

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'


class A2AClientTransportError(A2AClientJSONRPCError):
    """Client exception for failures reaching the agent over the network."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        code: int = INTERNAL_ERROR_CODE,
        data: Any | None = None,
    ):
        """Initializes the A2AClientTransportError.

        Args:
            message: A descriptive error message.
            cause: The underlying exception, if any.
            code: The JSON-RPC error code; -32603 unless the agent supplied one.
            data: Optional additional error information.
        """
        super().__init__(code, message, data)
        self.cause = cause


class A2AClientHTTPError(A2AClientTransportError):
    """Client exception for non-success HTTP responses."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        code: int = INTERNAL_ERROR_CODE,
        data: Any | None = None,
        body: str | None = None,
    ):
        """Initializes the A2AClientHTTPError.

        Args:
            status_code: The HTTP status code of the response.
            message: A descriptive error message.
            code: The JSON-RPC error code from the response body, if any.
            data: The `data` of the JSON-RPC error from the response body.
            body: The raw response body, if it could be read.
        """
        super().__init__(message, code=code, data=data)
        self.status_code = status_code
        self.body = body
        self._display = f'HTTP Error {status_code}: {message}'

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return (
            f'{self.__class__.__name__}(status_code={self.status_code!r}, '
            f'code={self.code!r}, message={self.message!r})'
        )


class A2AClientTimeoutError(A2AClientTransportError):
    """Client exception for request timeouts."""

    def __init__(self, message: str, cause: BaseException | None = None):
        """Initializes the A2AClientTimeoutError.

        Args:
            message: A descriptive error message.
            cause: The underlying timeout exception, if any.
        """
        super().__init__(message, cause)
        self._display = f'Timeout Error: {message}'

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'


class A2AClientInvalidArgsError(A2AClientError):
    """Client exception for invalid arguments passed to a method."""

    code = -32602

    def __init__(self, message: str):
        """Initializes the A2AClientInvalidArgsError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        super().__init__(f'Invalid arguments error: {message}')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'


class A2AClientInvalidStateError(A2AClientError):
    """Client exception for an invalid client state."""

    code = INTERNAL_ERROR_CODE

    def __init__(self, message: str):
        """Initializes the A2AClientInvalidStateError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        super().__init__(f'Invalid state error: {message}')

    def __repr__(self) -> str:
        """Returns an unambiguous representation of the error."""
        return f'{self.__class__.__name__}(message={self.message!r})'
