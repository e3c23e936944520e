"""JSON-RPC and A2A error codes an agent may report.

The client surfaces server errors verbatim; this catalogue only names the
well-known codes so callers and the CLI can refer to them.
"""

INTERNAL_ERROR_CODE = -32603

KNOWN_ERRORS: dict[int, str] = {
    -32700: 'JSONParseError',
    -32600: 'InvalidRequestError',
    -32601: 'MethodNotFoundError',
    -32602: 'InvalidParamsError',
    INTERNAL_ERROR_CODE: 'InternalError',
    -32001: 'TaskNotFoundError',
    -32002: 'TaskNotCancelableError',
    -32003: 'PushNotificationNotSupportedError',
    -32004: 'UnsupportedOperationError',
    -32005: 'ContentTypeNotSupportedError',
    -32006: 'InvalidAgentResponseError',
}


def error_name(code: int) -> str | None:
    """Returns the well-known name for an error code, if it has one.

    Args:
        code: The `code` field of a JSON-RPC error.

    Returns:
        The error name (e.g. ``'TaskNotFoundError'``) or None for
        application-defined codes.
    """
    return KNOWN_ERRORS.get(code)


__all__ = [
    'INTERNAL_ERROR_CODE',
    'KNOWN_ERRORS',
    'error_name',
]
