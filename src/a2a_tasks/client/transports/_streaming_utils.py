"""Shared helpers for handling non-success and streaming HTTP responses."""

from __future__ import annotations

import json

from typing import Any

import httpx  # noqa: TC002

from a2a_tasks.client.errors import A2AClientHTTPError
from a2a_tasks.utils.constants import EVENT_STREAM_CONTENT_TYPE
from a2a_tasks.utils.errors import INTERNAL_ERROR_CODE


SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 300


async def ensure_streaming_response(response: httpx.Response) -> None:
    """Validate the initial streaming response before reading any events."""
    if not SUCCESS_STATUS_MIN <= response.status_code < SUCCESS_STATUS_MAX:
        error = await build_http_error(response)
        raise error

    if not _has_event_stream_content_type(response):
        error = await _build_content_type_error(response)
        raise error


async def build_http_error(response: httpx.Response) -> A2AClientHTTPError:
    """Builds the error for a non-success response.

    When the body is a JSON-RPC envelope carrying an `error`, its code,
    message and data take precedence over the HTTP status.
    """
    body_text = await _read_body(response)
    json_payload = _parse_json(body_text)

    rpc_error = _extract_rpc_error(json_payload)
    if rpc_error is not None:
        code, message, data = rpc_error
        return A2AClientHTTPError(
            response.status_code,
            message,
            code=code,
            data=data,
            body=body_text,
        )

    reason = getattr(response, 'reason_phrase', '') or ''
    message = f'HTTP error {response.status_code}: {reason or "HTTP error"}'
    if body_text and body_text.strip():
        message = f'{message} - {body_text.strip()}'
    return A2AClientHTTPError(
        response.status_code,
        message,
        code=INTERNAL_ERROR_CODE,
        body=body_text,
    )


async def _build_content_type_error(
    response: httpx.Response,
) -> A2AClientHTTPError:
    body_text = await _read_body(response)
    # Agents answer some failed subscriptions with a plain JSON-RPC error.
    rpc_error = _extract_rpc_error(_parse_json(body_text))
    if rpc_error is not None:
        code, message, data = rpc_error
        return A2AClientHTTPError(
            response.status_code,
            message,
            code=code,
            data=data,
            body=body_text,
        )

    content_type = response.headers.get('content-type', None)
    descriptor = content_type or 'missing'
    message = f'Unexpected Content-Type {descriptor!r} for streaming response'
    return A2AClientHTTPError(
        response.status_code,
        message,
        body=body_text,
    )


async def _read_body(response: httpx.Response) -> str | None:
    try:
        await response.aread()
    except httpx.HTTPError:
        return None
    text = response.text
    return text if text else None


def _parse_json(body_text: str | None) -> Any | None:
    if not body_text:
        return None
    try:
        return json.loads(body_text)
    except ValueError:
        return None


def _extract_rpc_error(
    json_payload: Any | None,
) -> tuple[int, str, Any | None] | None:
    if not isinstance(json_payload, dict):
        return None
    error = json_payload.get('error')
    if not isinstance(error, dict):
        return None
    code = error.get('code')
    message = error.get('message')
    if not isinstance(code, int) or isinstance(code, bool):
        return None
    if not isinstance(message, str):
        return None
    return code, message, error.get('data')


def _has_event_stream_content_type(response: httpx.Response) -> bool:
    content_type = response.headers.get('content-type', '')
    return EVENT_STREAM_CONTENT_TYPE in content_type.lower()
