"""HTTP transport for A2A task calls."""

import json
import logging

from collections.abc import AsyncIterator
from contextlib import aclosing, asynccontextmanager
from enum import Enum
from types import TracebackType
from typing import Any

import httpx

from httpx_sse import EventSource, ServerSentEvent, SSEError

from typing_extensions import Self

from a2a_tasks.client.errors import (
    A2AClientJSONError,
    A2AClientTimeoutError,
    A2AClientTransportError,
)
from a2a_tasks.client.transports._streaming_utils import (
    build_http_error,
    ensure_streaming_response,
)
from a2a_tasks.types import JSONRPCRequest
from a2a_tasks.utils.constants import (
    DEFAULT_TIMEOUT,
    EVENT_STREAM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
)


logger = logging.getLogger(__name__)


class ResponseKind(str, Enum):
    """The kind of response requested from the agent, sent as `Accept`."""

    SINGLE = JSON_CONTENT_TYPE
    EVENT_STREAM = EVENT_STREAM_CONTENT_TYPE


class HttpTransport:
    """Posts JSON-RPC envelopes to an agent endpoint over HTTP.

    Network failures are raised as `A2AClientTransportError` (or its
    timeout subclass) with code -32603. Non-success responses are raised as
    `A2AClientHTTPError`, using the JSON-RPC error from the body when the
    agent supplied one.
    """

    def __init__(
        self,
        url: str,
        httpx_client: httpx.AsyncClient | None = None,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        owns_client: bool | None = None,
    ):
        """Initializes the HttpTransport.

        Args:
            url: The agent's JSON-RPC endpoint.
            httpx_client: A shared client. When omitted the transport creates
                and owns one, and closes it in `close()`.
            headers: Extra headers sent with every request.
            timeout: Timeout in seconds for non-streaming requests.
            owns_client: Whether `close()` closes the httpx client. Defaults
                to True only when the transport created the client itself.
        """
        self.url = url[:-1] if url.endswith('/') else url
        self._owns_client = (
            httpx_client is None if owns_client is None else owns_client
        )
        self.httpx_client = httpx_client or httpx.AsyncClient()
        self.headers = dict(headers or {})
        self.timeout = timeout

    async def __aenter__(self) -> Self:
        """Enters the async context manager, returning the transport itself."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exits the async context manager, ensuring close() is called."""
        await self.close()

    def _build_request(
        self, envelope: JSONRPCRequest, kind: ResponseKind
    ) -> httpx.Request:
        timeout = (
            httpx.Timeout(self.timeout, read=None)
            if kind is ResponseKind.EVENT_STREAM
            else httpx.Timeout(self.timeout)
        )
        return self.httpx_client.build_request(
            'POST',
            self.url,
            json=envelope.model_dump(mode='json', exclude_none=True),
            headers={
                **self.headers,
                'Content-Type': JSON_CONTENT_TYPE,
                'Accept': kind.value,
            },
            timeout=timeout,
        )

    async def _send(
        self, request: httpx.Request, *, stream: bool = False
    ) -> httpx.Response:
        try:
            return await self.httpx_client.send(request, stream=stream)
        except httpx.TimeoutException as e:
            raise A2AClientTimeoutError(
                f'Network error: {str(e) or "request timed out"}', e
            ) from e
        except httpx.RequestError as e:
            raise A2AClientTransportError(f'Network error: {e}', e) from e

    async def send(self, envelope: JSONRPCRequest) -> Any:
        """Sends an envelope and returns the decoded JSON response body.

        Raises:
            A2AClientTransportError: If the agent could not be reached.
            A2AClientHTTPError: If the agent answered with a non-success status.
            A2AClientJSONError: If the response body is not valid JSON.
        """
        logger.debug('Sending %s request %s', envelope.method, envelope.id)
        response = await self._send(
            self._build_request(envelope, ResponseKind.SINGLE)
        )
        if not response.is_success:
            raise await build_http_error(response)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise A2AClientJSONError(
                f'Failed to process response: {e}'
            ) from e

    @asynccontextmanager
    async def stream(
        self, envelope: JSONRPCRequest
    ) -> AsyncIterator[httpx.Response]:
        """Opens an event-stream call and yields the unread response.

        The response is closed when the context exits, including when the
        consumer stops reading early.

        Raises:
            A2AClientTransportError: If the agent could not be reached.
            A2AClientHTTPError: If the agent refused to open the stream.
        """
        logger.debug('Opening %s stream %s', envelope.method, envelope.id)
        response = await self._send(
            self._build_request(envelope, ResponseKind.EVENT_STREAM),
            stream=True,
        )
        try:
            await ensure_streaming_response(response)
            yield response
        finally:
            await response.aclose()
            logger.debug('Closed %s stream %s', envelope.method, envelope.id)

    async def aiter_sse(
        self, response: httpx.Response
    ) -> AsyncIterator[ServerSentEvent]:
        """Yields the server-sent events of a streaming response as they arrive.

        Raises:
            A2AClientTransportError: If the connection fails mid-stream or the
                body is not a valid event stream.
        """
        event_source = EventSource(response)
        try:
            async with aclosing(event_source.aiter_sse()) as events:
                async for sse in events:
                    yield sse
        except SSEError as e:
            raise A2AClientTransportError(
                f'Invalid SSE response or protocol error: {e}', e
            ) from e
        except httpx.TimeoutException as e:
            raise A2AClientTimeoutError(
                f'Network error: {str(e) or "stream read timed out"}', e
            ) from e
        except httpx.RequestError as e:
            raise A2AClientTransportError(f'Network error: {e}', e) from e

    async def close(self) -> None:
        """Closes the httpx client if this transport created it."""
        if self._owns_client:
            await self.httpx_client.aclose()
