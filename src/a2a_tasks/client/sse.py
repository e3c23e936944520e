"""Decoding of server-sent event streams carrying JSON-RPC responses.

An agent answers a streaming call with a `text/event-stream` body. Each event
is one or more `data:` lines terminated by a blank line, and its data is a
JSON-RPC response envelope carrying either a `result` or an `error`. Frames
are reassembled by httpx-sse; this module applies the envelope rules on top.
"""

import logging

from collections.abc import AsyncGenerator, AsyncIterable
from contextlib import aclosing
from types import TracebackType
from typing import Any

from httpx_sse import ServerSentEvent
from pydantic import ValidationError
from typing_extensions import Self

from a2a_tasks.client.errors import A2AClientJSONRPCError
from a2a_tasks.types import JSONRPCResponse, TaskEvent
from a2a_tasks.utils.task import parse_task_event


logger = logging.getLogger(__name__)


def _result_from_event(sse: ServerSentEvent, method: str) -> Any | None:
    """Returns the event's `result`, or None if the event should be skipped.

    Raises:
        A2AClientJSONRPCError: If the event carries an `error`.
    """
    if not sse.data.strip():
        return None
    try:
        response = JSONRPCResponse.model_validate_json(sse.data)
    except ValidationError as e:
        logger.warning(
            'Invalid SSE data received for method %s: %r (%s)',
            method,
            sse.data,
            e,
        )
        return None

    if response.error is not None:
        logger.debug(
            'Error received in SSE stream for method %s: %r',
            method,
            response.error,
        )
        raise A2AClientJSONRPCError.from_error(response.error)

    if response.result is None:
        logger.warning(
            'SSE data for method %s has neither result nor error: %r',
            method,
            sse.data,
        )
    return response.result


async def aiter_results(
    events: AsyncIterable[ServerSentEvent], method: str
) -> AsyncGenerator[Any, None]:
    """Turns server-sent events into the `result` payloads they carry.

    Malformed events are logged and skipped. An event carrying an `error`
    ends the sequence by raising `A2AClientJSONRPCError`. An event left
    unterminated when the stream closes never reaches this function and is
    discarded.

    Args:
        events: The decoded events of the response body.
        method: The JSON-RPC method being streamed, for logging.

    Yields:
        The non-null `result` member of each event, in order.
    """
    async for sse in events:
        result = _result_from_event(sse, method)
        if result is not None:
            yield result


async def aiter_events(
    events: AsyncIterable[ServerSentEvent], method: str
) -> AsyncGenerator[TaskEvent, None]:
    """Turns server-sent events into task status and artifact update events.

    Results that are neither event shape are logged and skipped.
    """
    async with aclosing(aiter_results(events, method)) as results:
        async for result in results:
            if not isinstance(result, dict):
                logger.warning(
                    'Unexpected result type for method %s: %r', method, result
                )
                continue
            try:
                yield parse_task_event(result)
            except ValidationError as e:
                logger.warning(
                    'Skipping unrecognised event for method %s: %s', method, e
                )


class TaskEventStream:
    """A single-pass, pull-based sequence of events from one subscription.

    The underlying HTTP response is opened on the first read and released
    as soon as the sequence ends, fails, or is closed. Use it as an async
    context manager (or call `aclose()`) to release the connection
    deterministically when stopping early::

        async with client.send_task_subscribe(params) as events:
            async for event in events:
                ...
    """

    def __init__(self, events: AsyncGenerator[TaskEvent, None]):
        self._events = events
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the sequence has ended or been closed."""
        return self._closed

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> TaskEvent:
        if self._closed:
            raise StopAsyncIteration
        try:
            return await self._events.__anext__()
        except BaseException:
            self._closed = True
            raise

    async def aclose(self) -> None:
        """Stops the subscription and releases the HTTP response."""
        self._closed = True
        await self._events.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
