import asyncio
import logging

from collections.abc import AsyncGenerator
from contextlib import aclosing
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Literal

import httpx

from pydantic import ValidationError
from typing_extensions import Self

from a2a_tasks.client.card_resolver import A2ACardResolver
from a2a_tasks.client.errors import (
    A2AClientError,
    A2AClientInvalidArgsError,
    A2AClientInvalidStateError,
    A2AClientJSONRPCError,
)
from a2a_tasks.client.jsonrpc import decode_response, encode_request, parse_result
from a2a_tasks.client.sse import TaskEventStream, aiter_events
from a2a_tasks.client.tls import TLSConfig
from a2a_tasks.client.transports.http import HttpTransport
from a2a_tasks.types import (
    METHOD_PARAMS,
    METHOD_RESULTS,
    A2ABaseModel,
    A2AMethod,
    AgentCard,
    JSONRPCRequest,
    Task,
    TaskEvent,
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
)
from a2a_tasks.utils.constants import DEFAULT_AGENT_CARD_PATH, DEFAULT_TIMEOUT
from a2a_tasks.utils.errors import INTERNAL_ERROR_CODE


logger = logging.getLogger(__name__)

Capability = Literal['streaming', 'pushNotifications']


@dataclass
class ClientConfig:
    """Configuration for an `A2AClient`."""

    timeout: float | None = DEFAULT_TIMEOUT
    """Timeout in seconds for non-streaming calls. Streams never time out on reads."""

    headers: dict[str, str] = field(default_factory=dict)
    """Extra HTTP headers sent with every request."""

    agent_card_path: str = DEFAULT_AGENT_CARD_PATH
    """Path of the agent card, relative to the agent URL."""

    strict_response_ids: bool = False
    """Reject responses whose id differs from the request id instead of logging them."""

    httpx_client: httpx.AsyncClient | None = None
    """Shared http client. Not closed by the A2AClient when supplied."""

    tls_config: TLSConfig | None = None
    """TLS settings for the http client the A2AClient creates when none is supplied."""


class A2AClient:
    """A client for agents speaking the A2A task protocol over JSON-RPC.

    Each instance owns its transport and its agent card cache. Calls are
    independent and may run concurrently; the only shared state is the
    cached agent card, which is fetched at most once at a time.
    """

    def __init__(self, url: str, config: ClientConfig | None = None):
        """Initializes the A2AClient.

        Args:
            url: The agent's JSON-RPC endpoint. The agent card is resolved
                relative to it.
            config: Client configuration. Defaults to `ClientConfig()`.
        """
        self._config = config or ClientConfig()
        httpx_client = self._config.httpx_client
        owns_client = httpx_client is None
        if httpx_client is None and self._config.tls_config is not None:
            httpx_client = self._config.tls_config.create_httpx_client()
        self._transport = HttpTransport(
            url,
            httpx_client,
            owns_client=owns_client,
            headers=self._config.headers,
            timeout=self._config.timeout,
        )
        self._card_resolver = A2ACardResolver(
            self._transport.httpx_client,
            self._transport.url,
            self._config.agent_card_path,
        )
        self._agent_card: AgentCard | None = None
        self._card_fetch: asyncio.Task[AgentCard] | None = None
        self._closed = False

    @property
    def url(self) -> str:
        """The agent endpoint this client talks to."""
        return self._transport.url

    async def __aenter__(self) -> Self:
        """Enters the async context manager, returning the client itself."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exits the async context manager, ensuring close() is called."""
        await self.close()

    async def send_task(
        self, params: TaskSendParams | dict[str, Any]
    ) -> Task | None:
        """Sends a task to the agent and returns its resulting snapshot."""
        return await self._call(A2AMethod.SEND, params)

    async def get_task(
        self, params: TaskQueryParams | dict[str, Any]
    ) -> Task | None:
        """Retrieves the current snapshot of a task."""
        return await self._call(A2AMethod.GET, params)

    async def cancel_task(
        self, params: TaskIdParams | dict[str, Any]
    ) -> Task | None:
        """Requests cancellation of a task.

        The returned snapshot reflects the agent's answer to the request; the
        task is not guaranteed to be in a terminal state yet.
        """
        return await self._call(A2AMethod.CANCEL, params)

    async def set_task_push_notification(
        self, params: TaskPushNotificationConfig | dict[str, Any]
    ) -> TaskPushNotificationConfig | None:
        """Sets or updates the push notification config of a task."""
        return await self._call(A2AMethod.SET_PUSH_NOTIFICATION, params)

    async def get_task_push_notification(
        self, params: TaskIdParams | dict[str, Any]
    ) -> TaskPushNotificationConfig | None:
        """Retrieves the push notification config of a task."""
        return await self._call(A2AMethod.GET_PUSH_NOTIFICATION, params)

    def send_task_subscribe(
        self, params: TaskSendParams | dict[str, Any]
    ) -> TaskEventStream:
        """Sends a task and subscribes to its status and artifact updates.

        The request is issued when the first event is read.
        """
        return self._subscribe(A2AMethod.SEND_SUBSCRIBE, params)

    def resubscribe_task(
        self, params: TaskQueryParams | dict[str, Any]
    ) -> TaskEventStream:
        """Resumes observing a task whose earlier subscription ended."""
        return self._subscribe(A2AMethod.RESUBSCRIBE, params)

    async def get_agent_card(self) -> AgentCard:
        """Returns the agent card, fetching it on first use.

        Concurrent callers share a single in-flight fetch. A failed fetch is
        not cached, so the next call tries again.

        Raises:
            A2AClientJSONRPCError: With code -32603 if the card could not be
                retrieved; the underlying error is chained as the cause.
        """
        self._ensure_open()
        if self._agent_card is not None:
            return self._agent_card

        if self._card_fetch is None:
            self._card_fetch = asyncio.create_task(self._fetch_agent_card())
        fetch = self._card_fetch
        # Shielded so a cancelled caller does not cancel the shared fetch.
        return await asyncio.shield(fetch)

    async def supports(self, capability: Capability) -> bool:
        """Checks whether the agent card advertises `capability`.

        Returns False, rather than raising, when the card cannot be fetched.
        """
        try:
            card = await self.get_agent_card()
        except A2AClientError as e:
            logger.error(
                "Failed to determine support for capability '%s': %s",
                capability,
                e,
            )
            return False

        if capability == 'streaming':
            return card.capabilities.streaming
        if capability == 'pushNotifications':
            return card.capabilities.push_notifications
        return False

    async def close(self) -> None:
        """Closes the client and its transport."""
        if self._closed:
            return
        self._closed = True
        if self._card_fetch is not None and not self._card_fetch.done():
            self._card_fetch.cancel()
        await self._transport.close()

    async def _fetch_agent_card(self) -> AgentCard:
        try:
            card = await self._card_resolver.get_agent_card()
        except A2AClientError as e:
            logger.error('Failed to fetch or parse agent card: %s', e)
            raise A2AClientJSONRPCError(
                INTERNAL_ERROR_CODE,
                f'Could not retrieve agent card: {getattr(e, "message", e)}',
                str(e),
            ) from e
        finally:
            self._card_fetch = None
        self._agent_card = card
        return card

    async def _call(
        self, method: str, params: A2ABaseModel | dict[str, Any]
    ) -> Any:
        self._ensure_open()
        envelope = encode_request(method, _coerce_params(method, params))
        body = await self._transport.send(envelope)
        result = decode_response(
            body, envelope.id, strict_id=self._config.strict_response_ids
        )
        return parse_result(result, METHOD_RESULTS[method])

    def _subscribe(
        self, method: str, params: A2ABaseModel | dict[str, Any]
    ) -> TaskEventStream:
        self._ensure_open()
        envelope = encode_request(method, _coerce_params(method, params))
        return TaskEventStream(self._stream_events(envelope))

    async def _stream_events(
        self, envelope: JSONRPCRequest
    ) -> AsyncGenerator[TaskEvent, None]:
        async with self._transport.stream(envelope) as response, aclosing(
            self._transport.aiter_sse(response)
        ) as sse_events, aclosing(
            aiter_events(sse_events, envelope.method)
        ) as events:
            async for event in events:
                yield event

    def _ensure_open(self) -> None:
        if self._closed:
            raise A2AClientInvalidStateError('client is closed')


def _coerce_params(
    method: str, params: A2ABaseModel | dict[str, Any]
) -> A2ABaseModel:
    model = METHOD_PARAMS[method]
    if isinstance(params, model):
        return params
    if isinstance(params, A2ABaseModel):
        params = params.model_dump(by_alias=True, exclude_none=True)
    try:
        return model.model_validate(params)
    except ValidationError as e:
        raise A2AClientInvalidArgsError(
            f'Invalid params for {method}: {e}'
        ) from e
