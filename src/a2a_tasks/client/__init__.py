"""Client-side components for driving an A2A task agent."""

import logging

from a2a_tasks.client.card_resolver import A2ACardResolver
from a2a_tasks.client.client import A2AClient, Capability, ClientConfig
from a2a_tasks.client.errors import (
    A2AClientError,
    A2AClientHTTPError,
    A2AClientInvalidArgsError,
    A2AClientInvalidStateError,
    A2AClientJSONError,
    A2AClientJSONRPCError,
    A2AClientTimeoutError,
    A2AClientTransportError,
)
from a2a_tasks.client.helpers import create_text_message_object
from a2a_tasks.client.sse import TaskEventStream
from a2a_tasks.client.tls import TLSConfig


logger = logging.getLogger(__name__)


__all__ = [
    'A2ACardResolver',
    'A2AClient',
    'A2AClientError',
    'A2AClientHTTPError',
    'A2AClientInvalidArgsError',
    'A2AClientInvalidStateError',
    'A2AClientJSONError',
    'A2AClientJSONRPCError',
    'A2AClientTimeoutError',
    'A2AClientTransportError',
    'Capability',
    'ClientConfig',
    'TaskEventStream',
    'TLSConfig',
    'create_text_message_object',
]
