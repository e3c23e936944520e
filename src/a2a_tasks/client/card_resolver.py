import json
import logging

from typing import Any

import httpx

from pydantic import ValidationError

from a2a_tasks.client.errors import (
    A2AClientHTTPError,
    A2AClientJSONError,
    A2AClientTimeoutError,
    A2AClientTransportError,
)
from a2a_tasks.types import AgentCard
from a2a_tasks.utils.constants import (
    DEFAULT_AGENT_CARD_PATH,
    JSON_CONTENT_TYPE,
)


logger = logging.getLogger(__name__)


class A2ACardResolver:
    """Agent Card resolver."""

    def __init__(
        self,
        httpx_client: httpx.AsyncClient,
        base_url: str,
        agent_card_path: str = DEFAULT_AGENT_CARD_PATH,
    ) -> None:
        """Initializes the A2ACardResolver.

        Args:
            httpx_client: An async HTTP client instance (e.g., httpx.AsyncClient).
            base_url: The base URL of the agent's host.
            agent_card_path: The path to the agent card endpoint, relative to the base URL.
        """
        self.base_url = base_url.rstrip('/')
        self.agent_card_path = agent_card_path.lstrip('/')
        self.httpx_client = httpx_client

    async def get_agent_card(
        self,
        relative_card_path: str | None = None,
        http_kwargs: dict[str, Any] | None = None,
    ) -> AgentCard:
        """Fetches an agent card from a specified path relative to the base_url.

        If relative_card_path is None or empty, it defaults to the resolver's
        configured agent_card_path.

        Args:
            relative_card_path: Optional path to the agent card endpoint,
                relative to the base URL.
            http_kwargs: Optional dictionary of keyword arguments to pass to the
                underlying httpx.get request.

        Returns:
            An `AgentCard` object representing the agent's capabilities.

        Raises:
            A2AClientHTTPError: If the agent answers with a non-success status.
            A2AClientTransportError: If the agent cannot be reached.
            A2AClientJSONError: If the response body cannot be decoded as JSON
                or validated against the AgentCard schema.
        """
        if not relative_card_path:
            path_segment = self.agent_card_path
        else:
            path_segment = relative_card_path.lstrip('/')

        target_url = f'{self.base_url}/{path_segment}'
        kwargs = dict(http_kwargs or {})
        kwargs['headers'] = {
            'Accept': JSON_CONTENT_TYPE,
            **kwargs.get('headers', {}),
        }

        try:
            response = await self.httpx_client.get(target_url, **kwargs)
            response.raise_for_status()
            agent_card_data = response.json()
            logger.info(
                'Successfully fetched agent card data from %s: %s',
                target_url,
                agent_card_data,
            )
            agent_card = AgentCard.model_validate(agent_card_data)
        except httpx.HTTPStatusError as e:
            raise A2AClientHTTPError(
                e.response.status_code,
                f'HTTP error {e.response.status_code} fetching agent card '
                f'from {target_url}: {e.response.reason_phrase}',
            ) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise A2AClientJSONError(
                f'Failed to parse JSON for agent card from {target_url}: {e}'
            ) from e
        except httpx.TimeoutException as e:
            raise A2AClientTimeoutError(
                f'Network error fetching agent card from {target_url}: {e}', e
            ) from e
        except httpx.RequestError as e:
            raise A2AClientTransportError(
                f'Network error fetching agent card from {target_url}: {e}', e
            ) from e
        except ValidationError as e:
            raise A2AClientJSONError(
                f'Failed to validate agent card structure from {target_url}: '
                f'{e.json()}'
            ) from e

        return agent_card
