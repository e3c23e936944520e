"""Constants for well-known paths and wire values used by the A2A task client."""

DEFAULT_AGENT_CARD_PATH = '/agent-card'
AGENT_CARD_WELL_KNOWN_PATH = '/.well-known/agent.json'
DEFAULT_TIMEOUT = 30.0
"""Default per-request timeout, in seconds, for non-streaming calls."""

JSON_CONTENT_TYPE = 'application/json'
EVENT_STREAM_CONTENT_TYPE = 'text/event-stream'
AGENT_URL_ENV_VAR = 'A2A_AGENT_URL'
