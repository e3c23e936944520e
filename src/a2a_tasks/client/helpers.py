"""Helper functions for the A2A task client."""

from typing import Literal

from a2a_tasks.types import Message, TextPart


def create_text_message_object(
    role: Literal['user', 'agent'] = 'user', content: str = ''
) -> Message:
    """Create a Message object containing a single text Part.

    Args:
        role: The role of the message sender (user or agent). Defaults to 'user'.
        content: The text content of the message. Defaults to an empty string.

    Returns:
        A `Message` object with a single `TextPart`.
    """
    return Message(role=role, parts=[TextPart(text=content)])
