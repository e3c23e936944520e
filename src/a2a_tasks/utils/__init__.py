"""Utility functions for the A2A task client."""

from a2a_tasks.utils.message import get_artifact_text, get_message_text
from a2a_tasks.utils.parts import get_data_parts, get_file_parts, get_text_parts
from a2a_tasks.utils.task import (
    is_final_event,
    is_task_finished,
    is_terminal_state,
    parse_task_event,
)


__all__ = [
    'get_artifact_text',
    'get_data_parts',
    'get_file_parts',
    'get_message_text',
    'get_text_parts',
    'is_final_event',
    'is_task_finished',
    'is_terminal_state',
    'parse_task_event',
]
