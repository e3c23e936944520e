"""Utility functions for inspecting A2A Task snapshots and stream events."""

from typing import Any

from a2a_tasks.types import (
    TERMINAL_TASK_STATES,
    Task,
    TaskArtifactUpdateEvent,
    TaskEvent,
    TaskState,
    TaskStatusUpdateEvent,
)


def is_terminal_state(state: TaskState) -> bool:
    """Returns True for `completed`, `canceled` and `failed`.

    `unknown` is never terminal: it only means this client could not
    interpret the state the agent reported.
    """
    return state in TERMINAL_TASK_STATES


def is_task_finished(task: Task) -> bool:
    """Returns True if the task snapshot is in a terminal state."""
    return is_terminal_state(task.status.state)


def is_final_event(event: TaskEvent) -> bool:
    """Returns True if no further events are expected after `event`.

    A status update carrying a terminal state ends the stream even when the
    agent did not set `final`.
    """
    if isinstance(event, TaskStatusUpdateEvent):
        return event.final or is_terminal_state(event.status.state)
    return event.final


def parse_task_event(payload: dict[str, Any]) -> TaskEvent:
    """Classifies a streamed result payload as a status or artifact update.

    Args:
        payload: The `result` object of a streamed response envelope.

    Returns:
        A `TaskArtifactUpdateEvent` when the payload carries an `artifact`,
        otherwise a `TaskStatusUpdateEvent`.

    Raises:
        pydantic.ValidationError: If the payload matches neither shape.
    """
    if 'artifact' in payload:
        return TaskArtifactUpdateEvent.model_validate(payload)
    return TaskStatusUpdateEvent.model_validate(payload)
