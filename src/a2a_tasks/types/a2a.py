# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Task lifecycle types for the A2A task protocol.

These models describe the snapshots and deltas an agent reports about a
task. The client only ever observes them; it never drives state changes
locally.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
)


class A2ABaseModel(BaseModel):
    """Base model for all A2A task types.

    Unknown fields are kept so payloads from newer agents survive a
    decode/encode cycle unchanged.
    """

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class TaskState(str, Enum):
    """The lifecycle state of a task as reported by the agent."""

    SUBMITTED = 'submitted'
    WORKING = 'working'
    INPUT_REQUIRED = 'input-required'
    COMPLETED = 'completed'
    CANCELED = 'canceled'
    FAILED = 'failed'
    UNKNOWN = 'unknown'


TERMINAL_TASK_STATES = frozenset(
    {TaskState.COMPLETED, TaskState.CANCELED, TaskState.FAILED}
)


class FileContent(A2ABaseModel):
    """File payload carried either inline (base64 `bytes`) or by `uri`."""

    name: str | None = None
    mime_type: str | None = Field(default=None, alias='mimeType')
    bytes: str | None = None
    uri: str | None = None


class TextPart(A2ABaseModel):
    type: Literal['text'] = 'text'
    text: str
    metadata: dict[str, Any] | None = None


class FilePart(A2ABaseModel):
    type: Literal['file'] = 'file'
    file: FileContent
    metadata: dict[str, Any] | None = None


class DataPart(A2ABaseModel):
    type: Literal['data'] = 'data'
    data: dict[str, Any]
    metadata: dict[str, Any] | None = None


Part = Annotated[TextPart | FilePart | DataPart, Field(discriminator='type')]


class Message(A2ABaseModel):
    """A single turn of communication between a user and an agent."""

    role: Literal['user', 'agent']
    parts: list[Part]
    metadata: dict[str, Any] | None = None


class TaskStatus(A2ABaseModel):
    """The state of a task at a point in time."""

    state: TaskState
    message: Message | None = None
    timestamp: str | None = None

    @field_validator('state', mode='before')
    @classmethod
    def unknown_state_fallback(cls, value: Any) -> Any:
        """Maps states this client does not recognise to `unknown`."""
        if isinstance(value, str) and value not in _STATE_VALUES:
            return TaskState.UNKNOWN
        return value


_STATE_VALUES = frozenset(state.value for state in TaskState)


def _coerce_status(value: Any) -> Any:
    # Some agents report the bare state string instead of a status object.
    if isinstance(value, str):
        return {'state': value}
    return value


StatusField = Annotated[TaskStatus, BeforeValidator(_coerce_status)]


class Artifact(A2ABaseModel):
    """An output produced by the agent while working on a task."""

    name: str | None = None
    description: str | None = None
    parts: list[Part]
    index: int = 0
    append: bool | None = None
    last_chunk: bool | None = Field(default=None, alias='lastChunk')
    metadata: dict[str, Any] | None = None


class Task(A2ABaseModel):
    """A snapshot of a task owned by the remote agent."""

    id: str
    session_id: str | None = Field(default=None, alias='sessionId')
    status: StatusField
    artifacts: list[Artifact] | None = None
    history: list[Message] | None = None
    metadata: dict[str, Any] | None = None


class TaskStatusUpdateEvent(A2ABaseModel):
    """A status change streamed for a task.

    An event whose state is terminal is the last one the stream carries
    for that task.
    """

    id: str
    status: StatusField
    final: bool = False
    metadata: dict[str, Any] | None = None


class TaskArtifactUpdateEvent(A2ABaseModel):
    """An artifact (or artifact chunk) streamed for a task."""

    id: str
    artifact: Artifact
    final: bool = False
    metadata: dict[str, Any] | None = None


TaskEvent = TaskStatusUpdateEvent | TaskArtifactUpdateEvent


class AuthenticationInfo(A2ABaseModel):
    schemes: list[str]
    credentials: str | None = None


class PushNotificationConfig(A2ABaseModel):
    """Where and how the agent should deliver out-of-band task updates."""

    url: str
    token: str | None = None
    authentication: AuthenticationInfo | None = None


class TaskPushNotificationConfig(A2ABaseModel):
    id: str
    push_notification_config: PushNotificationConfig = Field(
        alias='pushNotificationConfig'
    )


class TaskIdParams(A2ABaseModel):
    id: str
    metadata: dict[str, Any] | None = None


class TaskQueryParams(TaskIdParams):
    history_length: int | None = Field(default=None, alias='historyLength')


class TaskSendParams(A2ABaseModel):
    id: str
    session_id: str | None = Field(default=None, alias='sessionId')
    message: Message
    accepted_output_modes: list[str] | None = Field(
        default=None, alias='acceptedOutputModes'
    )
    push_notification: PushNotificationConfig | None = Field(
        default=None, alias='pushNotification'
    )
    history_length: int | None = Field(default=None, alias='historyLength')
    metadata: dict[str, Any] | None = None


class AgentCapabilities(A2ABaseModel):
    streaming: bool = False
    push_notifications: bool = Field(default=False, alias='pushNotifications')
    state_transition_history: bool = Field(
        default=False, alias='stateTransitionHistory'
    )


class AgentProvider(A2ABaseModel):
    organization: str
    url: str | None = None


class AgentSkill(A2ABaseModel):
    id: str
    name: str
    description: str | None = None
    tags: list[str] | None = None
    examples: list[str] | None = None
    input_modes: list[str] | None = Field(default=None, alias='inputModes')
    output_modes: list[str] | None = Field(default=None, alias='outputModes')


class AgentCard(A2ABaseModel):
    """Self-description of an agent.

    Only `capabilities` is relied on; agents may omit the descriptive fields.
    """

    name: str | None = None
    description: str | None = None
    url: str | None = None
    provider: AgentProvider | None = None
    version: str | None = None
    documentation_url: str | None = Field(
        default=None, alias='documentationUrl'
    )
    capabilities: AgentCapabilities = Field(default_factory=AgentCapabilities)
    default_input_modes: list[str] = Field(
        default_factory=lambda: ['text'], alias='defaultInputModes'
    )
    default_output_modes: list[str] = Field(
        default_factory=lambda: ['text'], alias='defaultOutputModes'
    )
    skills: list[AgentSkill] = Field(default_factory=list)
