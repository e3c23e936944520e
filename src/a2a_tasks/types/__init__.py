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

"""A2A task types module.

This module re-exports the task lifecycle models and the JSON-RPC envelope
types that carry them.
"""

from a2a_tasks.types.a2a import (
    TERMINAL_TASK_STATES,
    A2ABaseModel,
    AgentCapabilities,
    AgentCard,
    AgentProvider,
    AgentSkill,
    Artifact,
    AuthenticationInfo,
    DataPart,
    FileContent,
    FilePart,
    Message,
    Part,
    PushNotificationConfig,
    Task,
    TaskArtifactUpdateEvent,
    TaskEvent,
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
    TaskState,
    TaskStatus,
    TaskStatusUpdateEvent,
    TextPart,
)
from a2a_tasks.types.extras import (
    JSONRPC_VERSION,
    METHOD_PARAMS,
    METHOD_RESULTS,
    A2AMethod,
    JSONRPCError,
    JSONRPCRequest,
    JSONRPCResponse,
)


__all__ = [
    'JSONRPC_VERSION',
    'METHOD_PARAMS',
    'METHOD_RESULTS',
    'TERMINAL_TASK_STATES',
    'A2ABaseModel',
    'A2AMethod',
    'AgentCapabilities',
    'AgentCard',
    'AgentProvider',
    'AgentSkill',
    'Artifact',
    'AuthenticationInfo',
    'DataPart',
    'FileContent',
    'FilePart',
    'JSONRPCError',
    'JSONRPCRequest',
    'JSONRPCResponse',
    'Message',
    'Part',
    'PushNotificationConfig',
    'Task',
    'TaskArtifactUpdateEvent',
    'TaskEvent',
    'TaskIdParams',
    'TaskPushNotificationConfig',
    'TaskQueryParams',
    'TaskSendParams',
    'TaskState',
    'TaskStatus',
    'TaskStatusUpdateEvent',
    'TextPart',
]
