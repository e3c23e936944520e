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

"""JSON-RPC envelope types used to carry A2A task methods over HTTP."""

from typing import Any, Literal

from pydantic import ConfigDict

from a2a_tasks.types.a2a import (
    A2ABaseModel,
    Task,
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
)


JSONRPC_VERSION = '2.0'


class A2AMethod:
    """JSON-RPC method names understood by A2A task agents."""

    SEND = 'tasks/send'
    GET = 'tasks/get'
    CANCEL = 'tasks/cancel'
    SEND_SUBSCRIBE = 'tasks/sendSubscribe'
    RESUBSCRIBE = 'tasks/resubscribe'
    SET_PUSH_NOTIFICATION = 'tasks/pushNotification/set'
    GET_PUSH_NOTIFICATION = 'tasks/pushNotification/get'


METHOD_PARAMS: dict[str, type[A2ABaseModel]] = {
    A2AMethod.SEND: TaskSendParams,
    A2AMethod.GET: TaskQueryParams,
    A2AMethod.CANCEL: TaskIdParams,
    A2AMethod.SEND_SUBSCRIBE: TaskSendParams,
    A2AMethod.RESUBSCRIBE: TaskQueryParams,
    A2AMethod.SET_PUSH_NOTIFICATION: TaskPushNotificationConfig,
    A2AMethod.GET_PUSH_NOTIFICATION: TaskIdParams,
}
"""Parameter model for every known method."""

METHOD_RESULTS: dict[str, type[A2ABaseModel]] = {
    A2AMethod.SEND: Task,
    A2AMethod.GET: Task,
    A2AMethod.CANCEL: Task,
    A2AMethod.SET_PUSH_NOTIFICATION: TaskPushNotificationConfig,
    A2AMethod.GET_PUSH_NOTIFICATION: TaskPushNotificationConfig,
}
"""Result model for every non-streaming method."""


class JSONRPCError(A2ABaseModel):
    """Represents a JSON-RPC 2.0 Error object."""

    code: int
    """A number that indicates the error type that occurred."""
    message: str
    """A string providing a short description of the error."""
    data: Any | None = None
    """Additional information about the error."""


class JSONRPCRequest(A2ABaseModel):
    """A request envelope. Built once per call and never modified."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal['2.0'] = JSONRPC_VERSION
    id: str | int
    method: str
    params: dict[str, Any] | None = None


class JSONRPCResponse(A2ABaseModel):
    """A response envelope carrying either `result` or `error`."""

    jsonrpc: Literal['2.0']
    id: str | int | None = None
    result: Any | None = None
    error: JSONRPCError | None = None
