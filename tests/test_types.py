"""Tests for the task lifecycle and envelope models."""

import pytest

from pydantic import ValidationError

from a2a_tasks.types import (
    METHOD_PARAMS,
    METHOD_RESULTS,
    A2AMethod,
    AgentCard,
    DataPart,
    FilePart,
    JSONRPCResponse,
    Message,
    Task,
    TaskSendParams,
    TaskState,
    TaskStatus,
    TaskStatusUpdateEvent,
    TextPart,
)


# --- Helper Data ---

TASK_PAYLOAD = {
    'id': 't1',
    'sessionId': 's1',
    'status': {
        'state': 'working',
        'timestamp': '2025-01-01T00:00:00Z',
        'message': {
            'role': 'agent',
            'parts': [{'type': 'text', 'text': 'thinking'}],
        },
    },
    'artifacts': [
        {
            'name': 'result',
            'parts': [
                {'type': 'data', 'data': {'answer': 42}},
                {
                    'type': 'file',
                    'file': {'uri': 'https://example.com/f', 'mimeType': 'text/plain'},
                },
            ],
        }
    ],
}


# --- Task ---


def test_task_from_wire_payload():
    task = Task.model_validate(TASK_PAYLOAD)
    assert task.session_id == 's1'
    assert task.status.state is TaskState.WORKING
    assert isinstance(task.status.message.parts[0], TextPart)
    parts = task.artifacts[0].parts
    assert isinstance(parts[0], DataPart)
    assert isinstance(parts[1], FilePart)
    assert parts[1].file.mime_type == 'text/plain'


def test_task_dumps_wire_aliases():
    task = Task.model_validate(TASK_PAYLOAD)
    dumped = task.model_dump(mode='json', by_alias=True, exclude_none=True)
    assert dumped['sessionId'] == 's1'
    assert dumped['artifacts'][0]['parts'][1]['file']['mimeType'] == 'text/plain'
    assert dumped['artifacts'][0]['index'] == 0


def test_bare_status_string():
    task = Task.model_validate({'id': 't1', 'status': 'submitted'})
    assert task.status == TaskStatus(state=TaskState.SUBMITTED)


@pytest.mark.parametrize('state', ['paused', 'rejected', 'auth-required'])
def test_unrecognised_state_maps_to_unknown(state: str):
    task = Task.model_validate({'id': 't1', 'status': {'state': state}})
    assert task.status.state is TaskState.UNKNOWN


def test_state_must_be_a_string():
    with pytest.raises(ValidationError):
        TaskStatus.model_validate({'state': 3})


def test_unknown_fields_survive_round_trip():
    payload = {'id': 't1', 'status': {'state': 'completed', 'progress': 1.0}, 'x-trace': 'abc'}
    task = Task.model_validate(payload)
    dumped = task.model_dump(mode='json', by_alias=True, exclude_none=True)
    assert dumped['x-trace'] == 'abc'
    assert dumped['status']['progress'] == 1.0


def test_task_requires_id():
    with pytest.raises(ValidationError):
        Task.model_validate({'status': 'working'})


# --- Events ---


def test_status_update_event_defaults():
    event = TaskStatusUpdateEvent.model_validate(
        {'id': 't1', 'status': {'state': 'input-required'}}
    )
    assert event.final is False
    assert event.status.state is TaskState.INPUT_REQUIRED


# --- Messages and params ---


def test_message_role_is_checked():
    with pytest.raises(ValidationError):
        Message(role='system', parts=[TextPart(text='x')])


def test_unknown_part_type_is_rejected():
    with pytest.raises(ValidationError):
        Message.model_validate({'role': 'user', 'parts': [{'type': 'video'}]})


def test_send_params_accept_field_names_and_aliases():
    message = Message(role='user', parts=[TextPart(text='hi')])
    by_name = TaskSendParams(id='t1', session_id='s1', message=message)
    by_alias = TaskSendParams.model_validate(
        {'id': 't1', 'sessionId': 's1', 'message': message.model_dump()}
    )
    assert by_name == by_alias


def test_every_method_has_params():
    assert set(METHOD_PARAMS) == {
        A2AMethod.SEND,
        A2AMethod.GET,
        A2AMethod.CANCEL,
        A2AMethod.SEND_SUBSCRIBE,
        A2AMethod.RESUBSCRIBE,
        A2AMethod.SET_PUSH_NOTIFICATION,
        A2AMethod.GET_PUSH_NOTIFICATION,
    }
    assert set(METHOD_RESULTS) < set(METHOD_PARAMS)


# --- Envelopes and agent card ---


def test_response_envelope_with_error():
    response = JSONRPCResponse.model_validate(
        {'jsonrpc': '2.0', 'id': 1, 'error': {'code': -32601, 'message': 'nope'}}
    )
    assert response.result is None
    assert response.error.code == -32601


def test_agent_card_defaults():
    card = AgentCard.model_validate(
        {'name': 'A', 'url': 'http://a', 'version': '1'}
    )
    assert card.capabilities.streaming is False
    assert card.capabilities.push_notifications is False
    assert card.default_input_modes == ['text']
    assert card.skills == []


def test_response_envelope_requires_version_tag():
    with pytest.raises(ValidationError):
        JSONRPCResponse.model_validate({'id': 1, 'result': {}})


def test_agent_card_with_only_capabilities():
    card = AgentCard.model_validate(
        {'capabilities': {'streaming': True, 'pushNotifications': False}}
    )
    assert card.name is None
    assert card.url is None
    assert card.version is None
    assert card.capabilities.streaming is True
