from typing import NoReturn

import pytest

from a2a_tasks.client import A2AClientError, A2AClientHTTPError, A2AClientJSONError
from a2a_tasks.client.errors import (
    A2AClientInvalidArgsError,
    A2AClientInvalidStateError,
    A2AClientJSONRPCError,
    A2AClientTimeoutError,
    A2AClientTransportError,
)
from a2a_tasks.types import JSONRPCError


class TestA2AClientError:
    """Test cases for the base A2AClientError class."""

    def test_instantiation(self) -> None:
        """Test that A2AClientError can be instantiated."""
        error = A2AClientError('Test error message')
        assert isinstance(error, Exception)
        assert str(error) == 'Test error message'


class TestA2AClientJSONRPCError:
    """Test cases for errors carrying a JSON-RPC code."""

    def test_preserves_code_message_and_data(self) -> None:
        error = A2AClientJSONRPCError(-32001, 'Task not found', {'id': 't1'})
        assert isinstance(error, A2AClientError)
        assert error.code == -32001
        assert error.message == 'Task not found'
        assert error.data == {'id': 't1'}

    def test_message_formatting(self) -> None:
        error = A2AClientJSONRPCError(-32601, 'Method not found')
        assert str(error) == 'JSON-RPC Error -32601: Method not found'

    def test_repr(self) -> None:
        error = A2AClientJSONRPCError(-32602, 'Invalid params')
        assert (
            repr(error)
            == "A2AClientJSONRPCError(code=-32602, message='Invalid params')"
        )

    def test_from_error_round_trips_model(self) -> None:
        model = JSONRPCError(code=42, message='custom', data=[1, 2])
        error = A2AClientJSONRPCError.from_error(model)
        assert error.code == 42
        assert error.error == model


class TestA2AClientHTTPError:
    """Test cases for A2AClientHTTPError class."""

    def test_instantiation(self) -> None:
        """Test that A2AClientHTTPError can be instantiated with status_code and message."""
        error = A2AClientHTTPError(404, 'Not Found')
        assert isinstance(error, A2AClientTransportError)
        assert error.status_code == 404
        assert error.message == 'Not Found'
        assert error.code == -32603

    def test_message_formatting(self) -> None:
        """Test that the error message is formatted correctly."""
        error = A2AClientHTTPError(500, 'Internal Server Error')
        assert str(error) == 'HTTP Error 500: Internal Server Error'

    def test_repr(self) -> None:
        """Test that __repr__ shows structured attributes."""
        error = A2AClientHTTPError(404, 'Not Found')
        assert repr(error) == (
            "A2AClientHTTPError(status_code=404, code=-32603, message='Not Found')"
        )

    def test_body_error_code_is_kept(self) -> None:
        error = A2AClientHTTPError(
            400, 'Bad params', code=-32602, data={'field': 'id'}, body='{}'
        )
        assert error.code == -32602
        assert error.data == {'field': 'id'}
        assert error.body == '{}'

    def test_with_empty_message(self) -> None:
        """Test behavior with an empty message."""
        error = A2AClientHTTPError(403, '')
        assert error.message == ''
        assert str(error) == 'HTTP Error 403: '


class TestA2AClientJSONError:
    """Test cases for A2AClientJSONError class."""

    def test_instantiation(self) -> None:
        error = A2AClientJSONError('Invalid JSON format')
        assert isinstance(error, A2AClientJSONRPCError)
        assert error.code == -32603
        assert error.message == 'Invalid JSON format'

    def test_message_formatting(self) -> None:
        error = A2AClientJSONError('Missing required field')
        assert str(error) == 'JSON Error: Missing required field'

    def test_repr(self) -> None:
        error = A2AClientJSONError('Invalid JSON format')
        assert (
            repr(error) == "A2AClientJSONError(message='Invalid JSON format')"
        )


class TestA2AClientTransportError:
    """Test cases for network level failures."""

    def test_cause_is_kept(self) -> None:
        cause = ConnectionResetError('reset by peer')
        error = A2AClientTransportError('Network error: reset by peer', cause)
        assert error.cause is cause
        assert error.code == -32603

    def test_timeout_formatting(self) -> None:
        error = A2AClientTimeoutError('Request timed out')
        assert isinstance(error, A2AClientTransportError)
        assert str(error) == 'Timeout Error: Request timed out'
        assert repr(error) == "A2AClientTimeoutError(message='Request timed out')"


class TestArgsAndStateErrors:
    """Test cases for errors raised before anything is sent."""

    def test_invalid_args(self) -> None:
        error = A2AClientInvalidArgsError('missing id')
        assert str(error) == 'Invalid arguments error: missing id'
        assert error.code == -32602
        assert repr(error) == "A2AClientInvalidArgsError(message='missing id')"

    def test_invalid_state(self) -> None:
        error = A2AClientInvalidStateError('client is closed')
        assert str(error) == 'Invalid state error: client is closed'
        assert error.code == -32603
        assert (
            repr(error)
            == "A2AClientInvalidStateError(message='client is closed')"
        )


class TestExceptionRaising:
    """Test cases for raising and handling the exceptions."""

    def test_catch_by_base_class(self) -> None:
        def raise_error() -> NoReturn:
            raise A2AClientHTTPError(429, 'Too Many Requests')

        with pytest.raises(A2AClientError) as exc_info:
            raise_error()
        assert isinstance(exc_info.value, A2AClientJSONRPCError)

    def test_chained_cause(self) -> None:
        try:
            try:
                raise ValueError('Original error')
            except ValueError as e:
                raise A2AClientJSONError('Wrapped') from e
        except A2AClientJSONError as error:
            assert isinstance(error.__cause__, ValueError)
