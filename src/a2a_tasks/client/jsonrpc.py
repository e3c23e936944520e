"""JSON-RPC envelope encoding and decoding for A2A task calls."""

import logging
import time
import uuid

from typing import Any, TypeVar

from pydantic import ValidationError

from a2a_tasks.client.errors import A2AClientJSONError, A2AClientJSONRPCError
from a2a_tasks.types import A2ABaseModel, JSONRPCRequest, JSONRPCResponse


logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=A2ABaseModel)


def generate_request_id() -> str | int:
    """Returns a fresh request id.

    A random UUID is used whenever the platform provides a secure random
    source; otherwise the id falls back to a monotonic nanosecond clock.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        logger.debug('No secure random source, using a clock based request id')
        return time.monotonic_ns()


def encode_request(
    method: str, params: A2ABaseModel | dict[str, Any] | None = None
) -> JSONRPCRequest:
    """Builds a request envelope for `method` with a fresh id.

    Args:
        method: The JSON-RPC method name.
        params: The method parameters, as a model or an already serialised dict.

    Returns:
        A frozen `JSONRPCRequest`.
    """
    if isinstance(params, A2ABaseModel):
        params = params.model_dump(mode='json', by_alias=True, exclude_none=True)
    return JSONRPCRequest(id=generate_request_id(), method=method, params=params)


def decode_response(
    body: Any,
    request_id: str | int | None = None,
    *,
    strict_id: bool = False,
) -> Any:
    """Extracts the `result` of a response envelope.

    Args:
        body: The decoded JSON body of the response.
        request_id: The id of the request this body answers, if known.
        strict_id: Whether an id mismatch is an error rather than a warning.

    Returns:
        The `result` member, or None when the envelope carries no result.

    Raises:
        A2AClientJSONError: If the body is not a JSON-RPC 2.0 response
            envelope, or has no `id` member.
        A2AClientJSONRPCError: If the envelope carries an `error` member.
    """
    try:
        response = JSONRPCResponse.model_validate(body)
    except ValidationError as e:
        raise A2AClientJSONError(
            f'Invalid JSON-RPC response structure received from server: {e}',
            body,
        ) from e

    if response.error is not None:
        raise A2AClientJSONRPCError.from_error(response.error)

    if 'id' not in response.model_fields_set:
        raise A2AClientJSONError('JSON-RPC response has no id', body)

    if request_id is not None and response.id != request_id:
        if strict_id:
            raise A2AClientJSONError(
                f'Response id {response.id!r} does not match request id '
                f'{request_id!r}'
            )
        logger.warning(
            'Response id %r does not match request id %r',
            response.id,
            request_id,
        )

    return response.result


def parse_result(result: Any, model: type[ModelT]) -> ModelT | None:
    """Validates a non-null `result` against the method's result model.

    Raises:
        A2AClientJSONError: If the result does not match `model`.
    """
    if result is None:
        return None
    try:
        return model.model_validate(result)
    except ValidationError as e:
        raise A2AClientJSONError(
            f'Failed to validate {model.__name__} result: {e}'
        ) from e
