"""A Python client for agents speaking the A2A task protocol.

The client drives a remote agent through JSON-RPC calls over HTTP, with
streaming subscriptions delivered as server-sent events.

Example usage:

    from a2a_tasks.client import A2AClient, create_text_message_object
    from a2a_tasks.types import TaskSendParams

    async with A2AClient('http://localhost:10000') as client:
        params = TaskSendParams(
            id='task-1', message=create_text_message_object(content='hi')
        )
        if await client.supports('streaming'):
            async with client.send_task_subscribe(params) as events:
                async for event in events:
                    print(event)
        else:
            print(await client.send_task(params))
"""

from a2a_tasks import client, types, utils


__all__ = ['client', 'types', 'utils']
