import argparse
import asyncio
import logging
import os
import sys
import uuid

from a2a_tasks.client import (
    A2AClient,
    A2AClientError,
    A2AClientJSONRPCError,
    ClientConfig,
    create_text_message_object,
)
from a2a_tasks.types import (
    A2ABaseModel,
    PushNotificationConfig,
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
)
from a2a_tasks.utils.constants import AGENT_URL_ENV_VAR, DEFAULT_TIMEOUT
from a2a_tasks.utils.errors import error_name


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the task client CLI."""
    parser = argparse.ArgumentParser(
        description='Drive an A2A task agent from the command line'
    )
    parser.add_argument(
        '--url',
        default=os.environ.get(AGENT_URL_ENV_VAR),
        help=f'Agent JSON-RPC endpoint. Defaults to the {AGENT_URL_ENV_VAR} environment variable.',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=DEFAULT_TIMEOUT,
        help='Timeout in seconds for non-streaming calls (default: %(default)s)',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        help='Enable debug logging',
        action='store_true',
    )

    subparsers = parser.add_subparsers(dest='cmd', required=True)

    subparsers.add_parser('card', help='Print the agent card')

    for name, help_text in (
        ('send', 'Send a task and print the resulting snapshot'),
        ('subscribe', 'Send a task and print its events as they stream'),
    ):
        send_parser = subparsers.add_parser(name, help=help_text)
        send_parser.add_argument('text', help='Text of the user message')
        send_parser.add_argument(
            '--task-id', help='Task id to use (default: a random UUID)'
        )
        send_parser.add_argument('--session-id', help='Session id of the task')

    get_parser = subparsers.add_parser('get', help='Print a task snapshot')
    get_parser.add_argument('task_id')
    get_parser.add_argument(
        '--history-length',
        type=int,
        help='Number of history messages to include',
    )

    cancel_parser = subparsers.add_parser('cancel', help='Cancel a task')
    cancel_parser.add_argument('task_id')

    resubscribe_parser = subparsers.add_parser(
        'resubscribe', help="Print a task's events after reconnecting"
    )
    resubscribe_parser.add_argument('task_id')

    push_get_parser = subparsers.add_parser(
        'push-get', help="Print a task's push notification config"
    )
    push_get_parser.add_argument('task_id')

    push_set_parser = subparsers.add_parser(
        'push-set', help="Set a task's push notification config"
    )
    push_set_parser.add_argument('task_id')
    push_set_parser.add_argument(
        '--notify-url', required=True, help='URL the agent should notify'
    )
    push_set_parser.add_argument('--token', help='Token sent with notifications')

    return parser


def _print_model(model: A2ABaseModel | None) -> None:
    if model is None:
        print('null')
        return
    print(model.model_dump_json(by_alias=True, exclude_none=True))


def _send_params(args: argparse.Namespace) -> TaskSendParams:
    return TaskSendParams(
        id=args.task_id or str(uuid.uuid4()),
        session_id=args.session_id,
        message=create_text_message_object(content=args.text),
    )


async def run_command(args: argparse.Namespace) -> None:
    """Runs the parsed command against the agent at `args.url`."""
    config = ClientConfig(timeout=args.timeout)
    async with A2AClient(args.url, config) as client:
        if args.cmd == 'card':
            _print_model(await client.get_agent_card())
        elif args.cmd == 'send':
            _print_model(await client.send_task(_send_params(args)))
        elif args.cmd == 'get':
            _print_model(
                await client.get_task(
                    TaskQueryParams(
                        id=args.task_id, history_length=args.history_length
                    )
                )
            )
        elif args.cmd == 'cancel':
            _print_model(await client.cancel_task(TaskIdParams(id=args.task_id)))
        elif args.cmd in ('subscribe', 'resubscribe'):
            if not await client.supports('streaming'):
                logger.warning('Agent card does not advertise streaming')
            events = (
                client.send_task_subscribe(_send_params(args))
                if args.cmd == 'subscribe'
                else client.resubscribe_task(TaskQueryParams(id=args.task_id))
            )
            async with events:
                async for event in events:
                    _print_model(event)
        elif args.cmd == 'push-get':
            _print_model(
                await client.get_task_push_notification(
                    TaskIdParams(id=args.task_id)
                )
            )
        elif args.cmd == 'push-set':
            _print_model(
                await client.set_task_push_notification(
                    TaskPushNotificationConfig(
                        id=args.task_id,
                        push_notification_config=PushNotificationConfig(
                            url=args.notify_url, token=args.token
                        ),
                    )
                )
            )


def format_error(error: A2AClientError) -> str:
    """Formats a client error for display to a human."""
    if isinstance(error, A2AClientJSONRPCError):
        name = error_name(error.code)
        label = f'{error.code} ({name})' if name else str(error.code)
        return f'error {label}: {error.message}'
    return f'error: {error}'


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s  %(message)s',
    )
    if not args.url:
        parser.error(f'--url is required when {AGENT_URL_ENV_VAR} is not set')

    try:
        asyncio.run(run_command(args))
    except A2AClientError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
