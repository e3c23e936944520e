"""A2A task client transports."""

from a2a_tasks.client.transports.http import HttpTransport, ResponseKind


__all__ = ['HttpTransport', 'ResponseKind']
