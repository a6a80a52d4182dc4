"""Adapter implementations for waitpoll ports.

Adapters are organized by port:
- cancellation/: CancellationPort implementations
- reporting/: PollReporterPort implementations
"""
