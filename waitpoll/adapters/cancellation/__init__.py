"""Cancellation handle adapters."""

from .token import CancellationToken

__all__ = ["CancellationToken"]
