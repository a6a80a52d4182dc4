"""Tests for waitpoll adapters."""
