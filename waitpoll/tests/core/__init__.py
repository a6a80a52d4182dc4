"""Unit tests for waitpoll core logic."""
