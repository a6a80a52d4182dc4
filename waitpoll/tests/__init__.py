"""Test suite for waitpoll.

Organized into three categories:

1. core/: Unit tests for the evaluator, scheduler and models
   - Standard library only, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - CancellationToken and LoggingReporter behavior

3. fakes/: Port implementations and condition helpers for testing
   - FakeCancellation, FakeReporter, ScriptedCondition
"""
