"""Unit tests for individual components in isolation.

Ensures fast execution with no network access.

Coverage:
    - chat/: Transcript operations, fragment accumulation, turn handling
    - agent/: Agent configuration and session initialization
    - models/: Message invariants

Uses fake fragment sources and mocked Agno classes for external services.
Leverages pytest-check for multiple assertions per test.
"""
