"""Test package for Gemini Chat.

Provides test coverage for all components with unit tests for isolated
logic and integration tests for the running system.

Structure:
    - unit/: Transcript store, stream consumer, controller and agent tests
    - integration/: Host application and live model sessions

Unit tests use scripted fragment sources from conftest.py instead of a model.
Leverages pytest with pytest-check for soft assertions.
"""
