"""Pytest fixtures and shared test configuration.

Provides reusable fixtures and fake generation collaborators.

Fixtures:
    - async_client: HTTPX client for host application testing
    - make_source: Factory for scripted fragment sources
    - make_service: Factory for fake chat services

Fakes stand in for the hosted model so the chat core can be exercised
without network access.
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.chat.errors import UninitializedSession
from src.models.schemas import FragmentMode


class ScriptedSource:
    """Fragment source replaying a fixed list of fragments.

    Records every prompt it receives. When fail_after is set, raises
    RuntimeError after yielding that many fragments.
    """

    def __init__(
        self,
        fragments: list[str],
        fragment_mode: FragmentMode = FragmentMode.CUMULATIVE,
        fail_after: int | None = None,
    ) -> None:
        self.fragments = fragments
        self.fragment_mode = fragment_mode
        self.fail_after = fail_after
        self.prompts: list[str] = []

    async def stream(self, message: str) -> AsyncGenerator[str]:
        self.prompts.append(message)
        for i, fragment in enumerate(self.fragments):
            if self.fail_after is not None and i >= self.fail_after:
                raise RuntimeError("connection reset")
            yield fragment
        if self.fail_after is not None and self.fail_after >= len(self.fragments):
            raise RuntimeError("connection reset")


class FakeService:
    """Chat service returning a prepared source, or failing to initialize."""

    def __init__(self, source: ScriptedSource | None) -> None:
        self.source = source
        self.init_calls = 0

    def initialize_chat(self, system_instruction: str | None = None) -> ScriptedSource:
        self.init_calls += 1
        if self.source is None:
            raise UninitializedSession("missing API key")
        return self.source


@pytest.fixture
def make_source() -> Callable[..., ScriptedSource]:
    """Return a factory for scripted fragment sources."""
    return ScriptedSource


@pytest.fixture
def make_service() -> Callable[[ScriptedSource | None], FakeService]:
    """Return a factory for fake chat services."""
    return FakeService


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for host application testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
