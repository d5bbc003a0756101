"""Integration tests for the host application and live chat sessions.

Tests the real FastAPI app with httpx AsyncClient and ASGITransport, and a
full ChatController turn against the configured model provider.

Requirements:
    - LLM_API_KEY (or GOOGLE_API_KEY / OPENAI_API_KEY) for live model tests
    - Tests marked with @requires_api_key are skipped without key
"""

import os

import pytest
from httpx import AsyncClient

from src.agent.chat_agent import AgentService
from src.chat.controller import GREETING_ID, ChatController
from src.models.schemas import ChatState, Role


def has_llm_api_key() -> bool:
    """Check if an API key for the configured provider is set."""
    for var in ("LLM_API_KEY", "GOOGLE_API_KEY", "GEMINI_API_KEY", "OPENAI_API_KEY"):
        key = os.environ.get(var, "")
        if key and not key.isspace():
            return True
    return False


requires_api_key = pytest.mark.skipif(
    not has_llm_api_key(),
    reason="No LLM API key set - skipping live model integration test",
)


class TestHostApplication:
    """Integration tests for the FastAPI host."""

    async def test_health_check(self, async_client: AsyncClient) -> None:
        """Health endpoint reports the service as healthy."""
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "gemini-chat"}

    async def test_no_chat_api_routes(self, async_client: AsyncClient) -> None:
        """Conversation state is never exposed over HTTP."""
        response = await async_client.post("/chat/stream", json={"message": "hi"})

        assert response.status_code == 404


@requires_api_key
class TestLiveChatSession:
    """Full turns against the real provider."""

    async def test_reply_streams_and_finalizes(self) -> None:
        """A submission produces a finalized, non-empty assistant reply."""
        controller = ChatController(AgentService())
        states: list[ChatState] = []
        controller.subscribe(states.append)

        assert controller.start()
        assert controller.messages[0].id == GREETING_ID

        accepted = await controller.on_submit("Reply with the single word: hello")

        assert accepted
        assert controller.error is None
        reply = controller.messages[-1]
        assert reply.role is Role.ASSISTANT
        assert reply.content.strip()
        assert reply.is_streaming is False
        assert any(s.is_loading for s in states)
        assert controller.is_loading is False

    async def test_context_is_retained_across_turns(self) -> None:
        """The second turn can refer to the first."""
        controller = ChatController(AgentService())
        controller.start()

        await controller.on_submit("My favourite colour is teal. Just say OK.")
        await controller.on_submit("What is my favourite colour? Answer in one word.")

        assert controller.error is None
        assert "teal" in controller.messages[-1].content.lower()
