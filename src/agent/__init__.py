"""Agno agent logic for LLM orchestration.

Generation collaborator of the chat client.

Responsibilities:
    - Agent initialization with Gemini or OpenAI-compatible models
    - Conversation context retained per chat session
    - Streaming fragment generation

Leverages the Agno framework for agent lifecycle management.
Maintains clean separation from the transcript and UI layers.
"""

from src.agent.chat_agent import AgentService, ChatSession
from src.agent.config import AgentConfig, get_agent_config

__all__ = ["AgentConfig", "AgentService", "ChatSession", "get_agent_config"]
