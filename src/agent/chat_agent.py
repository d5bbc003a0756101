"""Agno agent service with streaming support.

Generation collaborator for the chat client.

Design notes:

1. **Explicit lifecycle** - AgentService is constructed by the caller and
   initialize_chat() either returns a ready ChatSession or raises
   UninitializedSession. There is no module-level instance, so tests and the
   UI can inject their own service.

2. **In-memory history** - Each ChatSession gets its own Agno InMemoryDb and
   session id. Prior turns are sent back as context for the life of the
   session and vanish with it.

3. **Streaming generator** - Agno returns run events with metadata. We yield
   just the text of content events and turn run errors into GenerationFailed.
   Agno content events carry only the new text, so sessions declare
   FragmentMode.DELTA unless configured otherwise.
"""

import logging
import uuid
from collections.abc import AsyncGenerator

from agno.agent import Agent
from agno.db.in_memory import InMemoryDb
from agno.models.google import Gemini
from agno.models.openai import OpenAIChat
from agno.run.agent import RunEvent

from src.agent.config import AgentConfig, get_agent_config
from src.chat.errors import GenerationFailed, UninitializedSession
from src.models.schemas import FragmentMode

logger = logging.getLogger(__name__)


class ChatSession:
    """A configured multi-turn conversation with the model.

    Attributes:
        session_id: Agno session identifier used for history tracking.
        fragment_mode: Emission convention of stream().
    """

    def __init__(self, agent: Agent, fragment_mode: FragmentMode) -> None:
        self._agent = agent
        self.session_id = str(uuid.uuid4())
        self.fragment_mode = fragment_mode

    async def stream(self, message: str) -> AsyncGenerator[str]:
        """Stream response fragments for a user turn.

        Args:
            message: The user's message.

        Yields:
            Response text fragments as they arrive.

        Raises:
            GenerationFailed: If the model run reports an error.
        """
        response_stream = self._agent.arun(
            message,
            session_id=self.session_id,
            stream=True,
        )

        async for chunk in response_stream:
            event = getattr(chunk, "event", RunEvent.run_content)
            if event == RunEvent.run_error:
                raise GenerationFailed(str(getattr(chunk, "content", "") or "Model run failed"))
            if event != RunEvent.run_content:
                continue
            content = getattr(chunk, "content", None)
            if isinstance(content, str) and content:
                yield content


class AgentService:
    """Creates chat sessions backed by an Agno agent.

    Wraps Agno's Agent with:
    - Provider selection (Gemini or OpenAI-compatible)
    - Per-session in-memory history
    - Fail-fast initialization
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loaded from environment on initialize_chat() if not provided.
        """
        self._config = config

    def initialize_chat(self, system_instruction: str | None = None) -> ChatSession:
        """Start a new chat session.

        Args:
            system_instruction: Optional system prompt overriding the configured one.

        Returns:
            A ChatSession ready to stream replies.

        Raises:
            UninitializedSession: If configuration is missing or the model cannot be created.
        """
        try:
            config = self._config or get_agent_config()
            agent = self._create_agent(config, system_instruction or config.system_instruction)
        except Exception as e:
            raise UninitializedSession(f"Failed to initialize chat session: {e}") from e

        session = ChatSession(agent, config.fragment_mode)
        logger.info(
            f"Chat session {session.session_id} started with "
            f"{config.provider}:{config.model_name}"
        )
        return session

    def _create_model(self, config: AgentConfig) -> Gemini | OpenAIChat:
        if config.provider == "gemini":
            return Gemini(
                id=config.model_name,
                api_key=config.api_key,
                temperature=config.temperature,
                max_output_tokens=config.max_tokens,
            )
        return OpenAIChat(
            id=config.model_name,
            api_key=config.api_key,
            base_url=config.base_url,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    def _create_agent(self, config: AgentConfig, system_instruction: str) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent with the selected model and in-memory history.
        """
        return Agent(
            model=self._create_model(config),
            db=InMemoryDb(),
            instructions=system_instruction,
            # Send the last N turns back as context for multi-turn conversations
            add_history_to_context=True,
            num_history_runs=config.history_runs,
            # Output as markdown for rich formatting in UI
            markdown=True,
        )
