"""Chat session controller: the surface the presentation layer talks to.

Owns the transcript, the loading flag and the user-visible error for one
client session. Submissions go through two local transitions around the
network call:

1. Begin turn - the user message and an empty streaming placeholder are
   inserted before anything is sent.
2. End turn - the placeholder is finalized on success, or removed on failure
   so no empty or broken assistant entry remains visible.
"""

import logging
from collections.abc import Callable

from src.chat.base import ChatService
from src.chat.errors import GenerationFailed, UninitializedSession
from src.chat.stream_consumer import StreamConsumer
from src.chat.transcript import TranscriptStore
from src.models.schemas import ChatState, Message, Role, new_message_id

logger = logging.getLogger(__name__)

GREETING_ID = "greeting"
GREETING_TEXT = (
    "Hello! I'm your advanced NLP assistant powered by Gemini. I can help you with "
    "analysis, coding, creative writing, and more. How can I assist you today?"
)
INIT_ERROR_TEXT = (
    "Failed to initialize chat service. Please check your API key configuration."
)
GENERATION_ERROR_TEXT = (
    "I encountered an error while processing your request. Please try again."
)

StateListener = Callable[[ChatState], None]


class ChatController:
    """State holder for one conversation.

    All mutations happen on the single UI control flow, so there is exactly
    one writer and no locking.
    """

    def __init__(self, service: ChatService, system_instruction: str | None = None) -> None:
        self._service = service
        self._system_instruction = system_instruction
        self._store = TranscriptStore()
        self._consumer: StreamConsumer | None = None
        self._is_loading = False
        self._error: str | None = None
        self._init_failed = False
        self._listeners: list[StateListener] = []
        self._store.subscribe(lambda _messages: self._notify())

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._store.messages

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def is_initialized(self) -> bool:
        return self._consumer is not None

    @property
    def state(self) -> ChatState:
        return ChatState(
            messages=self._store.messages,
            is_loading=self._is_loading,
            error=self._error,
            is_initialized=self.is_initialized,
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with a ChatState after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> bool:
        """Initialize the chat session and post the greeting.

        Returns:
            True if the generation collaborator accepted its configuration.
        """
        if self.is_initialized or self._init_failed:
            return self.is_initialized

        try:
            source = self._service.initialize_chat(self._system_instruction)
        except UninitializedSession as e:
            logger.error(f"Failed to initialize chat session: {e}")
            self._init_failed = True
            self._error = INIT_ERROR_TEXT
            self._notify()
            return False

        self._consumer = StreamConsumer(source)
        logger.info("Chat session initialized")
        self._store.append(
            Message(id=GREETING_ID, role=Role.ASSISTANT, content=GREETING_TEXT)
        )
        return True

    async def on_submit(self, text: str) -> bool:
        """Handle a user submission.

        Returns:
            False if the submission was rejected without side effects
            (uninitialized session, request in flight, or blank text).
        """
        if self._consumer is None or self._is_loading or not text.strip():
            return False

        placeholder_id = self._begin_turn(text)
        finished = False
        try:
            await self._consumer.send_and_stream(
                text,
                lambda current: self._store.update_content(placeholder_id, current),
            )
            self._store.finalize(placeholder_id)
            finished = True
        except GenerationFailed as e:
            logger.error(f"Generation failed: {e}")
            self._error = GENERATION_ERROR_TEXT
        finally:
            if not finished:
                self._store.remove(placeholder_id)
            self._is_loading = False
            self._notify()
        return True

    def dismiss_error(self) -> None:
        """Clear a transient error. The start-up error cannot be dismissed."""
        if self._error is None or self._init_failed:
            return
        self._error = None
        self._notify()

    def _begin_turn(self, text: str) -> str:
        self._is_loading = True
        self._error = None
        placeholder = Message(role=Role.ASSISTANT, id=new_message_id(), is_streaming=True)
        # User message and placeholder land in the same snapshot
        self._store.extend(Message(role=Role.USER, content=text), placeholder)
        return placeholder.id

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            listener(state)
