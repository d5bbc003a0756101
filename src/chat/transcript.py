"""Ordered, identity-keyed transcript with snapshot semantics.

Every mutation builds a new tuple of immutable Message objects and swaps it in
as a whole, so listeners only ever observe complete transcripts. Insertion
order is display order and entries are never reordered.
"""

import logging
from collections.abc import Callable, Iterable

from src.chat.errors import DuplicateMessageError, MessageFrozenError
from src.models.schemas import Message, Role

logger = logging.getLogger(__name__)

TranscriptListener = Callable[[tuple[Message, ...]], None]


class TranscriptStore:
    """Owns the conversation transcript for one client session."""

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._messages: tuple[Message, ...] = ()
        self._listeners: list[TranscriptListener] = []
        for message in messages:
            self.append(message)

    @property
    def messages(self) -> tuple[Message, ...]:
        """Current transcript snapshot."""
        return self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def subscribe(self, listener: TranscriptListener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get(self, message_id: str) -> Message | None:
        for message in self._messages:
            if message.id == message_id:
                return message
        return None

    def append(self, message: Message) -> None:
        """Add a message to the end of the transcript.

        Raises:
            DuplicateMessageError: If a message with the same id exists.
        """
        if self.get(message.id) is not None:
            raise DuplicateMessageError(f"Message {message.id} already in transcript")
        self._commit((*self._messages, message))

    def extend(self, *messages: Message) -> None:
        """Add several messages at the end as one snapshot.

        Raises:
            DuplicateMessageError: If any id is already present or repeated.
        """
        seen = {m.id for m in self._messages}
        for message in messages:
            if message.id in seen:
                raise DuplicateMessageError(f"Message {message.id} already in transcript")
            seen.add(message.id)
        if messages:
            self._commit((*self._messages, *messages))

    def append_placeholder(
        self,
        message_id: str,
        role: Role = Role.ASSISTANT,
        streaming: bool = True,
        content: str = "",
    ) -> Message:
        """Add an in-progress assistant message after its paired user message.

        Returns:
            The placeholder that was appended.
        """
        placeholder = Message(
            id=message_id,
            role=role,
            content=content,
            is_streaming=streaming,
        )
        self.append(placeholder)
        return placeholder

    def update_content(self, message_id: str, content: str) -> bool:
        """Replace the content of a streaming message.

        Returns:
            False if no message has that id, True otherwise.

        Raises:
            MessageFrozenError: If the message was already finalized.
        """
        target = self.get(message_id)
        if target is None:
            logger.debug(f"Ignoring content update for unknown message {message_id}")
            return False
        if not target.is_streaming:
            raise MessageFrozenError(f"Message {message_id} is finalized")
        self._replace(message_id, target.model_copy(update={"content": content}))
        return True

    def finalize(self, message_id: str) -> bool:
        """Mark a message as no longer streaming, keeping its content."""
        target = self.get(message_id)
        if target is None:
            logger.debug(f"Ignoring finalize for unknown message {message_id}")
            return False
        if target.is_streaming:
            self._replace(message_id, target.model_copy(update={"is_streaming": False}))
        return True

    def remove(self, message_id: str) -> bool:
        """Delete a message, e.g. a failed placeholder."""
        if self.get(message_id) is None:
            logger.debug(f"Ignoring remove for unknown message {message_id}")
            return False
        self._commit(tuple(m for m in self._messages if m.id != message_id))
        return True

    def _replace(self, message_id: str, updated: Message) -> None:
        self._commit(
            tuple(updated if m.id == message_id else m for m in self._messages)
        )

    def _commit(self, messages: tuple[Message, ...]) -> None:
        self._messages = messages
        for listener in list(self._listeners):
            listener(messages)
