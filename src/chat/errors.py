"""Exceptions raised by the transcript store and the streaming exchange."""


class ChatError(Exception):
    """Base class for chat client errors."""

    pass


class UninitializedSession(ChatError):
    """Raised when the generation collaborator was never successfully configured."""

    pass


class GenerationFailed(ChatError):
    """Raised when a streaming exchange fails after it has started."""

    pass


class DuplicateMessageError(ChatError, ValueError):
    """Raised when a message identity is already present in the transcript."""

    pass


class MessageFrozenError(ChatError):
    """Raised when content of a finalized message is modified."""

    pass
