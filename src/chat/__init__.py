"""Chat core: transcript store, stream consumer and session controller.

Responsibilities:
    - Ordered transcript with identity-keyed, snapshot-replacing updates
    - Relaying streamed reply fragments as cumulative text
    - Optimistic turn insertion with rollback of failed replies
    - Loading and error state for the presentation layer

Contains no presentation code and no provider-specific code.
"""

from src.chat.controller import ChatController
from src.chat.errors import (
    ChatError,
    DuplicateMessageError,
    GenerationFailed,
    MessageFrozenError,
    UninitializedSession,
)
from src.chat.stream_consumer import StreamConsumer
from src.chat.transcript import TranscriptStore

__all__ = [
    "ChatController",
    "ChatError",
    "DuplicateMessageError",
    "GenerationFailed",
    "MessageFrozenError",
    "StreamConsumer",
    "TranscriptStore",
    "UninitializedSession",
]
