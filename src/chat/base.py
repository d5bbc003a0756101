"""Interfaces of the generation collaborator as seen by the chat core."""

from collections.abc import AsyncIterator
from typing import Protocol

from src.models.schemas import FragmentMode


class FragmentSource(Protocol):
    """An initialized chat session that streams replies turn by turn.

    The source keeps prior turns as context on its own. fragment_mode declares
    whether each yielded fragment is new text or the whole reply so far.
    """

    fragment_mode: FragmentMode

    def stream(self, message: str) -> AsyncIterator[str]: ...


class ChatService(Protocol):
    """Factory for chat sessions.

    initialize_chat either returns a ready FragmentSource or raises
    UninitializedSession.
    """

    def initialize_chat(self, system_instruction: str | None = None) -> FragmentSource: ...
