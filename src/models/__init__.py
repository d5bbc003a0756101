"""Pydantic models shared by the chat core and the presentation layer.

Models:
    - Role: Message author (user or assistant)
    - Message: Immutable transcript entry with streaming flag
    - FragmentMode: Delta or cumulative fragment convention
    - ChatState: Snapshot rendered by the UI
"""

from src.models.schemas import ChatState, FragmentMode, Message, Role, new_message_id

__all__ = ["ChatState", "FragmentMode", "Message", "Role", "new_message_id"]
