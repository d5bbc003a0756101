import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Role(str, Enum):
    """Author of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class FragmentMode(str, Enum):
    """Emission convention of a fragment source.

    DELTA sources send only the new text of each fragment, CUMULATIVE sources
    send the whole response so far with every fragment.
    """

    DELTA = "delta"
    CUMULATIVE = "cumulative"


def new_message_id() -> str:
    """Return a fresh message identity."""
    return uuid.uuid4().hex


class Message(BaseModel):
    """A single entry of the conversation transcript.

    Attributes:
        id: Identity, unique and stable for the session.
        role: The author (user or assistant).
        content: Message text. Frozen once is_streaming is False.
        timestamp: Creation time.
        is_streaming: Whether an assistant reply is still being received.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_message_id, min_length=1)
    role: Role
    content: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)
    is_streaming: bool = False

    @model_validator(mode="after")
    def check_streaming_role(self) -> "Message":
        """Only assistant messages may be streaming."""
        if self.is_streaming and self.role is not Role.ASSISTANT:
            raise ValueError("Only assistant messages can be streaming")
        return self


class ChatState(BaseModel):
    """Snapshot of everything the presentation layer renders.

    Attributes:
        messages: Ordered transcript.
        is_loading: Whether a generation request is outstanding.
        error: User-visible error text, if any.
        is_initialized: Whether the generation collaborator accepted its configuration.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    is_loading: bool = False
    error: str | None = None
    is_initialized: bool = False

    @property
    def accepts_input(self) -> bool:
        """Whether the input box and send button are enabled."""
        return self.is_initialized and not self.is_loading
