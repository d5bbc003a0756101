"""Relays one streamed exchange from a fragment source to a callback."""

import logging
from collections.abc import Callable

from src.chat.base import FragmentSource
from src.chat.errors import GenerationFailed, UninitializedSession
from src.models.schemas import FragmentMode

logger = logging.getLogger(__name__)


class StreamConsumer:
    """Drives request/response exchanges with a fragment source.

    Callers always receive the complete reply text so far. How fragments are
    folded into that text follows the source's declared fragment_mode.
    """

    def __init__(self, source: FragmentSource | None) -> None:
        self._source = source

    async def send_and_stream(
        self,
        prompt_text: str,
        on_fragment: Callable[[str], None],
    ) -> str:
        """Send a user turn and stream the reply.

        Args:
            prompt_text: The user's message for this turn.
            on_fragment: Called synchronously with the cumulative reply text
                after every non-empty fragment, in arrival order.

        Returns:
            The final reply text.

        Raises:
            UninitializedSession: If there is no initialized source.
            GenerationFailed: If the exchange fails at any point.
        """
        if self._source is None:
            raise UninitializedSession("Chat session not initialized")

        cumulative = self._source.fragment_mode is FragmentMode.CUMULATIVE
        full_text = ""
        fragments = 0

        try:
            async for fragment in self._source.stream(prompt_text):
                if not fragment:
                    continue
                full_text = fragment if cumulative else full_text + fragment
                fragments += 1
                on_fragment(full_text)
        except GenerationFailed:
            raise
        except Exception as e:
            logger.error(f"Error while streaming reply: {e}")
            raise GenerationFailed(str(e) or type(e).__name__) from e

        logger.debug(f"Stream finished after {fragments} fragments ({len(full_text)} chars)")
        return full_text
