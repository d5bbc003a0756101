"""Unit tests for StreamConsumer."""

from collections.abc import Callable

import pytest

from src.chat.errors import GenerationFailed, UninitializedSession
from src.chat.stream_consumer import StreamConsumer
from src.models.schemas import FragmentMode
from tests.conftest import ScriptedSource


class TestSendAndStream:
    """Tests for successful exchanges."""

    async def test_cumulative_fragments_forwarded_in_order(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        """Cumulative fragments reach the callback unchanged and in order."""
        source = make_source(["H", "He", "Hel"], FragmentMode.CUMULATIVE)
        seen: list[str] = []

        final = await StreamConsumer(source).send_and_stream("hi", seen.append)

        assert seen == ["H", "He", "Hel"]
        assert final == "Hel"

    async def test_delta_fragments_are_accumulated(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        """Delta fragments are folded into cumulative text."""
        source = make_source(["H", "e", "l"], FragmentMode.DELTA)
        seen: list[str] = []

        final = await StreamConsumer(source).send_and_stream("hi", seen.append)

        assert seen == ["H", "He", "Hel"]
        assert final == "Hel"

    async def test_empty_fragments_are_skipped(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        source = make_source(["", "Hi", ""], FragmentMode.DELTA)
        seen: list[str] = []

        final = await StreamConsumer(source).send_and_stream("hi", seen.append)

        assert seen == ["Hi"]
        assert final == "Hi"

    async def test_empty_stream_returns_empty_text(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        seen: list[str] = []

        final = await StreamConsumer(make_source([])).send_and_stream("hi", seen.append)

        assert final == ""
        assert seen == []

    async def test_prompt_sent_as_next_turn(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        """Each call sends exactly one user turn to the source."""
        source = make_source(["ok"])
        consumer = StreamConsumer(source)

        await consumer.send_and_stream("first", lambda _: None)
        await consumer.send_and_stream("second", lambda _: None)

        assert source.prompts == ["first", "second"]


class TestSendAndStreamErrors:
    """Tests for failed exchanges."""

    async def test_uninitialized_session(self) -> None:
        """No source means failure before any network activity."""
        with pytest.raises(UninitializedSession):
            await StreamConsumer(None).send_and_stream("hi", lambda _: None)

    async def test_midstream_failure_raises_generation_failed(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        """Errors after streaming started become GenerationFailed."""
        source = make_source(["H", "He", "Hel"], fail_after=2)
        seen: list[str] = []

        with pytest.raises(GenerationFailed) as exc_info:
            await StreamConsumer(source).send_and_stream("hi", seen.append)

        assert seen == ["H", "He"]
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    async def test_failure_before_first_fragment(
        self, make_source: Callable[..., ScriptedSource]
    ) -> None:
        source = make_source(["H"], fail_after=0)
        seen: list[str] = []

        with pytest.raises(GenerationFailed):
            await StreamConsumer(source).send_and_stream("hi", seen.append)

        assert seen == []

    async def test_generation_failed_from_source_is_not_rewrapped(self) -> None:
        class FailingSource:
            fragment_mode = FragmentMode.DELTA

            async def stream(self, message: str):
                yield "partial"
                raise GenerationFailed("quota exceeded")

        with pytest.raises(GenerationFailed, match="quota exceeded") as exc_info:
            await StreamConsumer(FailingSource()).send_and_stream("hi", lambda _: None)

        assert exc_info.value.__cause__ is None
