"""Shared fixtures for the transcribe-api tests."""

import os

os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

import pytest  # noqa: E402

from domain import PartPlanner, SizeGuard  # noqa: E402
from domain.prefix_trimmer import PrefixTrimmer  # noqa: E402
from domain.segment_cutter import SegmentCutter  # noqa: E402
from domain.transcript_aggregator import TranscriptAggregator  # noqa: E402
from fakes import FakeLLM, FakeProber, FakeTranscoder, FakeTranscriber  # noqa: E402
from handlers import RecapHandler  # noqa: E402


@pytest.fixture
def prober():
    return FakeProber(duration=3350.0)


@pytest.fixture
def transcoder():
    return FakeTranscoder()


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def size_guard():
    return SizeGuard()


@pytest.fixture
def handler(prober, transcoder, transcriber, llm, size_guard):
    return RecapHandler(
        prober=prober,
        planner=PartPlanner(),
        cutter=SegmentCutter(transcoder),
        size_guard=size_guard,
        aggregator=TranscriptAggregator(transcriber),
        trimmer=PrefixTrimmer(transcoder),
        llm=llm,
    )
