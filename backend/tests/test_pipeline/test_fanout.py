"""Tests for concurrent field extraction."""

import asyncio

import pytest

from conftest import FakeExtractor, make_signal
from services.errors import UpstreamError
from services.pipeline.orchestrator import extract_fields


class SlowExtractor:
    def __init__(self):
        self.in_flight = 0
        self.peak = 0

    async def extract(self, text, *, classify=True):
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        return make_signal(score=0.1)


class TestExtractFields:
    @pytest.mark.asyncio
    async def test_results_keyed_by_field(self):
        extractor = FakeExtractor()
        extractor.signals["growing demand"] = make_signal(score=0.6)
        extractor.signals["crowded field"] = make_signal(score=-0.4)

        result = await extract_fields(extractor, {"market": "growing demand", "competition": "crowded field"})

        assert list(result) == ["market", "competition"]
        assert result["market"].score == 0.6
        assert result["competition"].score == -0.4

    @pytest.mark.asyncio
    async def test_runs_concurrently(self):
        extractor = SlowExtractor()
        await extract_fields(extractor, {"a": "one", "b": "two", "c": "three"})
        assert extractor.peak == 3

    @pytest.mark.asyncio
    async def test_first_failure_fails_whole_call(self):
        extractor = FakeExtractor()
        extractor.error = UpstreamError("Text analysis backend unavailable")
        with pytest.raises(UpstreamError):
            await extract_fields(extractor, {"a": "one", "b": "two"})

    @pytest.mark.asyncio
    async def test_identical_text_is_analyzed_each_time(self):
        extractor = FakeExtractor()
        await extract_fields(extractor, {"a": "same", "b": "same"})
        assert extractor.calls == ["same", "same"]
