"""Tests for the Gemini prediction wrapper and prompt templates."""

from types import SimpleNamespace

import httpx
import pytest

from services import prompt_builder
from services.errors import UpstreamError
from services.prediction_client import (
    GenerationParameters,
    PredictionClient,
    PredictionInstance,
    PredictionRequest,
)


class FakeModels:
    def __init__(self, replies=None, error=None):
        self.replies = list(replies or ["Model output"])
        self.error = error
        self.calls = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.replies.pop(0))


def _client(models):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


class TestPredictionClient:
    @pytest.mark.asyncio
    async def test_generate_returns_first_prediction(self):
        models = FakeModels(replies=["  A business plan.  "])
        predictor = PredictionClient(_client(models), "gemini-2.5-flash")

        text = await predictor.generate("Write a plan", GenerationParameters(temperature=0.3, max_output_tokens=2048))

        assert text == "A business plan."
        call = models.calls[0]
        assert call["model"] == "gemini-2.5-flash"
        assert call["contents"] == "Write a plan"
        assert call["config"].temperature == 0.3
        assert call["config"].max_output_tokens == 2048
        assert call["config"].top_p == 0.8
        assert call["config"].top_k == 40

    @pytest.mark.asyncio
    async def test_predict_keeps_instance_order(self):
        models = FakeModels(replies=["first", "second"])
        predictor = PredictionClient(_client(models), "m")
        request = PredictionRequest(
            instances=[PredictionInstance(prompt="one"), PredictionInstance(prompt="two")]
        )
        response = await predictor.predict(request)
        assert response.predictions == ["first", "second"]
        assert [c["contents"] for c in models.calls] == ["one", "two"]

    @pytest.mark.asyncio
    async def test_transport_error_is_upstream_error(self):
        models = FakeModels(error=httpx.ConnectError("connection refused"))
        predictor = PredictionClient(_client(models), "m")
        with pytest.raises(UpstreamError, match="unavailable"):
            await predictor.generate("hello")

    @pytest.mark.asyncio
    async def test_empty_output_is_malformed(self):
        models = FakeModels(replies=[""])
        predictor = PredictionClient(_client(models), "m")
        with pytest.raises(UpstreamError, match="Malformed"):
            await predictor.generate("hello")


class TestPromptBuilder:
    def test_idea_prompt(self):
        prompt, params = prompt_builder.build_idea_analysis_prompt("Solar kiosks", "Energy", "Rural Kenya")
        assert "Idea: Solar kiosks" in prompt
        assert "Target Market: Rural Kenya" in prompt
        assert "1. Feasibility analysis" in prompt
        assert params.temperature == 0.2

    def test_business_plan_is_long_form(self):
        _, params = prompt_builder.build_business_plan_prompt("idea", "analysis", "$1B", "few")
        assert params.max_output_tokens == 2048

    def test_pitch_prompt_lists_every_slide(self):
        prompt, _ = prompt_builder.build_pitch_content_prompt("idea", "plan", "data")
        assert "8. Ask" in prompt
        assert "markdown" in prompt

    def test_resume_prompts_are_precise(self):
        _, match_params = prompt_builder.build_resume_match_prompt("resume", "jd")
        _, skills_params = prompt_builder.build_resume_skills_prompt("resume")
        assert match_params.temperature == 0.1
        assert skills_params.temperature == 0.1

    def test_cover_letter_is_creative(self):
        prompt, params = prompt_builder.build_cover_letter_prompt("jd", "5 years", "Acme")
        assert "Includes call to action" in prompt
        assert params.temperature == 0.4
