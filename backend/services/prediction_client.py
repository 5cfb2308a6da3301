"""Gemini prediction wrapper (google-genai) with error handling."""

import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import BaseModel

from services.errors import UpstreamError

logger = logging.getLogger(__name__)


class GenerationParameters(BaseModel):
    temperature: float = 0.2
    max_output_tokens: int = 1024
    top_p: float = 0.8
    top_k: int = 40


class PredictionInstance(BaseModel):
    prompt: str


class PredictionRequest(BaseModel):
    instances: list[PredictionInstance]
    parameters: GenerationParameters = GenerationParameters()


class PredictionResponse(BaseModel):
    predictions: list[str] = []


def create_genai_client(api_key: str = "", project: str = "", location: str = "us-central1") -> genai.Client:
    """API-key client when a key is configured, Vertex AI otherwise."""
    if api_key:
        return genai.Client(api_key=api_key)
    return genai.Client(vertexai=True, project=project or None, location=location)


class PredictionClient:
    def __init__(self, client: Any, model: str) -> None:
        self._client = client
        self._model = model

    async def predict(self, request: PredictionRequest) -> PredictionResponse:
        """Run every instance through the model; predictions keep instance order."""
        params = request.parameters
        config = types.GenerateContentConfig(
            temperature=params.temperature,
            max_output_tokens=params.max_output_tokens,
            top_p=params.top_p,
            top_k=params.top_k,
        )

        predictions: list[str] = []
        for instance in request.instances:
            try:
                response = await self._client.aio.models.generate_content(
                    model=self._model,
                    contents=instance.prompt,
                    config=config,
                )
            except (genai_errors.APIError, httpx.HTTPError) as e:
                logger.error("Gemini API error: %s", e)
                raise UpstreamError("Prediction backend unavailable") from e

            text = (response.text or "").strip()
            if not text:
                logger.error("Gemini returned an empty prediction (model=%s)", self._model)
                raise UpstreamError("Malformed prediction response")
            predictions.append(text)

        return PredictionResponse(predictions=predictions)

    async def generate(self, prompt: str, parameters: GenerationParameters | None = None) -> str:
        request = PredictionRequest(
            instances=[PredictionInstance(prompt=prompt)],
            parameters=parameters or GenerationParameters(),
        )
        response = await self.predict(request)
        return response.predictions[0]
