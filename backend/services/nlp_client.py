"""Google Cloud Natural Language wrapper producing TextSignals."""

import logging
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import language_v1

from models.schemas.text_signal import (
    Category,
    Entity,
    EntityType,
    Sentence,
    Sentiment,
    TextSignal,
)
from services.errors import InputValidationError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_BYTES = 1_000_000

# classifyText rejects documents shorter than this many tokens
MIN_CLASSIFY_WORDS = 20


class TextSignalExtractor:
    """Send one text to the NLP backend and normalize the response.

    The backend client is injected so tests can pass a fake exposing an
    async ``annotate_text(request=...)``. No retries and no caching: every
    call is a fresh backend request.
    """

    def __init__(self, client: Any, max_text_bytes: int = DEFAULT_MAX_TEXT_BYTES) -> None:
        self._client = client
        self._max_text_bytes = max_text_bytes

    async def extract(self, text: str, *, classify: bool = True) -> TextSignal:
        self._validate(text)
        features = language_v1.AnnotateTextRequest.Features(
            extract_syntax=True,
            extract_entities=True,
            extract_document_sentiment=True,
            extract_entity_sentiment=True,
            classify_text=classify and len(text.split()) >= MIN_CLASSIFY_WORDS,
        )
        document = language_v1.Document(
            content=text,
            type_=language_v1.Document.Type.PLAIN_TEXT,
        )

        try:
            response = await self._client.annotate_text(
                request={
                    "document": document,
                    "features": features,
                    "encoding_type": language_v1.EncodingType.UTF8,
                }
            )
        except google_exceptions.GoogleAPIError as e:
            logger.error("Natural Language API error: %s", e)
            raise UpstreamError("Text analysis backend unavailable") from e

        try:
            return normalize_response(response)
        except (AttributeError, TypeError, ValueError) as e:
            logger.error("Malformed Natural Language response: %s", e)
            raise UpstreamError("Malformed text analysis response") from e

    def _validate(self, text: str) -> None:
        if not text or not text.strip():
            raise InputValidationError("Text to analyze must not be empty")
        if len(text.encode("utf-8")) > self._max_text_bytes:
            raise InputValidationError(
                f"Text too large. Max size: {self._max_text_bytes} bytes"
            )


def normalize_response(response: Any) -> TextSignal:
    """Map an AnnotateTextResponse onto a TextSignal."""
    doc_sentiment = response.document_sentiment
    return TextSignal(
        sentiment=Sentiment(score=doc_sentiment.score, magnitude=doc_sentiment.magnitude),
        entities=tuple(_entity(e) for e in response.entities),
        sentences=tuple(
            Sentence(text=s.text.content, begin_offset=s.text.begin_offset)
            for s in response.sentences
        ),
        categories=tuple(
            Category(name=c.name, confidence=c.confidence) for c in response.categories
        ),
        language=response.language or "",
    )


def _entity(raw: Any) -> Entity:
    sentiment = raw.sentiment
    return Entity(
        name=raw.name,
        type=EntityType.from_name(_enum_name(raw.type_)),
        salience=raw.salience,
        sentiment=Sentiment(
            score=sentiment.score if sentiment else 0.0,
            magnitude=sentiment.magnitude if sentiment else 0.0,
        ),
        metadata={str(k): str(v) for k, v in dict(raw.metadata).items()},
    )


def _enum_name(value: Any) -> str:
    # proto-plus enums expose .name; plain ints/strings come from fakes and JSON
    if hasattr(value, "name"):
        return value.name
    if isinstance(value, int):
        return language_v1.Entity.Type(value).name
    return str(value)
