"""Tests for the Natural Language wrapper (backend client faked)."""

from types import SimpleNamespace

import pytest
from google.api_core import exceptions as google_exceptions

from models.schemas.text_signal import EntityType
from services.errors import InputValidationError, UpstreamError
from services.nlp_client import MIN_CLASSIFY_WORDS, TextSignalExtractor, normalize_response


def _raw_entity(name, type_, salience, score=0.0, magnitude=0.0, metadata=None, sentiment=True):
    return SimpleNamespace(
        name=name,
        type_=type_,
        salience=salience,
        sentiment=SimpleNamespace(score=score, magnitude=magnitude) if sentiment else None,
        metadata=metadata or {},
    )


def _response(**overrides):
    defaults = dict(
        document_sentiment=SimpleNamespace(score=0.4, magnitude=1.2),
        entities=[
            _raw_entity("Acme", "ORGANIZATION", 0.6, score=0.3, magnitude=0.3),
            _raw_entity("$3 million", 12, 0.2, metadata={"value": "3000000"}),
        ],
        sentences=[
            SimpleNamespace(text=SimpleNamespace(content="Acme raised money.", begin_offset=0)),
            SimpleNamespace(text=SimpleNamespace(content="It grows.", begin_offset=19)),
        ],
        categories=[SimpleNamespace(name="/Finance/Investing", confidence=0.82)],
        language="en",
    )
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


class FakeLanguageClient:
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else _response()
        self.error = error
        self.requests = []

    async def annotate_text(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


class TestNormalizeResponse:
    def test_maps_all_fields(self):
        signal = normalize_response(_response())
        assert signal.score == 0.4
        assert signal.magnitude == 1.2
        assert signal.language == "en"
        assert [s.text for s in signal.sentences] == ["Acme raised money.", "It grows."]
        assert signal.sentences[1].begin_offset == 19
        assert signal.categories[0].name == "/Finance/Investing"

    def test_entity_types_from_names_and_numbers(self):
        signal = normalize_response(_response())
        assert signal.entities[0].type == EntityType.ORGANIZATION
        assert signal.entities[1].type == EntityType.NUMBER
        assert signal.entities[1].metadata == {"value": "3000000"}

    def test_unknown_type_becomes_other(self):
        response = _response(entities=[_raw_entity("thing", "HOLOGRAM", 0.5)])
        assert normalize_response(response).entities[0].type == EntityType.OTHER

    def test_missing_entity_sentiment_is_neutral(self):
        response = _response(entities=[_raw_entity("thing", "OTHER", 0.5, sentiment=False)])
        entity = normalize_response(response).entities[0]
        assert entity.sentiment.score == 0.0
        assert entity.sentiment.magnitude == 0.0

    def test_empty_response_lists(self):
        signal = normalize_response(_response(entities=[], sentences=[], categories=[]))
        assert signal.entities == ()
        assert signal.sentences == ()
        assert signal.categories == ()


class TestTextSignalExtractor:
    @pytest.mark.asyncio
    async def test_extract_sends_one_request(self):
        client = FakeLanguageClient()
        extractor = TextSignalExtractor(client)

        signal = await extractor.extract("Acme raised money. It grows.")

        assert len(client.requests) == 1
        request = client.requests[0]
        assert request["document"].content == "Acme raised money. It grows."
        assert request["features"].extract_entity_sentiment is True
        assert signal.entities[0].name == "Acme"

    @pytest.mark.asyncio
    async def test_short_text_skips_classification(self):
        client = FakeLanguageClient()
        await TextSignalExtractor(client).extract("too short to classify")
        assert client.requests[0]["features"].classify_text is False

    @pytest.mark.asyncio
    async def test_long_text_is_classified(self):
        client = FakeLanguageClient()
        text = " ".join(["word"] * MIN_CLASSIFY_WORDS)
        await TextSignalExtractor(client).extract(text)
        assert client.requests[0]["features"].classify_text is True

    @pytest.mark.asyncio
    async def test_classification_can_be_disabled(self):
        client = FakeLanguageClient()
        text = " ".join(["word"] * MIN_CLASSIFY_WORDS)
        await TextSignalExtractor(client).extract(text, classify=False)
        assert client.requests[0]["features"].classify_text is False

    @pytest.mark.asyncio
    async def test_no_caching(self):
        client = FakeLanguageClient()
        extractor = TextSignalExtractor(client)
        await extractor.extract("same text")
        await extractor.extract("same text")
        assert len(client.requests) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   \n\t"])
    async def test_rejects_empty_text(self, text):
        client = FakeLanguageClient()
        with pytest.raises(InputValidationError):
            await TextSignalExtractor(client).extract(text)
        assert client.requests == []

    @pytest.mark.asyncio
    async def test_rejects_oversized_text(self):
        client = FakeLanguageClient()
        with pytest.raises(InputValidationError, match="Max size: 10 bytes"):
            await TextSignalExtractor(client, max_text_bytes=10).extract("é" * 6)

    @pytest.mark.asyncio
    async def test_backend_failure_is_upstream_error(self):
        client = FakeLanguageClient(error=google_exceptions.ServiceUnavailable("backend down"))
        with pytest.raises(UpstreamError, match="unavailable"):
            await TextSignalExtractor(client).extract("hello there")

    @pytest.mark.asyncio
    async def test_malformed_response_is_upstream_error(self):
        client = FakeLanguageClient(response=_response(document_sentiment=None))
        with pytest.raises(UpstreamError, match="Malformed"):
            await TextSignalExtractor(client).extract("hello there")
