"""Tests for idea check and SWOT verdicts."""

import pytest

from conftest import make_entity, make_signal
from models.schemas.text_signal import Category, EntityType
from services.pipeline.planning import idea_check, swot


class TestIdeaCheck:
    def test_feasibility_is_signed_percentage(self):
        result = idea_check(make_signal(score=-0.4))
        assert result.feasibility.score == pytest.approx(-40.0)
        assert result.feasibility.explanation == "The idea sentiment analysis shows negative indicators"

    def test_positive_explanation(self):
        result = idea_check(make_signal(score=0.6))
        assert "positive indicators" in result.feasibility.explanation

    def test_key_entities_above_mention_threshold(self):
        signal = make_signal(
            score=0.5,
            entities=[
                make_entity("platform", salience=0.5),
                make_entity("farmers", salience=0.25),
                make_entity("app", salience=0.05),
            ],
        )
        result = idea_check(signal)
        assert [e.name for e in result.market_potential.key_entities] == ["platform", "farmers"]

    def test_recommendations(self):
        signal = make_signal(
            score=-0.1,
            entities=[
                make_entity("Kenya", type=EntityType.LOCATION),
                make_entity("Safaricom", type=EntityType.ORGANIZATION),
            ],
            categories=[Category(name="/Food & Drink", confidence=0.6)],
        )
        recs = idea_check(signal).recommendations
        assert recs == [
            "Consider refining the value proposition to address potential concerns",
            "Focus on key markets/organizations: Kenya, Safaricom",
            "Consider expanding into related categories: /Food & Drink",
        ]

    def test_categories_carried_over(self):
        signal = make_signal(categories=[Category(name="/Finance", confidence=0.8)])
        categories = idea_check(signal).market_potential.categories
        assert categories[0].name == "/Finance"
        assert categories[0].confidence == 0.8


class TestSwot:
    def test_empty_entities_give_empty_lists(self):
        result = swot(make_signal(), make_signal(), make_signal())
        assert result.strengths == []
        assert result.weaknesses == []
        assert result.opportunities == []
        assert result.threats == []

    def test_strengths(self):
        idea = make_signal(score=0.4)
        market = make_signal(entities=[make_entity("Europe", salience=0.5), make_entity("Asia", salience=0.2)])
        result = swot(idea, market, make_signal())
        assert result.strengths == [
            "Strong positive market perception potential",
            "Strong presence in key markets: Europe",
        ]

    def test_weaknesses(self):
        competition = make_signal(
            entities=[
                make_entity("Uber", salience=0.6, score=0.2),
                make_entity("Lyft", salience=0.4, score=-0.3),
            ]
        )
        result = swot(make_signal(score=-0.2), make_signal(), competition)
        assert result.weaknesses == [
            "Potential negative market perception",
            "Strong competition in: Uber",
        ]

    def test_opportunities(self):
        market = make_signal(
            score=0.1,
            categories=[
                Category(name="/Travel", confidence=0.9),
                Category(name="/Autos", confidence=0.7),
            ],
        )
        result = swot(make_signal(), market, make_signal())
        assert result.opportunities == ["Favorable market conditions", "High potential in /Travel"]

    def test_threats(self):
        competition = make_signal(
            entities=[
                make_entity("Uber", salience=0.6, score=0.8),
                make_entity("Bolt", salience=0.6, score=0.5),
                make_entity("Lyft", salience=0.2, score=0.9),
            ]
        )
        result = swot(make_signal(), make_signal(score=-0.3), competition)
        assert result.threats == ["Challenging market conditions", "Strong competition from: Uber"]

    def test_deterministic(self):
        args = (
            make_signal(score=0.4),
            make_signal(score=0.2, entities=[make_entity("EU", salience=0.5)]),
            make_signal(entities=[make_entity("Rival", salience=0.5, score=0.7)]),
        )
        assert swot(*args) == swot(*args)
