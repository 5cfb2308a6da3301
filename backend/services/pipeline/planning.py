"""Idea check and SWOT verdicts."""

from models.schemas.planning import (
    CategoryScore,
    Feasibility,
    IdeaCheck,
    KeyEntity,
    MarketPotential,
    Swot,
)
from models.schemas.text_signal import EntityType, TextSignal
from services.pipeline.signals import (
    CONCERN_SENTIMENT,
    DOMINANT_SENTIMENT,
    HIGH_CATEGORY_CONFIDENCE,
    KEY_SALIENCE,
    MENTION_SALIENCE,
    STRONG_SENTIMENT,
    joined,
    key_names,
    names,
    of_type,
    polarity_score,
    positive,
    salient,
)


def idea_check(idea: TextSignal) -> IdeaCheck:
    tone = "positive" if idea.score > 0 else "negative"
    return IdeaCheck(
        feasibility=Feasibility(
            score=polarity_score(idea.score),
            explanation=f"The idea sentiment analysis shows {tone} indicators",
        ),
        market_potential=MarketPotential(
            categories=[CategoryScore(name=c.name, confidence=c.confidence) for c in idea.categories],
            key_entities=[
                KeyEntity(name=e.name, type=e.type.value, salience=e.salience)
                for e in salient(idea.entities, MENTION_SALIENCE)
            ],
        ),
        recommendations=_idea_recommendations(idea),
    )


def _idea_recommendations(idea: TextSignal) -> list[str]:
    recs: list[str] = []

    if idea.score < 0:
        recs.append("Consider refining the value proposition to address potential concerns")

    markets = of_type(idea.entities, EntityType.LOCATION, EntityType.ORGANIZATION)
    if markets:
        recs.append(f"Focus on key markets/organizations: {joined(names(markets))}")

    if idea.categories:
        recs.append(
            f"Consider expanding into related categories: {joined(c.name for c in idea.categories)}"
        )

    return recs


def swot(idea: TextSignal, market: TextSignal, competition: TextSignal) -> Swot:
    return Swot(
        strengths=_strengths(idea, market),
        weaknesses=_weaknesses(idea, competition),
        opportunities=_opportunities(market),
        threats=_threats(competition, market),
    )


def _strengths(idea: TextSignal, market: TextSignal) -> list[str]:
    strengths: list[str] = []
    if idea.score > STRONG_SENTIMENT:
        strengths.append("Strong positive market perception potential")

    key_markets = key_names(market)
    if key_markets:
        strengths.append(f"Strong presence in key markets: {joined(key_markets)}")
    return strengths


def _weaknesses(idea: TextSignal, competition: TextSignal) -> list[str]:
    weaknesses: list[str] = []
    if idea.score < 0:
        weaknesses.append("Potential negative market perception")

    rivals = names(positive(salient(competition.entities, KEY_SALIENCE)))
    if rivals:
        weaknesses.append(f"Strong competition in: {joined(rivals)}")
    return weaknesses


def _opportunities(market: TextSignal) -> list[str]:
    opportunities: list[str] = []
    if market.score > 0:
        opportunities.append("Favorable market conditions")

    for category in market.categories:
        if category.confidence > HIGH_CATEGORY_CONFIDENCE:
            opportunities.append(f"High potential in {category.name}")
    return opportunities


def _threats(competition: TextSignal, market: TextSignal) -> list[str]:
    threats: list[str] = []
    if market.score < CONCERN_SENTIMENT:
        threats.append("Challenging market conditions")

    dominant = names(positive(salient(competition.entities, KEY_SALIENCE), DOMINANT_SENTIMENT))
    if dominant:
        threats.append(f"Strong competition from: {joined(dominant)}")
    return threats
