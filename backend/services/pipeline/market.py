"""Market, competitor and strategy verdicts."""

from models.schemas.market import (
    ActionItem,
    Advantage,
    Challenge,
    Competitor,
    CompetitorAnalysis,
    Forecast,
    GrowthPotential,
    GrowthTrend,
    IndustryAnalysis,
    IndustryTrend,
    KeyFactor,
    MarketAnalysis,
    MarketEntry,
    MarketGap,
    MarketOverview,
    MarketSizeFigure,
    MarketStrategy,
    Opportunity,
    ResourceAllocation,
    RiskMitigation,
)
from models.schemas.text_signal import EntityType, TextSignal
from services.pipeline.signals import (
    CONCERN_SENTIMENT,
    KEY_SALIENCE,
    RELEVANT_SALIENCE,
    STRONG_SENTIMENT,
    key_names,
    metadata_context,
    negative,
    of_type,
    positive,
    salient,
)

CROWDED_MARKET_COMPETITORS = 3
OPEN_MARKET_COMPETITORS = 2
LONG_TERM_OBJECTIVES = 5


# ---------------------------------------------------------------------------
# /market/analyze
# ---------------------------------------------------------------------------

def market_analysis(market: TextSignal, industry: TextSignal, trends: TextSignal) -> MarketAnalysis:
    return MarketAnalysis(
        market_overview=MarketOverview(
            sentiment=market.score,
            key_factors=key_factors(market),
            market_size=market_size(market),
        ),
        industry_analysis=IndustryAnalysis(
            trends=industry_trends(industry),
            challenges=challenges(industry),
            opportunities=opportunities(industry),
        ),
        growth_potential=GrowthPotential(
            trends=growth_trends(trends),
            forecast=forecast(trends),
        ),
        recommendations=market_recommendations(market, industry),
    )


def key_factors(signal: TextSignal) -> list[KeyFactor]:
    return [
        KeyFactor(factor=e.name, importance=e.salience, sentiment=e.sentiment.score)
        for e in salient(signal.entities, KEY_SALIENCE)
    ]


def market_size(signal: TextSignal) -> list[MarketSizeFigure]:
    return [
        MarketSizeFigure(value=e.name, context=metadata_context(e, "market size"))
        for e in of_type(signal.entities, EntityType.NUMBER)
    ]


def industry_trends(signal: TextSignal) -> list[IndustryTrend]:
    return [
        IndustryTrend(trend=e.name, impact=e.sentiment.score, relevance=e.salience)
        for e in salient(signal.entities, RELEVANT_SALIENCE)
        if e.sentiment.score != 0
    ]


def challenges(signal: TextSignal) -> list[Challenge]:
    return [
        Challenge(challenge=e.name, severity=abs(e.sentiment.score), relevance=e.salience)
        for e in negative(signal.entities)
    ]


def opportunities(signal: TextSignal) -> list[Opportunity]:
    return [
        Opportunity(opportunity=e.name, potential=e.sentiment.score, relevance=e.salience)
        for e in positive(salient(signal.entities, RELEVANT_SALIENCE))
    ]


def growth_trends(signal: TextSignal) -> list[GrowthTrend]:
    return [
        GrowthTrend(
            trend=e.name,
            growth="Growing" if e.sentiment.score > 0 else "Declining",
            confidence=e.salience,
        )
        for e in salient(signal.entities, RELEVANT_SALIENCE)
    ]


def forecast(signal: TextSignal) -> Forecast:
    return Forecast(
        outlook="Positive" if signal.score > 0 else "Challenging",
        confidence=abs(signal.score),
        key_drivers=key_names(signal),
    )


def market_recommendations(market: TextSignal, industry: TextSignal) -> list[str]:
    recs: list[str] = []
    if market.score > STRONG_SENTIMENT:
        recs.append("Consider aggressive market entry strategies")
    elif market.score < 0:
        recs.append("Focus on niche market segments initially")

    if challenges(industry):
        recs.append("Develop mitigation strategies for identified challenges")
    return recs


# ---------------------------------------------------------------------------
# /market/competitors
# ---------------------------------------------------------------------------

def competitor_analysis(
    competitors: TextSignal,
    strengths: TextSignal,
    weaknesses: TextSignal,
) -> CompetitorAnalysis:
    return CompetitorAnalysis(
        competitor_overview=competitor_overview(competitors),
        competitive_advantages=[
            Advantage(strength=e.name, impact=e.sentiment.score, relevance=e.salience)
            for e in positive(strengths.entities)
        ],
        market_gaps=[
            MarketGap(weakness=e.name, impact=abs(e.sentiment.score), relevance=e.salience)
            for e in negative(weaknesses.entities)
        ],
        recommendations=competitor_recommendations(competitors),
    )


def competitor_overview(signal: TextSignal) -> list[Competitor]:
    return [
        Competitor(name=e.name, market_presence=e.salience, sentiment=e.sentiment.score)
        for e in of_type(signal.entities, EntityType.ORGANIZATION)
    ]


def competitor_recommendations(signal: TextSignal) -> list[str]:
    recs: list[str] = []
    count = len(competitor_overview(signal))
    if count > CROWDED_MARKET_COMPETITORS:
        recs.append("Market is highly competitive - focus on differentiation")
    elif count < OPEN_MARKET_COMPETITORS:
        recs.append("Consider first-mover advantages in this market")

    if signal.score < CONCERN_SENTIMENT:
        recs.append("Develop strong competitive advantages before market entry")
    return recs


# ---------------------------------------------------------------------------
# /market/strategy
# ---------------------------------------------------------------------------

def market_strategy(goals: TextSignal, resources: TextSignal, constraints: TextSignal) -> MarketStrategy:
    return MarketStrategy(
        market_entry=MarketEntry(
            approach="Aggressive" if goals.score > 0 else "Conservative",
            key_objectives=key_names(goals),
            timeline="Long-term" if len(goals.entities) > LONG_TERM_OBJECTIVES else "Short-term",
        ),
        resource_allocation=[
            ResourceAllocation(
                resource=e.name,
                availability="Available" if e.sentiment.score > 0 else "Limited",
                priority=e.salience,
            )
            for e in salient(resources.entities, RELEVANT_SALIENCE)
        ],
        risk_mitigation=[
            RiskMitigation(
                constraint=e.name,
                severity=abs(e.sentiment.score),
                mitigation=f"Develop contingency plans for {e.name}",
            )
            for e in negative(constraints.entities)
        ],
        action_plan=action_plan(goals, resources),
    )


def action_plan(goals: TextSignal, resources: TextSignal) -> list[ActionItem]:
    actions = [
        ActionItem(
            kind="objective",
            title=goal.name,
            priority=goal.salience,
            timeline="Short-term" if goal.sentiment.score > 0 else "Long-term",
        )
        for goal in salient(goals.entities, KEY_SALIENCE)
    ]
    actions.extend(
        ActionItem(
            kind="resource",
            title=f"Allocate {resource.name}",
            priority=resource.salience,
            status="Ready" if resource.sentiment.score > 0 else "Needs preparation",
        )
        for resource in salient(resources.entities, RELEVANT_SALIENCE)
    )
    return actions
