"""Funding verdicts: guidance, investor matching, readiness.

Scores:
    match score      = (pitch sentiment + 1) * 50 + 10 per shared entity name
    readiness score  = business (+1)*20 + financials (+1)*20 + team (+1)*10
Both are clamped to [0, 100].
"""

from models.schemas.funding import (
    BusinessReadiness,
    FinancialFigure,
    FinancialReadiness,
    FundingGuidance,
    FundingNeeds,
    FundingStrategy,
    InvestorMatch,
    InvestorPreference,
    InvestorProfile,
    Metric,
    ReadinessAssessment,
    TeamReadiness,
    TimelinePhase,
)
from models.schemas.text_signal import EntityType, TextSignal
from services.pipeline.signals import (
    CONCERN_SENTIMENT,
    RELEVANT_SALIENCE,
    STRONG_SENTIMENT,
    WEAK_PITCH_SENTIMENT,
    by_salience,
    clamp,
    determine_stage,
    joined,
    key_names,
    metadata_context,
    names,
    negative,
    of_type,
    positive,
    salient,
    sentiment_scaled,
    sentiment_split,
)

MATCH_BASE_WEIGHT = 50
MATCH_OVERLAP_POINTS = 10

BUSINESS_WEIGHT = 20
FINANCIAL_WEIGHT = 20
TEAM_WEIGHT = 10
COMPONENT_WEIGHT = 50

MIN_FUNDING_PURPOSES = 3
MIN_FINANCIAL_FIGURES = 3
MIN_TEAM_MEMBERS = 2

FUNDING_TIMELINE = (
    TimelinePhase(
        phase="Preparation",
        duration="1-2 months",
        activities=["Document preparation", "Financial modeling", "Pitch deck creation"],
    ),
    TimelinePhase(
        phase="Outreach",
        duration="2-3 months",
        activities=["Investor identification", "Initial meetings", "Pitch refinement"],
    ),
    TimelinePhase(
        phase="Due Diligence",
        duration="1-2 months",
        activities=["Financial review", "Legal documentation", "Negotiations"],
    ),
)


# ---------------------------------------------------------------------------
# /funding/guidance
# ---------------------------------------------------------------------------

def funding_guidance(stage: TextSignal, needs: TextSignal, metrics: TextSignal) -> FundingGuidance:
    return FundingGuidance(
        funding_strategy=FundingStrategy(
            recommended_stage=determine_stage(stage),
            funding_needs=funding_needs(needs),
            key_metrics=key_metrics(metrics),
        ),
        recommendations=funding_recommendations(stage, needs),
        timeline=[phase.model_copy(deep=True) for phase in FUNDING_TIMELINE],
    )


def funding_needs(signal: TextSignal) -> FundingNeeds:
    """Requested amount is the most salient NUMBER entity."""
    figures = by_salience(of_type(signal.entities, EntityType.NUMBER))
    return FundingNeeds(
        amount=figures[0].name if figures else "Not specified",
        purposes=key_names(signal, RELEVANT_SALIENCE),
    )


def key_metrics(signal: TextSignal) -> list[Metric]:
    return [
        Metric(metric=e.name, importance=e.salience, sentiment=e.sentiment.score)
        for e in salient(signal.entities, RELEVANT_SALIENCE)
    ]


def funding_recommendations(stage: TextSignal, needs: TextSignal) -> list[str]:
    recs: list[str] = []
    if stage.score < 0:
        recs.append("Consider bootstrapping or angel investment first")
    elif stage.score > STRONG_SENTIMENT:
        recs.append("Ready for institutional investment")

    if len(funding_needs(needs).purposes) < MIN_FUNDING_PURPOSES:
        recs.append("Develop more detailed funding allocation plan")
    return recs


# ---------------------------------------------------------------------------
# /funding/investor-match
# ---------------------------------------------------------------------------

def investor_match(pitch: TextSignal, requirements: TextSignal, preferences: TextSignal) -> InvestorMatch:
    return InvestorMatch(
        investor_profile=investor_profile(requirements),
        match_score=match_score(pitch, requirements),
        recommendations=match_recommendations(pitch, preferences),
    )


def investor_profile(requirements: TextSignal) -> InvestorProfile:
    return InvestorProfile(
        stage=determine_stage(requirements),
        preferences=[
            InvestorPreference(criteria=e.name, importance=e.salience)
            for e in salient(requirements.entities, RELEVANT_SALIENCE)
        ],
        industries=[c.name for c in requirements.categories],
    )


def match_score(pitch: TextSignal, requirements: TextSignal) -> float:
    pitch_names = {e.name.lower() for e in pitch.entities}
    required_names = {e.name.lower() for e in requirements.entities}
    overlap = len(pitch_names & required_names)
    score = sentiment_scaled(pitch.score, MATCH_BASE_WEIGHT) + MATCH_OVERLAP_POINTS * overlap
    return clamp(score)


def match_recommendations(pitch: TextSignal, preferences: TextSignal) -> list[str]:
    recs: list[str] = []
    if pitch.score < WEAK_PITCH_SENTIMENT:
        recs.append("Strengthen value proposition in pitch")

    focus = key_names(preferences)
    if focus:
        recs.append(f"Focus on key preferences: {joined(focus)}")
    return recs


# ---------------------------------------------------------------------------
# /funding/readiness
# ---------------------------------------------------------------------------

def readiness_assessment(business: TextSignal, financials: TextSignal, team: TextSignal) -> ReadinessAssessment:
    return ReadinessAssessment(
        overall_score=readiness_score(business, financials, team),
        business_readiness=business_readiness(business),
        financial_readiness=financial_readiness(financials),
        team_readiness=team_readiness(team),
        improvements=readiness_improvements(business, financials, team),
    )


def readiness_components(business: TextSignal, financials: TextSignal, team: TextSignal) -> dict[str, float]:
    return {
        "business": sentiment_scaled(business.score, BUSINESS_WEIGHT),
        "financial": sentiment_scaled(financials.score, FINANCIAL_WEIGHT),
        "team": sentiment_scaled(team.score, TEAM_WEIGHT),
    }


def readiness_score(business: TextSignal, financials: TextSignal, team: TextSignal) -> float:
    return clamp(sum(readiness_components(business, financials, team).values()))


def component_score(signal: TextSignal) -> float:
    return sentiment_scaled(signal.score, COMPONENT_WEIGHT)


def business_readiness(signal: TextSignal) -> BusinessReadiness:
    strengths, weaknesses = sentiment_split(signal)
    return BusinessReadiness(score=component_score(signal), strengths=strengths, weaknesses=weaknesses)


def financial_readiness(signal: TextSignal) -> FinancialReadiness:
    return FinancialReadiness(
        score=component_score(signal),
        metrics=[
            FinancialFigure(metric=e.name, context=metadata_context(e, "financial metric"))
            for e in of_type(signal.entities, EntityType.NUMBER)
        ],
        concerns=names(negative(signal.entities, CONCERN_SENTIMENT)),
    )


def team_readiness(signal: TextSignal) -> TeamReadiness:
    return TeamReadiness(
        score=component_score(signal),
        strengths=names(positive(of_type(signal.entities, EntityType.PERSON))),
        gaps=names(negative(signal.entities)),
    )


def readiness_improvements(business: TextSignal, financials: TextSignal, team: TextSignal) -> list[str]:
    improvements: list[str] = []
    if business.score < WEAK_PITCH_SENTIMENT:
        improvements.append("Strengthen business model and market validation")

    if len(of_type(financials.entities, EntityType.NUMBER)) < MIN_FINANCIAL_FIGURES:
        improvements.append("Develop more comprehensive financial projections")

    if len(of_type(team.entities, EntityType.PERSON)) < MIN_TEAM_MEMBERS:
        improvements.append("Consider expanding core team or advisory board")
    return improvements
