"""Market verdicts: market overview, competitor landscape, entry strategy."""

from typing import Literal

from pydantic import BaseModel


class KeyFactor(BaseModel):
    factor: str
    importance: float  # entity salience
    sentiment: float


class MarketSizeFigure(BaseModel):
    value: str
    context: str


class MarketOverview(BaseModel):
    sentiment: float = 0.0
    key_factors: list[KeyFactor] = []
    market_size: list[MarketSizeFigure] = []


class IndustryTrend(BaseModel):
    trend: str
    impact: float
    relevance: float


class Challenge(BaseModel):
    challenge: str
    severity: float  # |sentiment|
    relevance: float


class Opportunity(BaseModel):
    opportunity: str
    potential: float
    relevance: float


class IndustryAnalysis(BaseModel):
    trends: list[IndustryTrend] = []
    challenges: list[Challenge] = []
    opportunities: list[Opportunity] = []


class GrowthTrend(BaseModel):
    trend: str
    growth: Literal["Growing", "Declining"]
    confidence: float


class Forecast(BaseModel):
    outlook: Literal["Positive", "Challenging"] = "Challenging"
    confidence: float = 0.0
    key_drivers: list[str] = []


class GrowthPotential(BaseModel):
    trends: list[GrowthTrend] = []
    forecast: Forecast = Forecast()


class MarketAnalysis(BaseModel):
    market_overview: MarketOverview = MarketOverview()
    industry_analysis: IndustryAnalysis = IndustryAnalysis()
    growth_potential: GrowthPotential = GrowthPotential()
    recommendations: list[str] = []


class Competitor(BaseModel):
    name: str
    market_presence: float
    sentiment: float


class Advantage(BaseModel):
    strength: str
    impact: float
    relevance: float


class MarketGap(BaseModel):
    weakness: str
    impact: float
    relevance: float


class CompetitorAnalysis(BaseModel):
    competitor_overview: list[Competitor] = []
    competitive_advantages: list[Advantage] = []
    market_gaps: list[MarketGap] = []
    recommendations: list[str] = []


class MarketEntry(BaseModel):
    approach: Literal["Aggressive", "Conservative"] = "Conservative"
    key_objectives: list[str] = []
    timeline: Literal["Long-term", "Short-term"] = "Short-term"


class ResourceAllocation(BaseModel):
    resource: str
    availability: Literal["Available", "Limited"]
    priority: float


class RiskMitigation(BaseModel):
    constraint: str
    severity: float
    mitigation: str


class ActionItem(BaseModel):
    """One step of the action plan: a goal objective or a resource allocation."""
    kind: Literal["objective", "resource"]
    title: str
    priority: float
    timeline: str | None = None  # objectives only
    status: str | None = None  # resources only


class MarketStrategy(BaseModel):
    market_entry: MarketEntry = MarketEntry()
    resource_allocation: list[ResourceAllocation] = []
    risk_mitigation: list[RiskMitigation] = []
    action_plan: list[ActionItem] = []
