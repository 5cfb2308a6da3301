"""Funding verdicts: guidance, investor matching, readiness."""

from pydantic import BaseModel


class FundingNeeds(BaseModel):
    amount: str = "Not specified"
    purposes: list[str] = []


class Metric(BaseModel):
    metric: str
    importance: float
    sentiment: float


class FundingStrategy(BaseModel):
    recommended_stage: str = "Early Stage"
    funding_needs: FundingNeeds = FundingNeeds()
    key_metrics: list[Metric] = []


class TimelinePhase(BaseModel):
    phase: str
    duration: str
    activities: list[str] = []


class FundingGuidance(BaseModel):
    funding_strategy: FundingStrategy = FundingStrategy()
    recommendations: list[str] = []
    timeline: list[TimelinePhase] = []


class InvestorPreference(BaseModel):
    criteria: str
    importance: float


class InvestorProfile(BaseModel):
    stage: str = "Early Stage"
    preferences: list[InvestorPreference] = []
    industries: list[str] = []


class InvestorMatch(BaseModel):
    investor_profile: InvestorProfile = InvestorProfile()
    match_score: float = 0.0  # 0-100
    recommendations: list[str] = []


class BusinessReadiness(BaseModel):
    score: float = 0.0  # 0-100
    strengths: list[str] = []
    weaknesses: list[str] = []


class FinancialFigure(BaseModel):
    metric: str
    context: str


class FinancialReadiness(BaseModel):
    score: float = 0.0  # 0-100
    metrics: list[FinancialFigure] = []
    concerns: list[str] = []


class TeamReadiness(BaseModel):
    score: float = 0.0  # 0-100
    strengths: list[str] = []
    gaps: list[str] = []


class ReadinessAssessment(BaseModel):
    overall_score: float = 0.0  # 0-100, weighted 40/40/20
    business_readiness: BusinessReadiness = BusinessReadiness()
    financial_readiness: FinancialReadiness = FinancialReadiness()
    team_readiness: TeamReadiness = TeamReadiness()
    improvements: list[str] = []
