from typing import Any

from pydantic import BaseModel

from models.schemas.funding import FundingGuidance, InvestorMatch, ReadinessAssessment
from models.schemas.market import CompetitorAnalysis, MarketAnalysis, MarketStrategy
from models.schemas.pitch import PitchDeck, PracticeFeedback
from models.schemas.planning import Swot


class SwotResponse(BaseModel):
    swot: Swot


class MarketAnalysisResponse(BaseModel):
    analysis: MarketAnalysis


class CompetitorAnalysisResponse(BaseModel):
    analysis: CompetitorAnalysis


class StrategyResponse(BaseModel):
    strategy: MarketStrategy


class GuidanceResponse(BaseModel):
    guidance: FundingGuidance


class InvestorMatchResponse(BaseModel):
    matches: InvestorMatch


class ReadinessResponse(BaseModel):
    assessment: ReadinessAssessment


class PitchDeckResponse(BaseModel):
    deck_content: PitchDeck


class PracticeFeedbackResponse(BaseModel):
    feedback: PracticeFeedback


# Generated-text envelopes, one key per route family


class AnalysisTextResponse(BaseModel):
    analysis: str


class PlanResponse(BaseModel):
    plan: str


class GeneratedDeckResponse(BaseModel):
    deck_id: str
    content: str


class RecommendationsResponse(BaseModel):
    recommendations: str


class QuestionsResponse(BaseModel):
    questions: str


class CoverLetterResponse(BaseModel):
    cover_letter: str


class LinkedInResponse(BaseModel):
    optimization: str


class ProgressResponse(BaseModel):
    progress: str


class FileUrlResponse(BaseModel):
    file_url: str


class FileListResponse(BaseModel):
    files: list[dict[str, Any]] = []


class MessageResponse(BaseModel):
    message: str


class TaskResponse(BaseModel):
    task_name: str


class PublishResponse(BaseModel):
    message_id: str


class UserSummary(BaseModel):
    uid: str
    email: str | None = None
    name: str | None = None


class RegisterResponse(BaseModel):
    token: str
    user: UserSummary


class ProfileResponse(BaseModel):
    profile: dict[str, Any]


class StartupSavedResponse(BaseModel):
    startup_id: str
    message: str = "Startup saved successfully"


class StartupListResponse(BaseModel):
    startups: list[dict[str, Any]] = []
