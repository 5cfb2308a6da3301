from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

# Free text sent to the language backend is bounded in bytes by the extractor;
# prompt fields are bounded here.
MAX_PROMPT_FIELD = 50000


class CamelModel(BaseModel):
    """Accepts camelCase (browser clients) or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def text_field(description: str = "") -> Any:
    return Field(..., min_length=1, description=description)


def prompt_field(description: str = "") -> Any:
    return Field(..., min_length=1, max_length=MAX_PROMPT_FIELD, description=description)


# --- Natural-language analyses ---


class AnalyzeTextRequest(CamelModel):
    text: str = text_field("Any free text")


class IdeaCheckRequest(CamelModel):
    idea: str = text_field("Startup idea description")


class SwotRequest(CamelModel):
    idea: str = text_field()
    market: str = text_field()
    competition: str = text_field()


class MarketAnalysisRequest(CamelModel):
    market: str = text_field()
    industry: str = text_field()
    trends: str = text_field()


class CompetitorAnalysisRequest(CamelModel):
    competitors: str = text_field()
    strengths: str = text_field()
    weaknesses: str = text_field()


class MarketStrategyRequest(CamelModel):
    goals: str = text_field()
    resources: str = text_field()
    constraints: str = text_field()


class FundingGuidanceRequest(CamelModel):
    stage: str = text_field()
    needs: str = text_field()
    metrics: str = text_field()


class InvestorMatchRequest(CamelModel):
    pitch: str = text_field()
    requirements: str = text_field()
    preferences: str = text_field()


class ReadinessRequest(CamelModel):
    business: str = text_field()
    financials: str = text_field()
    team: str = text_field()


class PitchDeckRequest(CamelModel):
    pitch: str = text_field()
    company: str = text_field()
    market: str = text_field()


class MentorQuestionRequest(CamelModel):
    question: str = text_field()
    context: str = text_field()


class PracticeFeedbackRequest(CamelModel):
    pitch_script: str = text_field("Full pitch transcript")


# --- Generated text ---


class IdeaAnalysisRequest(CamelModel):
    idea: str = prompt_field()
    industry: str = prompt_field()
    target_market: str = prompt_field()


class BusinessPlanRequest(CamelModel):
    idea: str = prompt_field()
    analysis: str = prompt_field()
    market_size: str = prompt_field()
    competition: str = prompt_field()


class PitchContentRequest(CamelModel):
    idea: str = prompt_field()
    plan: str = prompt_field()
    market_data: str = prompt_field()


class CareerRequest(CamelModel):
    interests: str = prompt_field()
    current_skills: str = prompt_field()
    education: str = prompt_field()


class SkillGapRequest(CamelModel):
    target_role: str = prompt_field()
    current_skills: str = prompt_field()


class LearningPathRequest(CamelModel):
    skill_gaps: str = prompt_field()
    learning_style: str = prompt_field()
    time_available: str = prompt_field()


class InterviewQuestionsRequest(CamelModel):
    job_role: str = prompt_field()
    skills: str = prompt_field()
    experience_level: str = prompt_field()


class CoverLetterRequest(CamelModel):
    job_description: str = prompt_field()
    candidate_experience: str = prompt_field()
    company_info: str = prompt_field()


class LinkedInRequest(CamelModel):
    current_profile: str = prompt_field()
    target_role: str = prompt_field()
    skills: str = prompt_field()


class ProgressRequest(CamelModel):
    skills: str = prompt_field()
    projects_completed: str = prompt_field()
    certifications: str = prompt_field()


class SkillPathRequest(CamelModel):
    current_skills: str = prompt_field()
    career_goals: str = prompt_field()
    timeframe: str = prompt_field()


# --- Background work ---


class MarketAnalysisTaskRequest(CamelModel):
    industry: str = Field(..., min_length=1)
    competitors: list[str] = []
    metrics: dict[str, Any] = {}


class ImageGenerationTaskRequest(CamelModel):
    prompt: str = prompt_field()
    style: str = ""
    dimensions: str = ""


class PublishAnalysisRequest(CamelModel):
    type: str = Field(..., min_length=1, description="MARKET_ANALYSIS, IMAGE_GENERATION or COMPETITOR_ANALYSIS")
    data: dict[str, Any] = {}


# --- Accounts ---


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=200)


class ProfileUpdateRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    skills: list[str] | None = None
    preferences: dict[str, Any] | None = None
