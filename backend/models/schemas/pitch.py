"""Pitch verdicts: deck outline, mentor answer, practice feedback."""

from typing import Literal

from pydantic import BaseModel


class KeyPoint(BaseModel):
    point: str
    importance: float
    sentiment: float


class PitchOverview(BaseModel):
    key_points: list[KeyPoint] = []
    sentiment: float = 0.0


class UniqueValue(BaseModel):
    key_features: list[str] = []
    overall_sentiment: float = 0.0


class CompanySection(BaseModel):
    strengths: list[str] = []
    unique_value: UniqueValue = UniqueValue()


class MarketOpening(BaseModel):
    name: str
    type: str
    relevance: float


class TargetSegment(BaseModel):
    segment: str
    type: str
    sentiment: float


class MarketSection(BaseModel):
    opportunities: list[MarketOpening] = []
    target_segments: list[TargetSegment] = []


class PitchDeck(BaseModel):
    overview: PitchOverview = PitchOverview()
    company: CompanySection = CompanySection()
    market: MarketSection = MarketSection()
    recommendations: list[str] = []


class Insight(BaseModel):
    topic: str
    relevance: float
    sentiment: float


class MentorAnswer(BaseModel):
    answer: str = ""
    insights: list[Insight] = []
    suggestions: list[str] = []


class Clarity(BaseModel):
    score: float = 0.0  # 0-100, from sentiment magnitude
    key_terms: list[str] = []


class Impact(BaseModel):
    score: float = 0.0  # -100..100, signed document sentiment
    strong_points: list[str] = []


class Structure(BaseModel):
    sentence_count: int = 0
    average_length: float = 0.0  # characters per sentence, 0 when no sentences
    flow: Literal["Complex", "Concise"] = "Concise"


class PracticeFeedback(BaseModel):
    clarity: Clarity = Clarity()
    impact: Impact = Impact()
    structure: Structure = Structure()
    improvements: list[str] = []
