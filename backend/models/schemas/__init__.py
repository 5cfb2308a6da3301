"""Pydantic contracts for text signals and the verdicts derived from them."""

from models.schemas.text_signal import TextSignal
from models.schemas.planning import IdeaCheck, Swot
from models.schemas.market import CompetitorAnalysis, MarketAnalysis, MarketStrategy
from models.schemas.funding import FundingGuidance, InvestorMatch, ReadinessAssessment
from models.schemas.pitch import MentorAnswer, PitchDeck, PracticeFeedback

__all__ = [
    "TextSignal",
    "IdeaCheck",
    "Swot",
    "MarketAnalysis",
    "CompetitorAnalysis",
    "MarketStrategy",
    "FundingGuidance",
    "InvestorMatch",
    "ReadinessAssessment",
    "PitchDeck",
    "MentorAnswer",
    "PracticeFeedback",
]
