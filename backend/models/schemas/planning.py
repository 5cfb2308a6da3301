"""Planning verdicts: idea check and SWOT."""

from pydantic import BaseModel


class Feasibility(BaseModel):
    score: float = 0.0  # -100..100, signed document sentiment
    explanation: str = ""


class CategoryScore(BaseModel):
    name: str
    confidence: float = 0.0


class KeyEntity(BaseModel):
    name: str
    type: str
    salience: float = 0.0


class MarketPotential(BaseModel):
    categories: list[CategoryScore] = []
    key_entities: list[KeyEntity] = []


class IdeaCheck(BaseModel):
    feasibility: Feasibility = Feasibility()
    market_potential: MarketPotential = MarketPotential()
    recommendations: list[str] = []


class Swot(BaseModel):
    strengths: list[str] = []
    weaknesses: list[str] = []
    opportunities: list[str] = []
    threats: list[str] = []
