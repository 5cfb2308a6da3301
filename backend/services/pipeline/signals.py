"""Shared primitives for turning TextSignals into verdicts.

Every verdict builder in this package is a composition of the filters and
scores below. Thresholds are strict comparisons (``>`` / ``<``) and are part
of the public behavior: changing one changes every route that uses it.
"""

from typing import Iterable

from models.schemas.text_signal import Entity, EntityType, TextSignal

# Entity salience cut points
MENTION_SALIENCE = 0.1
RELEVANT_SALIENCE = 0.2
KEY_SALIENCE = 0.3
HIGH_VALUE_SALIENCE = 0.4

# Sentiment cut points
CONCERN_SENTIMENT = -0.2
WEAK_PITCH_SENTIMENT = 0.2
STRONG_SENTIMENT = 0.3
DOMINANT_SENTIMENT = 0.5

HIGH_CATEGORY_CONFIDENCE = 0.7

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return max(low, min(high, value))


def sentiment_scaled(score: float, weight: float) -> float:
    """Map a sentiment score in [-1, 1] onto [0, 2 * weight]."""
    return clamp((score + 1) * weight, 0.0, 2 * weight)


def polarity_score(score: float) -> float:
    """Signed percentage of a sentiment score, in [-100, 100]."""
    return clamp(score * 100, -SCORE_MAX, SCORE_MAX)


# ---------------------------------------------------------------------------
# Entity filters (backend order is preserved)
# ---------------------------------------------------------------------------

def salient(entities: Iterable[Entity], threshold: float) -> list[Entity]:
    return [e for e in entities if e.salience > threshold]


def positive(entities: Iterable[Entity], threshold: float = 0.0) -> list[Entity]:
    return [e for e in entities if e.sentiment.score > threshold]


def negative(entities: Iterable[Entity], threshold: float = 0.0) -> list[Entity]:
    return [e for e in entities if e.sentiment.score < threshold]


def of_type(entities: Iterable[Entity], *types: EntityType) -> list[Entity]:
    wanted = set(types)
    return [e for e in entities if e.type in wanted]


def names(entities: Iterable[Entity]) -> list[str]:
    return [e.name for e in entities]


def by_salience(entities: Iterable[Entity]) -> list[Entity]:
    """Most salient first. Stable, so ties keep backend order."""
    return sorted(entities, key=lambda e: e.salience, reverse=True)


def metadata_context(entity: Entity, default: str) -> str:
    return entity.metadata.get("description") or default


def joined(items: Iterable[str]) -> str:
    return ", ".join(items)


# ---------------------------------------------------------------------------
# Helpers shared across route families
# ---------------------------------------------------------------------------

def key_names(signal: TextSignal, threshold: float = KEY_SALIENCE) -> list[str]:
    return names(salient(signal.entities, threshold))


def determine_stage(signal: TextSignal) -> str:
    """Funding stage named by the text's key entities."""
    indicators = [name.lower() for name in key_names(signal)]
    if any("seed" in i for i in indicators):
        return "Seed"
    if any("series a" in i for i in indicators):
        return "Series A"
    return "Early Stage"


def sentiment_split(signal: TextSignal) -> tuple[list[str], list[str]]:
    """Entity names with positive and negative sentiment."""
    return names(positive(signal.entities)), names(negative(signal.entities))


def average_sentence_length(signal: TextSignal) -> float:
    """Mean characters per sentence; 0.0 when the text has no sentences."""
    if not signal.sentences:
        return 0.0
    return sum(len(s.text) for s in signal.sentences) / len(signal.sentences)
