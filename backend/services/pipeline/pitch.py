"""Pitch deck outline, mentor Q&A and practice feedback verdicts."""

from models.schemas.pitch import (
    Clarity,
    CompanySection,
    Impact,
    Insight,
    KeyPoint,
    MarketOpening,
    MarketSection,
    MentorAnswer,
    PitchDeck,
    PitchOverview,
    PracticeFeedback,
    Structure,
    TargetSegment,
    UniqueValue,
)
from models.schemas.text_signal import EntityType, TextSignal
from services.pipeline.signals import (
    HIGH_VALUE_SALIENCE,
    KEY_SALIENCE,
    RELEVANT_SALIENCE,
    STRONG_SENTIMENT,
    WEAK_PITCH_SENTIMENT,
    average_sentence_length,
    clamp,
    joined,
    key_names,
    names,
    of_type,
    polarity_score,
    positive,
    salient,
)

MIN_KEY_POINTS = 3
LONG_PITCH_SENTENCES = 15
SHORTEN_PITCH_SENTENCES = 12
COMPLEX_FLOW_SENTENCES = 10
MULTI_PART_QUESTION_SENTENCES = 2
LOW_MAGNITUDE = 0.5


# ---------------------------------------------------------------------------
# /pitch/generate-deck
# ---------------------------------------------------------------------------

def pitch_deck(pitch: TextSignal, company: TextSignal, market: TextSignal) -> PitchDeck:
    return PitchDeck(
        overview=PitchOverview(key_points=key_points(pitch), sentiment=pitch.score),
        company=CompanySection(
            strengths=names(positive(salient(company.entities, RELEVANT_SALIENCE))),
            unique_value=UniqueValue(
                key_features=key_names(company, HIGH_VALUE_SALIENCE),
                overall_sentiment=company.score,
            ),
        ),
        market=MarketSection(
            opportunities=[
                MarketOpening(name=e.name, type=e.type.value, relevance=e.salience)
                for e in of_type(market.entities, EntityType.LOCATION, EntityType.ORGANIZATION)
            ],
            target_segments=[
                TargetSegment(segment=e.name, type=e.type.value, sentiment=e.sentiment.score)
                for e in of_type(market.entities, EntityType.PERSON, EntityType.ORGANIZATION)
            ],
        ),
        recommendations=deck_recommendations(pitch),
    )


def key_points(signal: TextSignal) -> list[KeyPoint]:
    return [
        KeyPoint(point=e.name, importance=e.salience, sentiment=e.sentiment.score)
        for e in salient(signal.entities, KEY_SALIENCE)
    ]


def deck_recommendations(pitch: TextSignal) -> list[str]:
    recs: list[str] = []
    if pitch.score < WEAK_PITCH_SENTIMENT:
        recs.append("Enhance positive aspects of the pitch")

    if len(salient(pitch.entities, KEY_SALIENCE)) < MIN_KEY_POINTS:
        recs.append("Include more specific details about key features/benefits")

    if len(pitch.sentences) > LONG_PITCH_SENTENCES:
        recs.append("Consider making the pitch more concise")
    return recs


# ---------------------------------------------------------------------------
# /pitch/mentor-qa
# ---------------------------------------------------------------------------

def mentor_answer(question: TextSignal, context: TextSignal) -> MentorAnswer:
    return MentorAnswer(
        answer=_mentor_response(question, context),
        insights=[
            Insight(topic=e.name, relevance=e.salience, sentiment=e.sentiment.score)
            for e in salient(context.entities, RELEVANT_SALIENCE)
        ],
        suggestions=_question_suggestions(question),
    )


def _mentor_response(question: TextSignal, context: TextSignal) -> str:
    parts: list[str] = []
    relevant = key_names(context)
    if relevant:
        parts.append(f"Based on {joined(relevant)}, here's my perspective:")

    if question.score < 0:
        parts.append("Let me address your concerns constructively.")
    return " ".join(parts)


def _question_suggestions(question: TextSignal) -> list[str]:
    suggestions: list[str] = []
    if len(question.sentences) > MULTI_PART_QUESTION_SENTENCES:
        suggestions.append("Consider breaking down your question into smaller parts")

    topics = key_names(question)
    if topics:
        suggestions.append(f"Focus on key aspects: {joined(topics)}")
    return suggestions


# ---------------------------------------------------------------------------
# /pitch/practice-feedback
# ---------------------------------------------------------------------------

def practice_feedback(script: TextSignal) -> PracticeFeedback:
    sentence_count = len(script.sentences)
    return PracticeFeedback(
        clarity=Clarity(
            score=clamp(script.magnitude * 100),
            key_terms=key_names(script, RELEVANT_SALIENCE),
        ),
        impact=Impact(
            score=polarity_score(script.score),
            strong_points=names(positive(script.entities, STRONG_SENTIMENT)),
        ),
        structure=Structure(
            sentence_count=sentence_count,
            average_length=average_sentence_length(script),
            flow="Complex" if sentence_count > COMPLEX_FLOW_SENTENCES else "Concise",
        ),
        improvements=practice_improvements(script),
    )


def practice_improvements(script: TextSignal) -> list[str]:
    improvements: list[str] = []
    if len(script.sentences) > SHORTEN_PITCH_SENTENCES:
        improvements.append("Consider shortening the pitch for better impact")

    if script.magnitude < LOW_MAGNITUDE:
        improvements.append("Add more emotional appeal to engage audience")

    if len(salient(script.entities, KEY_SALIENCE)) < MIN_KEY_POINTS:
        improvements.append("Include more specific examples and key benefits")
    return improvements
