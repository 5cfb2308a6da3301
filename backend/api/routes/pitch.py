from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from models.requests import MentorQuestionRequest, PitchDeckRequest, PracticeFeedbackRequest
from models.responses import PitchDeckResponse, PracticeFeedbackResponse
from models.schemas.pitch import MentorAnswer
from services.container import Services
from services.pipeline import pitch
from services.pipeline.orchestrator import extract_fields

router = APIRouter(prefix="/api/pitch", tags=["pitch"])


@router.post("/generate-deck", response_model=PitchDeckResponse)
async def generate_deck(
    body: PitchDeckRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Pitch Deck", "Failed to generate pitch deck"):
        signals = await extract_fields(services.extractor, body.model_dump(), classify=False)
        verdict = pitch.pitch_deck(signals["pitch"], signals["company"], signals["market"])
        await services.store.append(
            user_id, "pitch_deck_outlines", "decks",
            {"deck_content": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return PitchDeckResponse(deck_content=verdict)


@router.post("/mentor-qa", response_model=MentorAnswer)
async def mentor_qa(
    body: MentorQuestionRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Mentor Q&A", "Failed to generate mentor response"):
        signals = await extract_fields(services.extractor, body.model_dump(), classify=False)
        verdict = pitch.mentor_answer(signals["question"], signals["context"])
        await services.store.append(
            user_id, "mentor_sessions", "answers",
            {"response": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return verdict


@router.post("/practice-feedback", response_model=PracticeFeedbackResponse)
async def practice_feedback(
    body: PracticeFeedbackRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Practice Feedback", "Failed to generate practice feedback"):
        signal = await services.extractor.extract(body.pitch_script, classify=False)
        verdict = pitch.practice_feedback(signal)
        await services.store.append(
            user_id, "pitch_feedback", "sessions",
            {"feedback": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return PracticeFeedbackResponse(feedback=verdict)
