from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from models.requests import IdeaCheckRequest, SwotRequest
from models.responses import SwotResponse
from models.schemas.planning import IdeaCheck
from services.container import Services
from services.pipeline import planning
from services.pipeline.orchestrator import extract_fields

router = APIRouter(prefix="/api/planning", tags=["planning"])


@router.post("/idea-check", response_model=IdeaCheck)
async def idea_check(
    body: IdeaCheckRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Idea Check", "Failed to analyze idea"):
        signal = await services.extractor.extract(body.idea)
        verdict = planning.idea_check(signal)
        await services.store.append(
            user_id, "idea_checks", "reports",
            {"check": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return verdict


@router.post("/swot", response_model=SwotResponse)
async def swot(
    body: SwotRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("SWOT", "Failed to generate SWOT analysis"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = planning.swot(signals["idea"], signals["market"], signals["competition"])
        await services.store.append(
            user_id, "swot_analyses", "reports",
            {"swot": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return SwotResponse(swot=verdict)
