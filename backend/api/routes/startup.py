from fastapi import APIRouter, Depends, Request

from api.dependencies import get_current_user, get_services, limiter
from api.errors import failure_message
from config import settings
from models.requests import BusinessPlanRequest, IdeaAnalysisRequest, PitchContentRequest
from models.responses import AnalysisTextResponse, GeneratedDeckResponse, PlanResponse
from services import prompt_builder
from services.container import Services

router = APIRouter(prefix="/api/startup", tags=["startup"])


@router.post("/analyze-idea", response_model=AnalysisTextResponse)
@limiter.limit(settings.generation_rate_limit)
async def analyze_idea(
    request: Request,
    body: IdeaAnalysisRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_idea_analysis_prompt(
        body.idea, body.industry, body.target_market
    )
    with failure_message("Idea Analysis", "Failed to analyze startup idea"):
        analysis = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "startup_analyses", "ideas",
            {"analysis": analysis, "input": body.model_dump()},
        )
    return AnalysisTextResponse(analysis=analysis)


@router.post("/generate-plan", response_model=PlanResponse)
@limiter.limit(settings.generation_rate_limit)
async def generate_plan(
    request: Request,
    body: BusinessPlanRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_business_plan_prompt(
        body.idea, body.analysis, body.market_size, body.competition
    )
    with failure_message("Plan Generation", "Failed to generate business plan"):
        plan = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "business_plans", "plans",
            {"plan": plan, "input": body.model_dump()},
        )
    return PlanResponse(plan=plan)


@router.post("/generate-pitch", response_model=GeneratedDeckResponse)
@limiter.limit(settings.generation_rate_limit)
async def generate_pitch(
    request: Request,
    body: PitchContentRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_pitch_content_prompt(body.idea, body.plan, body.market_data)
    with failure_message("Pitch Deck Generation", "Failed to generate pitch deck"):
        content = await services.predictor.generate(prompt, params)
        deck_id = await services.store.append(
            user_id, "pitch_decks", "decks",
            {"content": content, "input": body.model_dump(), "format": "markdown"},
        )
    return GeneratedDeckResponse(deck_id=deck_id, content=content)
