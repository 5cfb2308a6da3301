from fastapi import APIRouter, Depends, Request

from api.dependencies import get_current_user, get_services, limiter
from api.errors import failure_message
from config import settings
from models.requests import CareerRequest, LearningPathRequest, SkillGapRequest
from models.responses import AnalysisTextResponse, RecommendationsResponse
from services import prompt_builder
from services.container import Services

router = APIRouter(prefix="/api/counselor", tags=["counselor"])


@router.post("/analyze-career", response_model=AnalysisTextResponse)
@limiter.limit(settings.generation_rate_limit)
async def analyze_career(
    request: Request,
    body: CareerRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_career_prompt(
        body.interests, body.current_skills, body.education
    )
    with failure_message("Career Analysis", "Failed to analyze career path"):
        analysis = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "career_analyses", "reports",
            {"analysis": analysis, "input": body.model_dump()},
        )
    return AnalysisTextResponse(analysis=analysis)


@router.post("/analyze-skills", response_model=AnalysisTextResponse)
@limiter.limit(settings.generation_rate_limit)
async def analyze_skills(
    request: Request,
    body: SkillGapRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_skill_gap_prompt(body.target_role, body.current_skills)
    with failure_message("Skill Analysis", "Failed to analyze skills"):
        analysis = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "skill_analyses", "reports",
            {"analysis": analysis, "input": body.model_dump()},
        )
    return AnalysisTextResponse(analysis=analysis)


@router.post("/get-recommendations", response_model=RecommendationsResponse)
@limiter.limit(settings.generation_rate_limit)
async def get_recommendations(
    request: Request,
    body: LearningPathRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_learning_path_prompt(
        body.skill_gaps, body.learning_style, body.time_available
    )
    with failure_message("Recommendation", "Failed to get recommendations"):
        recommendations = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "learning_recommendations", "plans",
            {"recommendations": recommendations, "input": body.model_dump()},
        )
    return RecommendationsResponse(recommendations=recommendations)
