from fastapi import APIRouter, Depends, File, Request, UploadFile

from api.dependencies import get_current_user, get_services, limiter
from api.errors import failure_message
from api.uploads import read_resume_text
from config import settings
from models.requests import ProgressRequest, SkillPathRequest
from models.responses import AnalysisTextResponse, ProgressResponse, RecommendationsResponse
from services import prompt_builder
from services.container import Services

router = APIRouter(prefix="/api/skilltrack", tags=["skilltrack"])


@router.post("/analyze-resume", response_model=AnalysisTextResponse)
@limiter.limit(settings.generation_rate_limit)
async def analyze_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    resume_text = await read_resume_text(resume, settings.max_upload_size_mb)
    prompt, params = prompt_builder.build_resume_skills_prompt(resume_text)
    with failure_message("Resume Analysis", "Failed to analyze resume"):
        analysis = await services.predictor.generate(prompt, params)
        # One profile document per user, overwritten field by field
        await services.store.merge(
            user_id, "skill_profiles", {"skills": analysis, "resume_analysis": True}
        )
    return AnalysisTextResponse(analysis=analysis)


@router.post("/track-progress", response_model=ProgressResponse)
@limiter.limit(settings.generation_rate_limit)
async def track_progress(
    request: Request,
    body: ProgressRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_progress_prompt(
        body.skills, body.projects_completed, body.certifications
    )
    with failure_message("Progress Tracking", "Failed to track progress"):
        progress = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "skill_progress", "updates",
            {"progress": progress, "input": body.model_dump()},
        )
    return ProgressResponse(progress=progress)


@router.post("/get-recommendations", response_model=RecommendationsResponse)
@limiter.limit(settings.generation_rate_limit)
async def get_recommendations(
    request: Request,
    body: SkillPathRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_skill_path_prompt(
        body.current_skills, body.career_goals, body.timeframe
    )
    with failure_message("Recommendation", "Failed to get recommendations"):
        recommendations = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "skill_recommendations", "paths",
            {"recommendations": recommendations, "input": body.model_dump()},
        )
    return RecommendationsResponse(recommendations=recommendations)
