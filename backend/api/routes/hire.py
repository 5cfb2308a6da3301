from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from api.dependencies import get_current_user, get_services, limiter
from api.errors import failure_message
from api.uploads import read_resume_text
from config import settings
from models.requests import MAX_PROMPT_FIELD, CoverLetterRequest, InterviewQuestionsRequest, LinkedInRequest
from models.responses import AnalysisTextResponse, CoverLetterResponse, LinkedInResponse, QuestionsResponse
from services import prompt_builder
from services.container import Services

router = APIRouter(prefix="/api/hire", tags=["hire"])


@router.post("/analyze-resume", response_model=AnalysisTextResponse)
@limiter.limit(settings.generation_rate_limit)
async def analyze_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    job_description: str = Form(..., alias="jobDescription", min_length=1, max_length=MAX_PROMPT_FIELD),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    resume_text = await read_resume_text(resume, settings.max_upload_size_mb)
    prompt, params = prompt_builder.build_resume_match_prompt(resume_text, job_description)
    with failure_message("Resume Analysis", "Failed to analyze resume"):
        analysis = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "resume_analyses", "matches",
            {"analysis": analysis, "job_description": job_description, "file_name": resume.filename},
        )
    return AnalysisTextResponse(analysis=analysis)


@router.post("/generate-questions", response_model=QuestionsResponse)
@limiter.limit(settings.generation_rate_limit)
async def generate_questions(
    request: Request,
    body: InterviewQuestionsRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_interview_questions_prompt(
        body.job_role, body.skills, body.experience_level
    )
    with failure_message("Question Generation", "Failed to generate questions"):
        questions = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "interview_questions", "sets",
            {"questions": questions, "input": body.model_dump()},
        )
    return QuestionsResponse(questions=questions)


@router.post("/generate-cover-letter", response_model=CoverLetterResponse)
@limiter.limit(settings.generation_rate_limit)
async def generate_cover_letter(
    request: Request,
    body: CoverLetterRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_cover_letter_prompt(
        body.job_description, body.candidate_experience, body.company_info
    )
    with failure_message("Cover Letter Generation", "Failed to generate cover letter"):
        cover_letter = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "cover_letters", "letters",
            {"cover_letter": cover_letter, "input": body.model_dump()},
        )
    return CoverLetterResponse(cover_letter=cover_letter)


@router.post("/optimize-linkedin", response_model=LinkedInResponse)
@limiter.limit(settings.generation_rate_limit)
async def optimize_linkedin(
    request: Request,
    body: LinkedInRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    prompt, params = prompt_builder.build_linkedin_prompt(
        body.current_profile, body.target_role, body.skills
    )
    with failure_message("LinkedIn Optimization", "Failed to optimize LinkedIn profile"):
        optimization = await services.predictor.generate(prompt, params)
        await services.store.append(
            user_id, "linkedin_optimizations", "profiles",
            {"optimization": optimization, "input": body.model_dump()},
        )
    return LinkedInResponse(optimization=optimization)
