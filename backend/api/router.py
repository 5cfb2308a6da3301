from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from api.routes import auth, counselor, funding, hire, market, pitch, planning, skilltrack, startup, storage, tasks
from config import settings
from models.requests import AnalyzeTextRequest
from models.schemas.text_signal import TextSignal
from services.container import Services

router = APIRouter()


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "prediction_configured": bool(settings.gemini_api_key or settings.gcp_project),
    }


@router.get("/config/firebase")
async def firebase_config():
    """Public web-client config; holds no secrets."""
    return settings.firebase_web_config


@router.post("/api/analyze", response_model=TextSignal, dependencies=[Depends(get_current_user)])
async def analyze(
    body: AnalyzeTextRequest,
    services: Services = Depends(get_services),
):
    with failure_message("Analysis", "Failed to analyze text"):
        return await services.extractor.extract(body.text)


for module in (auth, planning, pitch, market, funding, counselor, startup, skilltrack, hire, storage, tasks):
    router.include_router(module.router)
