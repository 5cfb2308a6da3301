from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from models.requests import FundingGuidanceRequest, InvestorMatchRequest, ReadinessRequest
from models.responses import GuidanceResponse, InvestorMatchResponse, ReadinessResponse
from services.container import Services
from services.pipeline import funding
from services.pipeline.orchestrator import extract_fields

router = APIRouter(prefix="/api/funding", tags=["funding"])


@router.post("/guidance", response_model=GuidanceResponse)
async def guidance(
    body: FundingGuidanceRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Funding Guidance", "Failed to generate funding guidance"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = funding.funding_guidance(signals["stage"], signals["needs"], signals["metrics"])
        await services.store.append(
            user_id, "funding_guidance", "reports",
            {"guidance": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return GuidanceResponse(guidance=verdict)


@router.post("/investor-match", response_model=InvestorMatchResponse)
async def investor_match(
    body: InvestorMatchRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Investor Matching", "Failed to generate investor matches"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = funding.investor_match(
            signals["pitch"], signals["requirements"], signals["preferences"]
        )
        await services.store.append(
            user_id, "investor_matches", "reports",
            {"matches": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return InvestorMatchResponse(matches=verdict)


@router.post("/readiness", response_model=ReadinessResponse)
async def readiness(
    body: ReadinessRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Readiness Assessment", "Failed to assess funding readiness"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = funding.readiness_assessment(
            signals["business"], signals["financials"], signals["team"]
        )
        await services.store.append(
            user_id, "funding_readiness", "assessments",
            {"assessment": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return ReadinessResponse(assessment=verdict)
