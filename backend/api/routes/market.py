from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from models.requests import CompetitorAnalysisRequest, MarketAnalysisRequest, MarketStrategyRequest
from models.responses import CompetitorAnalysisResponse, MarketAnalysisResponse, StrategyResponse
from services.container import Services
from services.pipeline import market
from services.pipeline.orchestrator import extract_fields

router = APIRouter(prefix="/api/market", tags=["market"])


@router.post("/analyze", response_model=MarketAnalysisResponse)
async def analyze_market(
    body: MarketAnalysisRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Market Analysis", "Failed to analyze market"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = market.market_analysis(signals["market"], signals["industry"], signals["trends"])
        await services.store.append(
            user_id, "market_analyses", "reports",
            {"analysis": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return MarketAnalysisResponse(analysis=verdict)


@router.post("/competitors", response_model=CompetitorAnalysisResponse)
async def analyze_competitors(
    body: CompetitorAnalysisRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Competitor Analysis", "Failed to analyze competitors"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = market.competitor_analysis(
            signals["competitors"], signals["strengths"], signals["weaknesses"]
        )
        await services.store.append(
            user_id, "competitor_analyses", "reports",
            {"analysis": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return CompetitorAnalysisResponse(analysis=verdict)


@router.post("/strategy", response_model=StrategyResponse)
async def strategy(
    body: MarketStrategyRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Strategy", "Failed to generate strategy"):
        signals = await extract_fields(services.extractor, body.model_dump())
        verdict = market.market_strategy(signals["goals"], signals["resources"], signals["constraints"])
        await services.store.append(
            user_id, "market_strategies", "reports",
            {"strategy": verdict.model_dump(mode="json"), "input": body.model_dump()},
        )
    return StrategyResponse(strategy=verdict)
