from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.trends import AnalyzeWeightTrendUseCase
from ..models.trend import TrendAnalysis, TrendRequest
from ..wiring import get_analyze_weight_trend_use_case

router: APIRouter = APIRouter()


@router.post("/trend", response_model=TrendAnalysis)
async def analyze_trend(
    request: TrendRequest,
    use_case: AnalyzeWeightTrendUseCase = Depends(get_analyze_weight_trend_use_case),
) -> TrendAnalysis:
    """Fit a weight trend over the submitted samples and project it to the target."""
    return use_case(request.samples, request.target_weight_kg, request.point_count)
