from fastapi import APIRouter, Depends

from labbook.api.v1.schemas import StatsSchema
from labbook.application.use_cases.compute_stats import ComputeStatsUseCase
from labbook.wiring.dependencies import get_compute_stats_use_case

router = APIRouter()


@router.get("/api/stats", response_model=StatsSchema)
def get_stats(uc: ComputeStatsUseCase = Depends(get_compute_stats_use_case)):
    return StatsSchema.from_entity(uc.execute())
