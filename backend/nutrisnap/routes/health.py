"""
NutriSnap Backend - Health Check Route
========================================

What:  Health check endpoint for monitoring and container probes.
How:   Reads and parses both collection files (under their locks) and
       reports each one.

Status levels:
    - healthy:   both collection files readable and valid JSON
    - degraded:  at least one is not; the API still answers (meal reads
                 return 500, calorie lookups return found=false)
"""

import time

from fastapi import APIRouter, Depends

from nutrisnap import __version__
from nutrisnap.schemas.common import HealthResponse
from nutrisnap.services import get_calorie_service, get_meal_service
from nutrisnap.services.calorie_service import CalorieService
from nutrisnap.services.meal_service import MealService

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    meal_service: MealService = Depends(get_meal_service),
    calorie_service: CalorieService = Depends(get_calorie_service),
) -> HealthResponse:
    meals_ok = await meal_service.repository.store.probe()
    calories_ok = await calorie_service.repository.store.probe()

    return HealthResponse(
        status="healthy" if meals_ok and calories_ok else "degraded",
        version=__version__,
        meals="ok" if meals_ok else "unreadable",
        calories="ok" if calories_ok else "unreadable",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
