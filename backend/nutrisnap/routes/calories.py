"""
NutriSnap Backend - Calorie Database Route Handlers
=====================================================

What:  GET /lookupCalories/{meal} and POST /addCalEntry.
How:   Names are matched case-insensitively. The name is the URL-decoded rest
       of the path, so an encoded "/" (%2F) stays part of the name.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from nutrisnap.schemas.calorie import AddCalorieEntryRequest, CalorieLookupResponse
from nutrisnap.schemas.common import ErrorResponse, SuccessResponse
from nutrisnap.services import get_calorie_service
from nutrisnap.services.calorie_service import CalorieService

router = APIRouter(tags=["Calories"])


@router.get(
    "/lookupCalories/{meal:path}",
    response_model=CalorieLookupResponse,
    response_model_exclude_none=True,
    summary="Look up the stored calorie value for a food name",
    description=(
        "Returns {found: true, calories: N} when the lower-cased name is in the "
        "calorie database, otherwise {found: false}. Never fails, even when the "
        "database file is missing or corrupt."
    ),
)
async def lookup_calories(
    meal: str,
    service: CalorieService = Depends(get_calorie_service),
) -> CalorieLookupResponse:
    return await service.lookup(meal)


@router.post(
    "/addCalEntry",
    response_model=SuccessResponse,
    responses={
        400: {"description": "Missing key or non-numeric calories", "model": ErrorResponse},
        500: {"description": "Calorie database could not be written", "model": ErrorResponse},
    },
    summary="Register or overwrite a food's calorie value",
)
async def add_calorie_entry(
    payload: Any = Body(default=None, examples=[{"key": "Banana", "calories": 105}]),
    service: CalorieService = Depends(get_calorie_service),
) -> SuccessResponse:
    request = AddCalorieEntryRequest.from_payload(payload)
    return await service.add_entry(request)
