"""
NutriSnap Backend - Meal Route Handlers
=========================================

What:  GET /getMeals, POST /addMeal, DELETE /deleteMeal, DELETE /clearMeals.
How:   Parses the JSON body through a request schema, delegates to MealService.
Who:   Called by the bundled single-page UI.

Paths keep the original camelCase names the UI already calls.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from nutrisnap.exceptions import RecordStoreError
from nutrisnap.schemas.common import ErrorResponse, SuccessResponse
from nutrisnap.schemas.meal import AddMealRequest, DeleteMealRequest, Meal
from nutrisnap.services import get_meal_service
from nutrisnap.services.meal_service import MealService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Meals"])


@router.get(
    "/getMeals",
    response_model=List[Meal],
    responses={500: {"description": "Meal file unreadable; body is an empty array"}},
    summary="List all logged meals in insertion order",
)
async def get_meals(service: MealService = Depends(get_meal_service)):
    """
    Return the full meal log.

    A load failure answers `500 []` so the UI can still render an empty list.
    """
    try:
        return await service.list_meals()
    except RecordStoreError as e:
        logger.error("Error loading meals: %s | Context: %s", e.message, e.context)
        return JSONResponse(status_code=500, content=[])


@router.post(
    "/addMeal",
    response_model=SuccessResponse,
    responses={
        400: {"description": "Missing meal name or non-numeric calories", "model": ErrorResponse},
        500: {"description": "Meal file could not be updated", "model": ErrorResponse},
    },
    summary="Append a meal to the log",
)
async def add_meal(
    payload: Any = Body(default=None, examples=[{"meal": "Oatmeal", "calories": 150}]),
    service: MealService = Depends(get_meal_service),
) -> SuccessResponse:
    request = AddMealRequest.from_payload(payload)
    return await service.add_meal(request)


@router.delete(
    "/deleteMeal",
    response_model=SuccessResponse,
    responses={
        400: {"description": "Index missing or out of range", "model": ErrorResponse},
        500: {"description": "Meal file could not be updated", "model": ErrorResponse},
    },
    summary="Delete the meal at a zero-based index",
)
async def delete_meal(
    payload: Any = Body(default=None, examples=[{"index": 0}]),
    service: MealService = Depends(get_meal_service),
) -> SuccessResponse:
    """
    Remove one meal. Meals after it move down by one position, so clients
    must re-fetch the list before deleting again.
    """
    request = DeleteMealRequest.from_payload(payload)
    return await service.delete_meal(request)


@router.delete(
    "/clearMeals",
    response_model=SuccessResponse,
    responses={500: {"description": "Meal file could not be written", "model": ErrorResponse}},
    summary="Remove every meal",
)
async def clear_meals(service: MealService = Depends(get_meal_service)) -> SuccessResponse:
    return await service.clear_meals()
