"""
NutriSnap Backend - Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and repositories.
How:   Services receive validated request schemas, call their repository, and
       raise application exceptions for the global handlers to format.

Service Inventory:
    - MealService:     list / add / delete-by-index / clear
    - CalorieService:  lookup / add entry

Both are built once per application by `build_services()` and exposed to
routes through FastAPI dependencies reading `app.state`.
"""

from fastapi import Request

from nutrisnap.config import Settings
from nutrisnap.repositories import CalorieRepository, MealRepository
from nutrisnap.services.calorie_service import CalorieService
from nutrisnap.services.meal_service import MealService
from nutrisnap.store import EMPTY_LIST, EMPTY_MAPPING, JsonFileStore


def build_services(settings: Settings) -> tuple:
    """
    Create one store per collection file, initialize missing files, and wrap
    them in repositories and services.

    Returns:
        (meal_service, calorie_service)
    """
    meal_store = JsonFileStore(settings.meals_path, EMPTY_LIST)
    calorie_store = JsonFileStore(settings.calories_path, EMPTY_MAPPING)
    meal_store.ensure_initialized()
    calorie_store.ensure_initialized()
    return (
        MealService(MealRepository(meal_store)),
        CalorieService(CalorieRepository(calorie_store)),
    )


def get_meal_service(request: Request) -> MealService:
    """FastAPI dependency: the application's MealService."""
    return request.app.state.meal_service


def get_calorie_service(request: Request) -> CalorieService:
    """FastAPI dependency: the application's CalorieService."""
    return request.app.state.calorie_service
