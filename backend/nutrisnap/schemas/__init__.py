"""
NutriSnap Backend - Pydantic Schemas
======================================

What:  Request and response shapes for every endpoint plus the persisted
       Meal Entry model.

Inventory:
    - base.py:    RequestSchema (payload → schema, pydantic errors → 400)
    - meal.py:    Meal, AddMealRequest, DeleteMealRequest
    - calorie.py: AddCalorieEntryRequest, CalorieLookupResponse
    - common.py:  SuccessResponse, ErrorResponse, HealthResponse
"""
