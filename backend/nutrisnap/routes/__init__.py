"""
NutriSnap Backend - API Routes Package
========================================

Route Inventory:
    - meals.py:     GET    /getMeals
                    POST   /addMeal
                    DELETE /deleteMeal
                    DELETE /clearMeals
    - calories.py:  GET    /lookupCalories/{meal}
                    POST   /addCalEntry
    - health.py:    GET    /health

Routes stay thin: parse the request, call a service, return its result.
Errors are raised as application exceptions and formatted by the global
handlers in main.py.
"""
