"""
NutriSnap Backend - Meal Service
==================================

What:  Business rules for the meal log: list, add, delete by index, clear.
How:   Delegates persistence to MealRepository and translates its failures into
       application exceptions carrying the message each endpoint promises.
Who:   Called by the meal route handlers.

Error Translation:
    IndexError (from remove_at)   → ValidationError("Invalid index")      → 400
    RecordStoreError on add       → RecordStoreError("Failed to add meal")    → 500
    RecordStoreError on delete    → RecordStoreError("Failed to delete meal") → 500
    RecordStoreError on clear     → RecordStoreError("Failed to clear meals") → 500
    RecordStoreError on list      → propagated unchanged (the route answers 500 [])
"""

import logging
from typing import List

from nutrisnap.exceptions import RecordStoreError, ValidationError
from nutrisnap.repositories import MealRepository
from nutrisnap.schemas.common import SuccessResponse
from nutrisnap.schemas.meal import AddMealRequest, DeleteMealRequest, Meal

logger = logging.getLogger(__name__)


class MealService:
    """
    Stateless apart from its repository, which owns the collection lock.
    """

    def __init__(self, repository: MealRepository):
        self.repository = repository

    async def list_meals(self) -> List[Meal]:
        return await self.repository.list()

    async def add_meal(self, request: AddMealRequest) -> SuccessResponse:
        """
        Append `{name: meal, calories: calories or null}` to the log.

        Raises:
            RecordStoreError: "Failed to add meal"
        """
        meal = request.to_meal()
        try:
            await self.repository.append(meal)
        except RecordStoreError as e:
            raise RecordStoreError(message="Failed to add meal", context=e.context) from e

        logger.info("Added meal: %s", meal.name)
        return SuccessResponse()

    async def delete_meal(self, request: DeleteMealRequest) -> SuccessResponse:
        """
        Remove the meal at `request.index`.

        Raises:
            ValidationError: index outside the current collection
            RecordStoreError: "Failed to delete meal"
        """
        try:
            removed = await self.repository.remove_at(request.index)
        except IndexError:
            raise ValidationError(
                message="Invalid index",
                field="index",
                context={"index": request.index},
            )
        except RecordStoreError as e:
            raise RecordStoreError(message="Failed to delete meal", context=e.context) from e

        logger.info("Deleted meal: %s", removed.name)
        return SuccessResponse()

    async def clear_meals(self) -> SuccessResponse:
        try:
            await self.repository.clear()
        except RecordStoreError as e:
            raise RecordStoreError(message="Failed to clear meals", context=e.context) from e

        logger.info("Cleared all meals")
        return SuccessResponse()
