"""
NutriSnap Backend - Calorie Service
=====================================

What:  Lookup and registration of per-food calorie values.
How:   Wraps CalorieRepository; names are case-folded by the repository.

Lookups never fail: an unreadable calorie database behaves as an empty one
(the repository logs why). Registration can still fail on write.
"""

import logging

from nutrisnap.exceptions import RecordStoreError
from nutrisnap.repositories import CalorieRepository
from nutrisnap.schemas.calorie import AddCalorieEntryRequest, CalorieLookupResponse
from nutrisnap.schemas.common import SuccessResponse

logger = logging.getLogger(__name__)


class CalorieService:

    def __init__(self, repository: CalorieRepository):
        self.repository = repository

    async def lookup(self, name: str) -> CalorieLookupResponse:
        calories = await self.repository.get(name)
        if calories is None:
            logger.debug("Calorie lookup miss: %s", name)
            return CalorieLookupResponse(found=False)
        return CalorieLookupResponse(found=True, calories=calories)

    async def add_entry(self, request: AddCalorieEntryRequest) -> SuccessResponse:
        """
        Insert or overwrite the entry for `request.key`.

        Raises:
            RecordStoreError: "Failed to save calorie entry"
        """
        try:
            await self.repository.set(request.key, request.calories)
        except RecordStoreError as e:
            raise RecordStoreError(message="Failed to save calorie entry", context=e.context) from e

        logger.info("Added calorie entry: %s = %s kcal", request.key, request.calories)
        return SuccessResponse()
