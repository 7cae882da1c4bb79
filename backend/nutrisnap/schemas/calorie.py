"""
NutriSnap Backend - Calorie Database Schemas
==============================================

What:  Request body for registering a calorie entry and the lookup response.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictStr

from nutrisnap.schemas.base import Calories, RequestSchema


class AddCalorieEntryRequest(RequestSchema):
    """
    Body of POST /addCalEntry: `{"key": "Banana", "calories": 105}`.

    Any invalid field yields the single message "Invalid input".
    """
    key: StrictStr = Field(min_length=1)
    calories: Calories


class CalorieLookupResponse(BaseModel):
    """
    What:  Result of GET /lookupCalories/{meal}.
    How:   Serialized with exclude_none, so a miss is exactly `{"found": false}`.
    """
    found: bool = Field(description="Whether the normalized name is in the calorie database")
    calories: Optional[Union[int, float]] = Field(
        default=None,
        description="Stored calorie value (present only when found)",
    )
