"""
NutriSnap Backend - Meal Schemas
==================================

What:  The persisted Meal Entry shape and the request bodies of the meal endpoints.
Who:   Meal is used by MealRepository (file ↔ model) and as the list response model;
       the request models are validated by the meal routes.
"""

from typing import Any, ClassVar, Dict, Optional, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr

from nutrisnap.exceptions import ValidationError
from nutrisnap.schemas.base import Calories, RequestSchema


class Meal(BaseModel):
    """
    One Meal Entry as stored in meals.json.

    Entries are never mutated in place; they are appended, removed by index,
    or cleared with the whole collection.
    """
    name: str = Field(min_length=1, description="Meal name as entered by the user")
    calories: Optional[Union[int, float]] = Field(
        default=None,
        description="Calorie value, or null when unknown",
    )


class AddMealRequest(RequestSchema):
    """Body of POST /addMeal: `{"meal": "Oatmeal", "calories": 150}`."""
    meal: StrictStr = Field(min_length=1)
    calories: Optional[Calories] = None

    field_messages: ClassVar[Dict[str, str]] = {
        "meal": "Meal name required",
        "calories": "Calories must be a number",
    }

    def to_meal(self) -> Meal:
        return Meal(name=self.meal, calories=self.calories)


class DeleteMealRequest(RequestSchema):
    """Body of DELETE /deleteMeal: `{"index": 0}`."""
    index: StrictInt

    invalid_message: ClassVar[str] = "Invalid index"

    @classmethod
    def from_payload(cls, payload: Any):
        body = payload if isinstance(payload, dict) else {}
        if body.get("index") is None:
            raise ValidationError(message="Index required", field="index")
        return super().from_payload(body)
