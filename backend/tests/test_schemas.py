"""
NutriSnap Backend - Request Schema Tests
==========================================

What:  Boundary validation of request bodies and the 400 messages they produce.
"""

import pytest

from nutrisnap.exceptions import ValidationError
from nutrisnap.schemas.calorie import AddCalorieEntryRequest
from nutrisnap.schemas.meal import AddMealRequest, DeleteMealRequest


class TestAddMealRequest:

    def test_valid_with_calories(self):
        request = AddMealRequest.from_payload({"meal": "Oatmeal", "calories": 150})
        assert request.to_meal().model_dump() == {"name": "Oatmeal", "calories": 150}

    def test_calories_default_to_null(self):
        request = AddMealRequest.from_payload({"meal": "Tea"})
        assert request.to_meal().calories is None

    @pytest.mark.parametrize("payload", [
        {},
        {"meal": ""},
        {"meal": None},
        {"meal": 42},
        {"calories": 100},
        None,
        ["Oatmeal"],
    ])
    def test_missing_meal_name(self, payload):
        with pytest.raises(ValidationError, match="Meal name required"):
            AddMealRequest.from_payload(payload)

    @pytest.mark.parametrize("calories", ["150", True, [150]])
    def test_non_numeric_calories(self, calories):
        with pytest.raises(ValidationError, match="Calories must be a number"):
            AddMealRequest.from_payload({"meal": "Oatmeal", "calories": calories})

    def test_meal_name_checked_first(self):
        with pytest.raises(ValidationError, match="Meal name required"):
            AddMealRequest.from_payload({"meal": "", "calories": "lots"})


class TestDeleteMealRequest:

    def test_valid(self):
        assert DeleteMealRequest.from_payload({"index": 3}).index == 3

    @pytest.mark.parametrize("payload", [{}, {"index": None}, None])
    def test_index_required(self, payload):
        with pytest.raises(ValidationError, match="Index required"):
            DeleteMealRequest.from_payload(payload)

    @pytest.mark.parametrize("index", ["1", 1.5, True])
    def test_non_integer_index(self, index):
        with pytest.raises(ValidationError, match="Invalid index"):
            DeleteMealRequest.from_payload({"index": index})


class TestAddCalorieEntryRequest:

    @pytest.mark.parametrize("calories", [105, 52.5, 0])
    def test_valid(self, calories):
        request = AddCalorieEntryRequest.from_payload({"key": "Banana", "calories": calories})
        assert request.calories == calories

    @pytest.mark.parametrize("payload", [
        {"calories": 105},
        {"key": "", "calories": 105},
        {"key": 7, "calories": 105},
        {"key": "Banana"},
        {"key": "Banana", "calories": "105"},
        {"key": "Banana", "calories": None},
        {"key": "Banana", "calories": False},
        {"key": "Banana", "calories": float("nan")},
        {"key": "Banana", "calories": float("inf")},
    ])
    def test_invalid_input(self, payload):
        with pytest.raises(ValidationError, match="Invalid input"):
            AddCalorieEntryRequest.from_payload(payload)
