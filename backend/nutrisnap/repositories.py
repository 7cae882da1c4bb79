"""
NutriSnap Backend - Collection Repositories
=============================================

What:  Collection-level API over a JsonFileStore.
How:   Each public method takes the store's lock, reads the file, mutates the
       in-memory value and writes it back before releasing the lock.
Who:   Used by MealService and CalorieService; never by routes directly.

Repository API:
    MealRepository:     list(), append(meal), remove_at(index), clear()
    CalorieRepository:  load(), get(name), set(name, calories)

Swapping the storage engine (an embedded key-value store, say) means
replacing JsonFileStore; the services and routes stay unchanged.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from nutrisnap.exceptions import RecordStoreError
from nutrisnap.schemas.meal import Meal
from nutrisnap.store import JsonFileStore

logger = logging.getLogger(__name__)

Number = Union[int, float]

_meal_list = TypeAdapter(List[Meal])


def normalize_key(name: str) -> str:
    """Calorie database keys are case-insensitive: stored and looked up lower-cased."""
    return name.lower()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _clear_legacy_calories(raw: Any) -> Any:
    # Older meal files may hold non-numeric calories; those load as null.
    if not isinstance(raw, list):
        return raw
    cleaned = []
    for item in raw:
        if isinstance(item, dict) and item.get("calories") is not None and not is_number(item["calories"]):
            item = {**item, "calories": None}
        cleaned.append(item)
    return cleaned


class MealRepository:
    """
    Ordered meal collection. A meal's position is its external identifier.
    """

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def _load(self) -> List[Meal]:
        raw = await self.store.read()
        try:
            return _meal_list.validate_python(_clear_legacy_calories(raw), strict=True)
        except SchemaError as e:
            raise RecordStoreError(
                message="Meal collection is corrupt",
                context={"path": str(self.store.path), "errors": e.error_count()},
            ) from e

    async def _save(self, meals: List[Meal]) -> None:
        await self.store.write([meal.model_dump() for meal in meals])

    async def list(self) -> List[Meal]:
        """
        Load the whole collection in insertion order.

        Raises:
            RecordStoreError: file missing, unreadable, or not a list of meals
        """
        async with self.store.lock:
            return await self._load()

    async def append(self, meal: Meal) -> int:
        """Append a meal to the end of the collection. Returns the new length."""
        async with self.store.lock:
            meals = await self._load()
            meals.append(meal)
            await self._save(meals)
            return len(meals)

    async def remove_at(self, index: int) -> Meal:
        """
        Remove the meal at `index`; later meals shift down by one.

        Raises:
            IndexError: index outside [0, length); the file is left untouched
            RecordStoreError: load or save failed
        """
        async with self.store.lock:
            meals = await self._load()
            if not 0 <= index < len(meals):
                raise IndexError(index)
            removed = meals.pop(index)
            await self._save(meals)
            return removed

    async def clear(self) -> None:
        """Overwrite the collection with an empty list, whatever its current state."""
        async with self.store.lock:
            await self.store.reset()


class CalorieRepository:
    """
    Mapping of lower-cased food name to calorie value.

    Reads are best-effort: a missing or malformed file, or one that is not a
    JSON object, reads as an empty mapping. Entries whose value is not a
    number are skipped; the rest stay readable and survive the next write.
    Every such fallback is logged at WARNING.
    """

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def _load(self) -> Dict[str, Number]:
        try:
            raw = await self.store.read()
        except RecordStoreError as e:
            logger.warning("Calorie database unreadable, using empty mapping: %s | Context: %s",
                           e.message, e.context)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Calorie database is not a JSON object, using empty mapping: %s",
                           self.store.path)
            return {}

        db = {key: value for key, value in raw.items() if is_number(value)}
        dropped = sorted(set(raw) - set(db))
        if dropped:
            logger.warning("Skipping non-numeric calorie entries in %s: %s", self.store.path, dropped)
        return db

    async def load(self) -> Dict[str, Number]:
        async with self.store.lock:
            return await self._load()

    async def get(self, name: str) -> Optional[Number]:
        """Return the calorie value for `name` (case-insensitive), or None."""
        db = await self.load()
        return db.get(normalize_key(name))

    async def set(self, name: str, calories: Number) -> None:
        """
        Insert or overwrite the entry for `name` (case-insensitive).

        An unparseable file is replaced by a mapping holding only the new
        entry. Non-numeric entries of an otherwise valid file are dropped.

        Raises:
            RecordStoreError: the file could not be written
        """
        async with self.store.lock:
            db = await self._load()
            db[normalize_key(name)] = calories
            await self.store.write(db)
