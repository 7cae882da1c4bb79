"""
NutriSnap Backend - Record Store Unit Tests
=============================================

What:  Tests for JsonFileStore initialization, reads, writes and probing.
How:   Real files in pytest's tmp_path; a directory stands in for an
       unreadable/unwritable file (tests may run as root, so chmod is useless).
"""

import json

import pytest

from nutrisnap.exceptions import RecordStoreError
from nutrisnap.store import EMPTY_LIST, EMPTY_MAPPING, JsonFileStore


class TestEnsureInitialized:

    def test_creates_missing_file_with_empty_list(self, tmp_path):
        store = JsonFileStore(tmp_path / "meals.json", EMPTY_LIST)
        assert store.ensure_initialized() is True
        assert (tmp_path / "meals.json").read_text(encoding="utf-8") == "[]"

    def test_creates_missing_file_with_empty_mapping(self, tmp_path):
        store = JsonFileStore(tmp_path / "calories.json", EMPTY_MAPPING)
        store.ensure_initialized()
        assert (tmp_path / "calories.json").read_text(encoding="utf-8") == "{}"

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "meals.json"
        JsonFileStore(path, EMPTY_LIST).ensure_initialized()
        assert path.exists()

    def test_existing_file_is_left_alone(self, tmp_path):
        path = tmp_path / "meals.json"
        path.write_text('[{"name": "Toast", "calories": 80}]', encoding="utf-8")

        store = JsonFileStore(path, EMPTY_LIST)
        assert store.ensure_initialized() is False
        assert json.loads(path.read_text(encoding="utf-8")) == [{"name": "Toast", "calories": 80}]


class TestReadWrite:

    @pytest.mark.asyncio
    async def test_write_then_read_returns_equal_value(self, meal_store):
        value = [{"name": "Oatmeal", "calories": 150}, {"name": "Tea", "calories": None}]
        await meal_store.write(value)
        assert await meal_store.read() == value

    @pytest.mark.asyncio
    async def test_write_is_pretty_printed_utf8(self, calorie_store):
        await calorie_store.write({"crème brûlée": 330})
        text = calorie_store.path.read_text(encoding="utf-8")
        assert text == '{\n  "crème brûlée": 330\n}'

    @pytest.mark.asyncio
    async def test_write_overwrites_whole_file(self, meal_store):
        await meal_store.write([{"name": "A", "calories": 1}, {"name": "B", "calories": 2}])
        await meal_store.write([])
        assert meal_store.path.read_text(encoding="utf-8") == "[]"

    @pytest.mark.asyncio
    async def test_reset_writes_empty_text(self, calorie_store):
        await calorie_store.write({"apple": 95})
        await calorie_store.reset()
        assert calorie_store.path.read_text(encoding="utf-8") == "{}"

    @pytest.mark.asyncio
    async def test_read_missing_file_raises(self, tmp_path):
        store = JsonFileStore(tmp_path / "absent.json", EMPTY_LIST)
        with pytest.raises(RecordStoreError) as exc_info:
            await store.read()
        assert exc_info.value.context["path"].endswith("absent.json")

    @pytest.mark.asyncio
    async def test_read_malformed_json_raises(self, meal_store):
        meal_store.path.write_text("[{oops", encoding="utf-8")
        with pytest.raises(RecordStoreError, match="not valid JSON"):
            await meal_store.read()

    @pytest.mark.asyncio
    async def test_write_failure_raises(self, tmp_path):
        store = JsonFileStore(tmp_path, EMPTY_LIST)  # a directory cannot be opened for writing
        with pytest.raises(RecordStoreError, match="Could not write"):
            await store.write([])


class TestProbe:

    @pytest.mark.asyncio
    async def test_probe_ok(self, meal_store):
        assert await meal_store.probe() is True

    @pytest.mark.asyncio
    async def test_probe_corrupt_file(self, meal_store):
        meal_store.path.write_text("not json", encoding="utf-8")
        assert await meal_store.probe() is False
