"""
NutriSnap Backend - Calorie Endpoint Tests
============================================

What:  HTTP-level tests for /lookupCalories/{meal} and /addCalEntry.
"""

import json

import pytest


class TestLookup:

    @pytest.mark.asyncio
    async def test_add_then_lookup_different_case(self, test_client):
        response = await test_client.post("/addCalEntry", json={"key": "Banana", "calories": 105})
        assert response.status_code == 200
        assert response.json() == {"success": True}

        response = await test_client.get("/lookupCalories/banana")
        assert response.status_code == 200
        assert response.json() == {"found": True, "calories": 105}

    @pytest.mark.asyncio
    async def test_lookup_unknown(self, test_client):
        response = await test_client.get("/lookupCalories/dragonfruit")
        assert response.status_code == 200
        assert response.json() == {"found": False}

    @pytest.mark.asyncio
    async def test_lookup_url_encoded_name(self, test_client):
        await test_client.post("/addCalEntry", json={"key": "Crème Brûlée", "calories": 330})

        response = await test_client.get("/lookupCalories/CR%C3%88ME%20BR%C3%9BL%C3%89E")

        assert response.json() == {"found": True, "calories": 330}

    @pytest.mark.asyncio
    async def test_lookup_name_with_encoded_slash(self, test_client):
        await test_client.post("/addCalEntry", json={"key": "1/2 Bagel", "calories": 140})

        response = await test_client.get("/lookupCalories/1%2F2%20bagel")

        assert response.status_code == 200
        assert response.json() == {"found": True, "calories": 140}

    @pytest.mark.asyncio
    async def test_lookup_float_value(self, test_client):
        await test_client.post("/addCalEntry", json={"key": "Honey", "calories": 21.5})
        assert (await test_client.get("/lookupCalories/HONEY")).json() == {"found": True, "calories": 21.5}

    @pytest.mark.asyncio
    async def test_lookup_with_missing_file(self, test_client, data_dir):
        (data_dir / "calories.json").unlink()
        response = await test_client.get("/lookupCalories/banana")
        assert response.status_code == 200
        assert response.json() == {"found": False}

    @pytest.mark.asyncio
    async def test_lookup_with_malformed_file(self, test_client, data_dir):
        (data_dir / "calories.json").write_text('{"banana": 10', encoding="utf-8")
        response = await test_client.get("/lookupCalories/banana")
        assert response.status_code == 200
        assert response.json() == {"found": False}

    @pytest.mark.asyncio
    async def test_bad_value_does_not_hide_or_drop_other_entries(self, test_client, data_dir):
        (data_dir / "calories.json").write_text('{"banana": 105, "apple": 95, "soup": null}', encoding="utf-8")

        assert (await test_client.get("/lookupCalories/banana")).json() == {"found": True, "calories": 105}
        assert (await test_client.get("/lookupCalories/soup")).json() == {"found": False}

        await test_client.post("/addCalEntry", json={"key": "Rice", "calories": 206})

        on_disk = json.loads((data_dir / "calories.json").read_text(encoding="utf-8"))
        assert on_disk == {"banana": 105, "apple": 95, "rice": 206}


class TestAddEntry:

    @pytest.mark.asyncio
    async def test_keys_are_stored_lower_case(self, test_client, data_dir):
        await test_client.post("/addCalEntry", json={"key": "Peanut Butter", "calories": 94})
        on_disk = json.loads((data_dir / "calories.json").read_text(encoding="utf-8"))
        assert on_disk == {"peanut butter": 94}

    @pytest.mark.asyncio
    async def test_same_key_overwrites(self, test_client):
        await test_client.post("/addCalEntry", json={"key": "Apple", "calories": 95})
        await test_client.post("/addCalEntry", json={"key": "APPLE", "calories": 80})
        assert (await test_client.get("/lookupCalories/apple")).json() == {"found": True, "calories": 80}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"key": "Banana", "calories": "105"},
        {"key": "Banana"},
        {"calories": 105},
        {"key": "", "calories": 105},
    ])
    async def test_invalid_input_does_not_touch_file(self, test_client, data_dir, body):
        await test_client.post("/addCalEntry", json={"key": "Rice", "calories": 206})
        before = (data_dir / "calories.json").read_text(encoding="utf-8")

        response = await test_client.post("/addCalEntry", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid input"}
        assert (data_dir / "calories.json").read_text(encoding="utf-8") == before

    @pytest.mark.asyncio
    async def test_write_failure(self, test_client, data_dir):
        path = data_dir / "calories.json"
        path.unlink()
        path.mkdir()

        response = await test_client.post("/addCalEntry", json={"key": "Rice", "calories": 206})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save calorie entry"}
