import pytest
from httpx import ASGITransport, AsyncClient

from family_meal.api.api_run import app
from family_meal.events.Event_Bus import EventBus
from family_meal.infra.document_store import DocumentStore, get_store


@pytest.mark.asyncio
async def test_add_recipe_then_plan_it(tmp_path):
    """Create an ingredient and a recipe, plan it, and read back the day's totals."""

    # Use a temporary store file (don't alter the real one)
    store = DocumentStore(tmp_path / "store.json", event_bus=EventBus())
    app.dependency_overrides[get_store] = lambda: store
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            resp = await ac.post("/api/ingredients", json={
                "name": "Sardines", "purinesPer100g": 480, "kcalsPer100g": 208,
                "inflammatoryLevel": 3, "tags": "fish, canned"})
            assert resp.status_code == 201, resp.text
            sardines = resp.json()["id"]

            resp = await ac.post("/api/recipes", json={
                "name": "Sardine toast", "type": "lunch_dinner", "servings": 2,
                "ingredients": [{"ingredientId": sardines, "quantity": 50}]})
            assert resp.status_code == 201, resp.text
            recipe = resp.json()
            assert recipe["total_purines_mg"] == 240
            assert recipe["safe_for_gout"] is False

            resp = await ac.post("/api/plan", json={
                "personId": "exan", "date": "2025-01-15", "slot": "lunch", "recipeId": recipe["id"]})
            assert resp.status_code == 201, resp.text

            day = (await ac.get("/api/nutrition/day", params={"person": "exan", "date": "2025-01-15"})).json()
    finally:
        app.dependency_overrides.clear()

    assert day["meal_count"] == 1
    assert day["total_purines_mg"] == 240
    assert day["purine_status"] == "ok"


@pytest.mark.asyncio
async def test_recipe_type_is_validated(tmp_path):
    store = DocumentStore(tmp_path / "store.json", event_bus=EventBus())
    app.dependency_overrides[get_store] = lambda: store
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            resp = await ac.post("/api/recipes", json={"name": "Mystery", "type": "dessert"})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 422
