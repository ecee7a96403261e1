from typing import Optional
import logging

from fastapi import FastAPI, Query

from family_meal.api.routes import ingredients, nutrition, pantries, persons, plan, recipes, shopping
from family_meal.events.web_observers import start as start_event_observers, get_events as get_web_events

# Logging
logger = logging.getLogger("family_meal_app")

# Initialize FastAPI app
app = FastAPI(title="Family Meal Planner API")

# Include routers
app.include_router(ingredients.router)
app.include_router(recipes.router)
app.include_router(pantries.router)
app.include_router(plan.router)
app.include_router(nutrition.router)
app.include_router(persons.router)
app.include_router(shopping.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for data-change events when the app starts."""
    start_event_observers()
    logger.info("Web observers for store events started")


@app.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent data-change events (store writes, shopping range changes).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/events?since=<next_cursor>; re-fetch derived
           views (nutrition, shopping list) when anything new arrives.
    """
    return get_web_events(since)
