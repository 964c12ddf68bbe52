"""FastAPI application factory."""

import logging
import math
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query, Request, status

from nutrition_coach.app_logging import configure_logging
from nutrition_coach.containers import AppContainer
from nutrition_coach.domain.meals import RecommendationResult, ScoredMeal
from nutrition_coach.errors import FoodSearchError
from nutrition_coach.services.recommendations import (
    coach_message,
    recommend,
    suggested_meal_category,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(
        logging.DEBUG if settings.debug else settings.log_level, settings.log_format
    )
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(
        request: Request,
        q: str = Query(default=""),
        page_size: int | None = Query(default=None, ge=1),
    ) -> dict[str, object]:
        """Search the food database."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        try:
            result = await state_container.food_search_service.search(
                q,
                page_size=page_size or settings.search_page_size,
                timeout_ms=settings.search_timeout_ms,
            )
        except FoodSearchError as exc:
            logger.warning("Food search failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail={"message": str(exc), "vendor_status": exc.status_code},
            ) from exc
        except TimeoutError as exc:
            raise HTTPException(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                detail={"message": "Food search timed out"},
            ) from exc
        return asdict(result)

    @app.get("/recommendations")
    async def recommendations(
        remaining_calories: float = Query(allow_inf_nan=False),
        remaining_protein: float = Query(allow_inf_nan=False),
        category: str | None = None,
    ) -> dict[str, object]:
        """Recommend meals for the remaining budget."""
        result = recommend(remaining_calories, remaining_protein, category)
        payload = _format_recommendations(result)
        payload["coach_message"] = coach_message(remaining_calories, remaining_protein)
        return payload

    @app.get("/recommendations/suggested-category")
    async def suggested_category() -> dict[str, str]:
        """Return the meal category for the current time of day."""
        return {"category": suggested_meal_category()}

    return app


def _format_recommendations(result: RecommendationResult) -> dict[str, object]:
    return {
        "best_for_protein": _format_pick(result.best_for_protein),
        "most_filling": _format_pick(result.most_filling),
        "quick_easy": _format_pick(result.quick_easy),
        "remaining_calories": result.remaining_calories,
        "remaining_protein": result.remaining_protein,
        "total_eligible": result.total_eligible,
    }


def _format_pick(pick: ScoredMeal | None) -> dict[str, object] | None:
    if pick is None:
        return None
    payload = asdict(pick.meal)
    payload["tags"] = sorted(pick.meal.tags)
    payload["score"] = pick.score if math.isfinite(pick.score) else None
    return payload
