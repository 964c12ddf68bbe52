"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_coach.adapters.fatsecret_client import HttpxFatSecretClient
from nutrition_coach.config import Settings, is_fatsecret_configured
from nutrition_coach.services.cache import BoundedTtlCache
from nutrition_coach.services.food_search import FoodSearchService
from nutrition_coach.services.tokens import TokenManager

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_search_service: FoodSearchService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if not is_fatsecret_configured(resolved_settings):
        _logger.warning("FatSecret credentials not set; food search is disabled")
    fatsecret_client = HttpxFatSecretClient.create(
        token_url=resolved_settings.fatsecret_token_url,
        api_url=resolved_settings.fatsecret_api_url,
    )
    token_manager = TokenManager(
        client=fatsecret_client,
        client_id=resolved_settings.fatsecret_client_id,
        client_secret=resolved_settings.fatsecret_client_secret,
    )
    food_search_service = FoodSearchService(
        fatsecret_client=fatsecret_client,
        token_manager=token_manager,
        cache=BoundedTtlCache(
            ttl_seconds=resolved_settings.search_cache_ttl_seconds,
            max_entries=resolved_settings.search_cache_max_entries,
        ),
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await fatsecret_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_search_service=food_search_service,
        close_resources=close_resources,
    )
