"""Food search service backed by the FatSecret Platform API."""

import asyncio
import logging
from dataclasses import dataclass

from nutrition_coach.adapters.fatsecret_client import FatSecretClient
from nutrition_coach.domain.fatsecret import FatSecretSearchResponse
from nutrition_coach.domain.food import UnifiedProduct, UnifiedSearchResult
from nutrition_coach.errors import SearchError
from nutrition_coach.services.cache import Cache
from nutrition_coach.services.food_normalizer import normalize_food
from nutrition_coach.services.tokens import TokenManager

MAX_QUERY_LENGTH = 200
MAX_PAGE_SIZE = 50
HTTP_UNAUTHORIZED = 401

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Searches FatSecret and caches normalized results."""

    fatsecret_client: FatSecretClient
    token_manager: TokenManager
    cache: Cache
    debug: bool = False

    def is_configured(self) -> bool:
        """Return True when FatSecret credentials are available."""
        return self.token_manager.is_configured

    async def search(
        self, query: str, page_size: int = 25, timeout_ms: int = 5000
    ) -> UnifiedSearchResult:
        """Search foods, returning cached results when still fresh.

        Returns an empty result when credentials are missing or the query is
        blank. Raises AuthError or SearchError on vendor failures and
        TimeoutError when the search request outlives ``timeout_ms``.
        """
        if not self.is_configured():
            _logger.debug("FatSecret credentials missing; search disabled")
            return UnifiedSearchResult(page_size=page_size)

        sanitized = (query or "").strip()[:MAX_QUERY_LENGTH]
        if not sanitized:
            return UnifiedSearchResult(page_size=page_size)

        cache_key = f"fs|{sanitized}|{page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, UnifiedSearchResult):
            if self.debug:
                _logger.info("FatSecret cache hit: query=%s", sanitized)
            return cached

        token = await self.token_manager.get_token()
        max_results = max(1, min(page_size, MAX_PAGE_SIZE))
        try:
            async with asyncio.timeout(timeout_ms / 1000):
                payload = await self.fatsecret_client.search_foods(
                    token, sanitized, max_results
                )
        except TimeoutError:
            _logger.warning(
                "FatSecret search timed out after %sms: query=%s", timeout_ms, sanitized
            )
            raise
        except SearchError as exc:
            if exc.status_code == HTTP_UNAUTHORIZED:
                self.token_manager.invalidate()
            _logger.warning(
                "FatSecret search failed (status=%s): query=%s",
                exc.status_code,
                sanitized,
            )
            raise

        response = FatSecretSearchResponse.model_validate(payload)
        products: list[UnifiedProduct] = []
        for food in response.foods:
            product = normalize_food(food)
            if product is not None:
                products.append(product)
        result = UnifiedSearchResult(
            products=products,
            count=response.total_results,
            page=0,
            page_size=page_size,
        )
        self.cache.set(cache_key, result)
        if self.debug:
            _logger.info(
                "FatSecret search: query=%s results=%s total=%s",
                sanitized,
                len(products),
                result.count,
            )
        return result

    def clear_cache(self) -> None:
        """Drop all cached search results."""
        self.cache.clear()
