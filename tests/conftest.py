"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from nutrition_coach.adapters.fatsecret_client import FatSecretClient
from nutrition_coach.config import Settings
from nutrition_coach.containers import AppContainer
from nutrition_coach.errors import AuthError, SearchError
from nutrition_coach.services.cache import BoundedTtlCache
from nutrition_coach.services.food_search import FoodSearchService
from nutrition_coach.services.tokens import TokenManager


def search_payload() -> dict[str, object]:
    """Return a foods.search.v4 payload with mixed serving shapes."""
    return {
        "foods_search": {
            "max_results": "25",
            "total_results": "120",
            "page_number": "0",
            "results": {
                "food": [
                    {
                        "food_id": "33691",
                        "food_name": "Chicken Breast",
                        "food_type": "Generic",
                        "food_url": "https://www.fatsecret.com/chicken-breast",
                        "servings": {
                            "serving": [
                                {
                                    "serving_id": "1",
                                    "serving_description": "100 g",
                                    "metric_serving_amount": "100.000",
                                    "metric_serving_unit": "g",
                                    "calories": "165",
                                    "protein": "31.02",
                                    "carbohydrate": "0",
                                    "fat": "3.57",
                                    "sodium": "74",
                                },
                                {
                                    "serving_id": "2",
                                    "serving_description": "1 breast",
                                    "calories": "284",
                                    "protein": "53.4",
                                    "carbohydrate": "0",
                                    "fat": "6.1",
                                },
                            ]
                        },
                    },
                    {
                        "food_id": "5011",
                        "food_name": "Greek Yogurt",
                        "food_type": "Brand",
                        "brand_name": "Fage",
                        "servings": {
                            "serving": {
                                "serving_id": "3",
                                "serving_description": "1 container",
                                "metric_serving_amount": "170",
                                "metric_serving_unit": "G",
                                "calories": "100",
                                "protein": "18",
                                "carbohydrate": "6",
                                "fat": "0",
                            }
                        },
                    },
                    {
                        "food_id": "9999",
                        "food_name": "Water",
                        "food_type": "Generic",
                        "servings": {
                            "serving": {
                                "serving_id": "4",
                                "serving_description": "1 cup",
                                "calories": "0",
                                "protein": "0",
                                "carbohydrate": "0",
                                "fat": "0",
                            }
                        },
                    },
                ]
            },
        }
    }


class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeFatSecretClient(FatSecretClient):
    """Fake FatSecret client that records calls."""

    payload: dict[str, object] = field(default_factory=search_payload)
    expires_in: object = 86400
    auth_status: int | None = None
    search_status: int | None = None
    search_delay_seconds: float = 0
    token_calls: int = 0
    search_calls: list[tuple[str, str, int]] = field(default_factory=list)

    async def request_token(
        self, client_id: str, client_secret: str
    ) -> dict[str, object]:
        self.token_calls += 1
        if self.auth_status is not None:
            raise AuthError(self.auth_status)
        return {
            "access_token": f"token-{self.token_calls}",
            "expires_in": self.expires_in,
            "token_type": "Bearer",
        }

    async def search_foods(
        self, token: str, query: str, max_results: int
    ) -> dict[str, object]:
        self.search_calls.append((token, query, max_results))
        if self.search_delay_seconds:
            await asyncio.sleep(self.search_delay_seconds)
        if self.search_status is not None:
            raise SearchError(self.search_status)
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fatsecret_client_id="client-id",
        fatsecret_client_secret="client-secret",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fatsecret_client() -> FakeFatSecretClient:
    return FakeFatSecretClient()


@pytest.fixture
def token_manager(
    fatsecret_client: FakeFatSecretClient, clock: FakeClock
) -> TokenManager:
    return TokenManager(
        client=fatsecret_client,
        client_id="client-id",
        client_secret="client-secret",
        clock=clock,
    )


@pytest.fixture
def food_search_service(
    fatsecret_client: FakeFatSecretClient,
    token_manager: TokenManager,
    clock: FakeClock,
) -> FoodSearchService:
    return FoodSearchService(
        fatsecret_client=fatsecret_client,
        token_manager=token_manager,
        cache=BoundedTtlCache(ttl_seconds=300, max_entries=50, clock=clock),
    )


@pytest.fixture
def container(
    settings: Settings, food_search_service: FoodSearchService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_search_service=food_search_service,
        close_resources=close_resources,
    )
