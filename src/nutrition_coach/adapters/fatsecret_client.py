"""FatSecret Platform API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from nutrition_coach.errors import AuthError, SearchError

SEARCH_METHOD = "foods.search.v4"


class FatSecretClient(Protocol):
    """Interface for FatSecret Platform API interactions."""

    async def request_token(
        self, client_id: str, client_secret: str
    ) -> dict[str, object]:
        """Exchange client credentials for an access token payload."""

    async def search_foods(
        self, token: str, query: str, max_results: int
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""


@dataclass
class HttpxFatSecretClient(FatSecretClient):
    """HTTPX-backed FatSecret client."""

    token_url: str
    api_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, token_url: str, api_url: str) -> "HttpxFatSecretClient":
        """Create a FatSecret client with a managed httpx session."""
        return cls(
            token_url=token_url, api_url=api_url, http_client=httpx.AsyncClient()
        )

    async def request_token(
        self, client_id: str, client_secret: str
    ) -> dict[str, object]:
        """Run the OAuth client-credentials exchange."""
        response = await self.http_client.post(
            self.token_url,
            auth=httpx.BasicAuth(client_id, client_secret),
            data={"grant_type": "client_credentials", "scope": "basic"},
            timeout=None,
        )
        if not response.is_success:
            raise AuthError(response.status_code)
        return response.json()

    async def search_foods(
        self, token: str, query: str, max_results: int
    ) -> dict[str, object]:
        """Call foods.search with the default-serving flag set."""
        response = await self.http_client.post(
            self.api_url,
            headers={"Authorization": f"Bearer {token}"},
            data={
                "method": SEARCH_METHOD,
                "search_expression": query,
                "max_results": str(max_results),
                "page_number": "0",
                "format": "json",
                "flag_default_serving": "true",
            },
            timeout=None,
        )
        if not response.is_success:
            raise SearchError(response.status_code)
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
