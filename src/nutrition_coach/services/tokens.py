"""OAuth token management for the FatSecret API."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from nutrition_coach.adapters.fatsecret_client import FatSecretClient
from nutrition_coach.config import has_credentials
from nutrition_coach.domain.food import AccessToken

DEFAULT_TOKEN_LIFETIME_SECONDS = 86400
REFRESH_LEEWAY_SECONDS = 60

_logger = logging.getLogger(__name__)


@dataclass
class TokenManager:
    """Caches a client-credentials token and refreshes it near expiry.

    Refreshes are not serialized: callers racing through an expired window
    may each run a credential exchange.
    """

    client: FatSecretClient
    client_id: str | None
    client_secret: str | None
    clock: Callable[[], float] = time.time
    _token: AccessToken | None = field(default=None, init=False, repr=False)

    @property
    def is_configured(self) -> bool:
        """Return True when both credentials are present."""
        return has_credentials(self.client_id, self.client_secret)

    @property
    def token(self) -> AccessToken | None:
        """Return the cached token, if any."""
        return self._token

    async def get_token(self) -> str:
        """Return a token valid for at least another minute."""
        if self._token is not None and self._token.is_valid(
            self.clock(), REFRESH_LEEWAY_SECONDS
        ):
            return self._token.value

        payload = await self.client.request_token(
            self.client_id or "", self.client_secret or ""
        )
        lifetime = _coerce_lifetime(payload.get("expires_in"))
        self._token = AccessToken(
            value=str(payload["access_token"]),
            expires_at=self.clock() + lifetime,
        )
        _logger.info("FatSecret token refreshed, expires in %ss", lifetime)
        return self._token.value

    def invalidate(self) -> None:
        """Drop the cached token so the next call re-authenticates."""
        self._token = None


def _coerce_lifetime(raw: object) -> float:
    if isinstance(raw, bool):
        return DEFAULT_TOKEN_LIFETIME_SECONDS
    if isinstance(raw, int | float) and raw > 0:
        return float(raw)
    if isinstance(raw, str):
        try:
            value = float(raw)
        except ValueError:
            return DEFAULT_TOKEN_LIFETIME_SECONDS
        if value > 0:
            return value
    return DEFAULT_TOKEN_LIFETIME_SECONDS
