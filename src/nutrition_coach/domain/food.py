"""Food search domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccessToken:
    """OAuth access token with its expiry as epoch seconds."""

    value: str
    expires_at: float

    def is_valid(self, now: float, leeway_seconds: float = 60) -> bool:
        """Return True if the token stays valid for at least the leeway."""
        return now < self.expires_at - leeway_seconds


@dataclass(frozen=True)
class UnifiedProduct:
    """Vendor-independent product record."""

    barcode: str
    name: str
    brand: str | None
    image: str | None
    calories: int
    protein: int
    carbs: int
    fat: int
    serving: str
    serving_size: float
    serving_unit: str
    micronutrients: dict[str, float] | None = None


@dataclass(frozen=True)
class UnifiedSearchResult:
    """Normalized search results with the vendor's total match count."""

    products: list[UnifiedProduct] = field(default_factory=list)
    count: int = 0
    page: int = 0
    page_size: int = 0


@dataclass(frozen=True)
class LoggableFood:
    """Food entry ready to be written to a food diary."""

    id: str
    name: str
    serving: str
    serving_size: float
    serving_unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    category: str
    is_per_serving: bool
    barcode: str | None = None
    micronutrients: dict[str, float] | None = None
