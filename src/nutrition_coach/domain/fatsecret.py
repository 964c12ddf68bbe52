"""Pydantic models for FatSecret Platform API payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_list(value: object) -> object:
    """Wrap a lone object in a list; the vendor drops the array for one match."""
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return value


class FatSecretServing(BaseModel):
    """One serving of a food with nutrient amounts as decimal strings."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    serving_id: str | None = None
    serving_description: str | None = None
    metric_serving_amount: str | None = None
    metric_serving_unit: str | None = None
    calories: str | None = None
    protein: str | None = None
    carbohydrate: str | None = None
    fat: str | None = None
    fiber: str | None = None
    sugar: str | None = None
    sodium: str | None = None
    saturated_fat: str | None = None
    trans_fat: str | None = None
    cholesterol: str | None = None
    calcium: str | None = None
    iron: str | None = None
    potassium: str | None = None
    vitamin_a: str | None = None
    vitamin_c: str | None = None
    vitamin_d: str | None = None


class FatSecretServings(BaseModel):
    """Servings wrapper holding one or more servings."""

    model_config = ConfigDict(extra="ignore")

    serving: list[FatSecretServing] = Field(default_factory=list)

    @field_validator("serving", mode="before")
    @classmethod
    def coerce_serving(cls, value: object) -> object:
        return _as_list(value)


class FatSecretFood(BaseModel):
    """Food record from the foods.search response."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    food_id: str | None = None
    food_name: str | None = None
    food_type: str | None = None
    food_url: str | None = None
    brand_name: str | None = None
    servings: FatSecretServings | None = None


class FatSecretResults(BaseModel):
    """Results wrapper holding one or more foods."""

    model_config = ConfigDict(extra="ignore")

    food: list[FatSecretFood] = Field(default_factory=list)

    @field_validator("food", mode="before")
    @classmethod
    def coerce_food(cls, value: object) -> object:
        return _as_list(value)


class FatSecretFoodsSearch(BaseModel):
    """Search envelope with paging metadata."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    max_results: str | None = None
    total_results: str | None = None
    page_number: str | None = None
    results: FatSecretResults | None = None


class FatSecretSearchResponse(BaseModel):
    """Top-level foods.search.v4 response."""

    model_config = ConfigDict(extra="ignore")

    foods_search: FatSecretFoodsSearch | None = None

    @property
    def foods(self) -> list[FatSecretFood]:
        """Return the foods in the response, always as a list."""
        if self.foods_search is None or self.foods_search.results is None:
            return []
        return self.foods_search.results.food

    @property
    def total_results(self) -> int:
        """Return the vendor's total match count."""
        if self.foods_search is None or not self.foods_search.total_results:
            return 0
        try:
            return int(self.foods_search.total_results)
        except ValueError:
            return 0
