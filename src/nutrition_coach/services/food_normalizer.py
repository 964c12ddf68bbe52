"""Conversion of FatSecret foods into unified products."""

import math
import time

from nutrition_coach.domain.fatsecret import FatSecretFood, FatSecretServing
from nutrition_coach.domain.food import LoggableFood, UnifiedProduct

BARCODE_PREFIX = "fs-"
DEFAULT_SERVING_SIZE = 100.0
DEFAULT_SERVING_UNIT = "g"

MAX_CALORIES = 5000
MAX_PROTEIN_G = 500
MAX_CARBS_G = 1000
MAX_FAT_G = 500

_MICRONUTRIENT_FIELDS = (
    "fiber",
    "sugar",
    "sodium",
    "saturated_fat",
    "trans_fat",
    "cholesterol",
    "calcium",
    "iron",
    "potassium",
    "vitamin_a",
    "vitamin_c",
    "vitamin_d",
)


def parse_amount(raw: str | None, digits: int = 0) -> float | None:
    """Parse a decimal string and round it; None if missing or not numeric.

    Halves round up, so 2.5 becomes 3 and 0.125 at two digits becomes 0.13.
    """
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    factor = 10**digits
    scaled = value * factor
    if not math.isfinite(scaled):
        return None
    return math.floor(scaled + 0.5) / factor


def normalize_food(food: FatSecretFood) -> UnifiedProduct | None:
    """Map a FatSecret food to a UnifiedProduct using its first serving."""
    if not food.food_id or not (food.food_name or "").strip():
        return None
    servings = food.servings.serving if food.servings else []
    if not servings:
        return None
    serving = servings[0]

    calories = _clamp(_macro(serving.calories), MAX_CALORIES)
    protein = _clamp(_macro(serving.protein), MAX_PROTEIN_G)
    carbs = _clamp(_macro(serving.carbohydrate), MAX_CARBS_G)
    fat = _clamp(_macro(serving.fat), MAX_FAT_G)
    if calories == 0 and protein == 0 and carbs == 0 and fat == 0:
        return None

    serving_size = parse_amount(serving.metric_serving_amount, digits=3)
    if not serving_size or serving_size <= 0:
        serving_size = DEFAULT_SERVING_SIZE
    serving_unit = (serving.metric_serving_unit or DEFAULT_SERVING_UNIT).lower()

    return UnifiedProduct(
        barcode=f"{BARCODE_PREFIX}{food.food_id}",
        name=(
            f"{food.food_name} ({food.brand_name})"
            if food.brand_name
            else food.food_name
        ),
        brand=food.brand_name or None,
        image=None,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        serving=(
            serving.serving_description
            or f"{_format_amount(serving_size)}{serving_unit}"
        ),
        serving_size=serving_size,
        serving_unit=serving_unit,
        micronutrients=_extract_micronutrients(serving),
    )


def product_to_food(product: UnifiedProduct, now: float | None = None) -> LoggableFood:
    """Project a searched product into a diary entry."""
    timestamp_ms = int((time.time() if now is None else now) * 1000)
    return LoggableFood(
        id=f"{product.barcode}-{timestamp_ms}",
        name=product.name,
        serving=product.serving or "100g",
        serving_size=product.serving_size or DEFAULT_SERVING_SIZE,
        serving_unit=product.serving_unit or DEFAULT_SERVING_UNIT,
        calories=product.calories,
        protein=product.protein,
        carbs=product.carbs,
        fat=product.fat,
        category="searched",
        is_per_serving=False,
        barcode=product.barcode,
        micronutrients=product.micronutrients,
    )


def _macro(raw: str | None) -> int:
    value = parse_amount(raw)
    return int(value) if value is not None else 0


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


def _format_amount(amount: float) -> str:
    return str(int(amount)) if amount.is_integer() else str(amount)


def _extract_micronutrients(serving: FatSecretServing) -> dict[str, float] | None:
    micronutrients: dict[str, float] = {}
    for name in _MICRONUTRIENT_FIELDS:
        value = parse_amount(getattr(serving, name), digits=2)
        if value is not None:
            micronutrients[name] = value
    return micronutrients or None
