"""Domain models for meal recommendations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealDatabaseEntry:
    """Static reference meal."""

    id: str
    name: str
    category: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving: str
    serving_size: float
    serving_unit: str
    tags: frozenset[str]
    prep_time: int
    volume_score: float


@dataclass(frozen=True)
class ScoredMeal:
    """Meal annotated with a single recommendation score."""

    meal: MealDatabaseEntry
    score: float

    @property
    def id(self) -> str:
        return self.meal.id


@dataclass(frozen=True)
class RecommendationResult:
    """Best picks for the remaining budget."""

    best_for_protein: ScoredMeal | None
    most_filling: ScoredMeal | None
    quick_easy: ScoredMeal | None
    remaining_calories: float
    remaining_protein: float
    total_eligible: int
