"""Meal recommendations for the remaining daily budget."""

import time
from collections.abc import Callable, Sequence
from datetime import datetime

from nutrition_coach.data.meal_database import MEAL_DATABASE
from nutrition_coach.domain.food import LoggableFood
from nutrition_coach.domain.meals import (
    MealDatabaseEntry,
    RecommendationResult,
    ScoredMeal,
)

CALORIE_BUFFER = 100
MIN_ELIGIBLE = 3
FALLBACK_LIMIT = 10

BREAKFAST_UNTIL_HOUR = 10
LUNCH_UNTIL_HOUR = 14
SNACKS_UNTIL_HOUR = 18

LOW_CALORIE_THRESHOLD = 200
PROTEIN_GAP_G = 30
PROTEIN_GAP_MIN_CALORIES = 300
PLENTY_OF_ROOM_CALORIES = 800

MESSAGE_GOAL_REACHED = (
    "You've hit your calorie goal! Here are some light options if you're still hungry."
)
MESSAGE_ALMOST_THERE = "Almost there! Here are some light options to finish your day."
MESSAGE_NEED_PROTEIN = "You need more protein! Here are some high-protein options."
MESSAGE_PLENTY_OF_ROOM = "Plenty of room left! Here are some satisfying options."
MESSAGE_DEFAULT = "Based on what you've eaten, here are my top picks:"


def recommend(
    remaining_calories: float,
    remaining_protein: float,
    preferred_category: str | None = None,
    meals: Sequence[MealDatabaseEntry] = MEAL_DATABASE,
) -> RecommendationResult:
    """Pick the best protein, filling and quick meals for the budget."""
    eligible = _eligible_meals(meals, remaining_calories, preferred_category)

    best_for_protein = _top_pick(eligible, _protein_score, exclude=set())
    most_filling = _top_pick(
        eligible, _fill_score, exclude=_ids(best_for_protein)
    )
    quick_easy = _top_pick(
        eligible,
        _quick_score,
        exclude=_ids(best_for_protein) | _ids(most_filling),
    )

    return RecommendationResult(
        best_for_protein=best_for_protein,
        most_filling=most_filling,
        quick_easy=quick_easy,
        remaining_calories=remaining_calories,
        remaining_protein=remaining_protein,
        total_eligible=len(eligible),
    )


def meal_to_food(meal: MealDatabaseEntry, now: float | None = None) -> LoggableFood:
    """Convert a meal into a per-serving diary entry."""
    timestamp_ms = int((time.time() if now is None else now) * 1000)
    return LoggableFood(
        id=f"{meal.id}-{timestamp_ms}",
        name=meal.name,
        serving=meal.serving,
        serving_size=meal.serving_size,
        serving_unit=meal.serving_unit,
        calories=meal.calories,
        protein=meal.protein,
        carbs=meal.carbs,
        fat=meal.fat,
        category="recommended",
        is_per_serving=True,
    )


def coach_message(remaining_calories: float, remaining_protein: float) -> str:
    """Return an encouragement line for the remaining budget."""
    if remaining_calories <= 0:
        return MESSAGE_GOAL_REACHED
    if remaining_calories < LOW_CALORIE_THRESHOLD:
        return MESSAGE_ALMOST_THERE
    if (
        remaining_protein > PROTEIN_GAP_G
        and remaining_calories > PROTEIN_GAP_MIN_CALORIES
    ):
        return MESSAGE_NEED_PROTEIN
    if remaining_calories > PLENTY_OF_ROOM_CALORIES:
        return MESSAGE_PLENTY_OF_ROOM
    return MESSAGE_DEFAULT


def suggested_meal_category(now: datetime | None = None) -> str:
    """Return the meal category that fits the hour of day."""
    hour = (now or datetime.now()).hour
    if hour < BREAKFAST_UNTIL_HOUR:
        return "breakfast"
    if hour < LUNCH_UNTIL_HOUR:
        return "lunch"
    if hour < SNACKS_UNTIL_HOUR:
        return "snacks"
    return "dinner"


def _eligible_meals(
    meals: Sequence[MealDatabaseEntry],
    remaining_calories: float,
    preferred_category: str | None,
) -> list[MealDatabaseEntry]:
    max_calories = remaining_calories + CALORIE_BUFFER
    min_calories = max(0, remaining_calories - CALORIE_BUFFER * 3)

    def matches_category(meal: MealDatabaseEntry) -> bool:
        return not preferred_category or meal.category == preferred_category

    eligible = [
        meal
        for meal in meals
        if min_calories <= meal.calories <= max_calories and matches_category(meal)
    ]
    if len(eligible) >= MIN_ELIGIBLE:
        return eligible

    eligible = [
        meal
        for meal in meals
        if meal.calories <= max_calories and matches_category(meal)
    ]
    if len(eligible) >= MIN_ELIGIBLE:
        return eligible

    return sorted(meals, key=lambda meal: meal.calories)[:FALLBACK_LIMIT]


def _top_pick(
    meals: list[MealDatabaseEntry],
    score: Callable[[MealDatabaseEntry], float],
    exclude: set[str],
) -> ScoredMeal | None:
    """Return the highest scoring meal not in ``exclude``, else the top one."""
    if not meals:
        return None
    ranked = sorted(
        (ScoredMeal(meal=meal, score=score(meal)) for meal in meals),
        key=lambda scored: scored.score,
        reverse=True,
    )
    for scored in ranked:
        if scored.id not in exclude:
            return scored
    return ranked[0]


def _ids(pick: ScoredMeal | None) -> set[str]:
    return {pick.id} if pick is not None else set()


def _protein_score(meal: MealDatabaseEntry) -> float:
    if meal.calories <= 0:
        return float("-inf")
    return (meal.protein / meal.calories) * 100 + meal.protein


def _fill_score(meal: MealDatabaseEntry) -> float:
    score = meal.volume_score * 10
    if "filling" in meal.tags:
        score += 20
    if "fiber" in meal.tags:
        score += 15
    return score


def _quick_score(meal: MealDatabaseEntry) -> float:
    score = (15 - meal.prep_time) * 5
    if "quick" in meal.tags:
        score += 30
    if "portable" in meal.tags:
        score += 10
    return score
