"""Static meal reference data used by the recommendation engine."""

from nutrition_coach.domain.meals import MealDatabaseEntry


def _meal(  # noqa: PLR0913
    meal_id: str,
    name: str,
    category: str,
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    serving: str,
    tags: tuple[str, ...],
    prep_time: int,
    volume_score: float,
    serving_size: float = 1,
    serving_unit: str = "serving",
) -> MealDatabaseEntry:
    return MealDatabaseEntry(
        id=meal_id,
        name=name,
        category=category,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        serving=serving,
        serving_size=serving_size,
        serving_unit=serving_unit,
        tags=frozenset(tags),
        prep_time=prep_time,
        volume_score=volume_score,
    )


MEAL_DATABASE: tuple[MealDatabaseEntry, ...] = (
    # Breakfast
    _meal("b1", "Greek Yogurt Parfait", "breakfast", 280, 20, 35, 6,
          "1 cup yogurt + berries", ("high-protein", "quick", "portable"), 5, 6),
    _meal("b2", "Veggie Egg White Omelette", "breakfast", 210, 24, 8, 7,
          "4 egg whites + vegetables", ("high-protein", "low-carb", "filling"), 10, 7),
    _meal("b3", "Overnight Oats with Banana", "breakfast", 380, 14, 62, 9,
          "1 jar", ("fiber", "filling", "portable"), 5, 8),
    _meal("b4", "Protein Pancakes", "breakfast", 420, 30, 48, 11,
          "3 medium pancakes", ("high-protein",), 15, 6),
    _meal("b5", "Avocado Toast with Egg", "breakfast", 340, 14, 28, 19,
          "1 slice + 1 egg", ("fiber",), 8, 5),
    _meal("b6", "Cottage Cheese and Pineapple", "breakfast", 220, 24, 22, 4,
          "1 cup cottage cheese + 1/2 cup pineapple", ("high-protein", "quick"), 2, 5),
    _meal("b7", "Scrambled Eggs on Whole Wheat Toast", "breakfast", 360, 22, 26, 18,
          "3 eggs + 1 slice", ("high-protein", "filling"), 8, 6),
    _meal("b8", "Berry Protein Smoothie", "breakfast", 300, 28, 36, 5,
          "16 oz", ("high-protein", "quick", "portable"), 4, 6),
    _meal("b9", "Steel Cut Oatmeal with Walnuts", "breakfast", 320, 10, 44, 12,
          "1 bowl", ("fiber", "filling"), 20, 8),
    _meal("b10", "Breakfast Burrito", "breakfast", 480, 26, 42, 22,
          "1 large burrito", ("filling", "portable"), 15, 7),
    # Lunch
    _meal("l1", "Grilled Chicken Salad", "lunch", 380, 38, 16, 18,
          "1 large bowl", ("high-protein", "fiber", "filling", "low-carb"), 15, 9),
    _meal("l2", "Turkey and Hummus Wrap", "lunch", 420, 30, 40, 14,
          "1 wrap", ("high-protein", "portable", "quick"), 5, 6),
    _meal("l3", "Lentil Soup", "lunch", 340, 18, 52, 6,
          "2 cups", ("fiber", "filling", "vegetarian"), 10, 9),
    _meal("l4", "Tuna Salad Lettuce Cups", "lunch", 290, 32, 6, 14,
          "4 cups", ("high-protein", "low-carb", "quick"), 7, 6),
    _meal("l5", "Quinoa Buddha Bowl", "lunch", 520, 20, 68, 18,
          "1 bowl", ("fiber", "filling", "vegetarian"), 20, 9),
    _meal("l6", "Chicken Burrito Bowl", "lunch", 610, 42, 66, 16,
          "1 bowl", ("high-protein", "filling"), 15, 8),
    _meal("l7", "Poke Bowl", "lunch", 540, 34, 60, 16,
          "1 regular bowl", ("high-protein",), 10, 7),
    _meal("l8", "Caprese Sandwich", "lunch", 450, 20, 44, 21,
          "1 sandwich", ("vegetarian", "portable", "quick"), 5, 5),
    _meal("l9", "Black Bean Chili", "lunch", 410, 22, 58, 9,
          "1.5 cups", ("fiber", "filling", "vegetarian"), 25, 9),
    _meal("l10", "Shrimp Spring Rolls", "lunch", 260, 18, 34, 4,
          "3 rolls", ("portable", "low-fat"), 15, 5),
    # Dinner
    _meal("d1", "Grilled Salmon with Vegetables", "dinner", 480, 42, 18, 26,
          "6 oz salmon + vegetables", ("high-protein", "filling"), 25, 7),
    _meal("d2", "Chicken Stir Fry", "dinner", 430, 36, 34, 15,
          "1.5 cups", ("high-protein", "fiber"), 20, 8),
    _meal("d3", "Turkey Meatballs with Zucchini Noodles", "dinner", 390, 34, 18, 19,
          "5 meatballs + noodles", ("high-protein", "low-carb", "filling"), 30, 8),
    _meal("d4", "Beef and Broccoli", "dinner", 520, 40, 30, 24,
          "1.5 cups + rice", ("high-protein",), 25, 7),
    _meal("d5", "Vegetable Curry with Rice", "dinner", 560, 14, 82, 18,
          "2 cups curry + rice", ("vegetarian", "fiber", "filling"), 30, 9),
    _meal("d6", "Baked Cod with Sweet Potato", "dinner", 410, 36, 40, 9,
          "6 oz cod + 1 potato", ("high-protein", "fiber"), 30, 8),
    _meal("d7", "Pasta Primavera", "dinner", 620, 20, 92, 18,
          "2 cups", ("vegetarian", "filling"), 20, 7),
    _meal("d8", "Steak Fajitas", "dinner", 650, 44, 48, 28,
          "3 fajitas", ("high-protein", "filling"), 25, 7),
    _meal("d9", "Shrimp Tacos", "dinner", 450, 30, 44, 16,
          "3 tacos", ("high-protein", "quick"), 15, 6),
    _meal("d10", "Stuffed Bell Peppers", "dinner", 380, 26, 36, 14,
          "2 peppers", ("fiber", "filling"), 35, 9),
    # Snacks
    _meal("s1", "Apple with Peanut Butter", "snacks", 200, 5, 25, 8,
          "1 apple + 1 tbsp", ("fiber", "quick", "portable"), 1, 5),
    _meal("s2", "Hard Boiled Eggs", "snacks", 140, 12, 1, 10,
          "2 eggs", ("high-protein", "quick", "portable"), 1, 3),
    _meal("s3", "Beef Jerky", "snacks", 160, 26, 6, 3,
          "2 oz", ("high-protein", "portable", "quick"), 0, 2),
    _meal("s4", "Baby Carrots and Hummus", "snacks", 150, 5, 18, 7,
          "1 cup + 3 tbsp", ("fiber", "quick", "portable", "vegetarian"), 1, 7),
    _meal("s5", "Air-Popped Popcorn", "snacks", 100, 3, 20, 1,
          "3 cups", ("fiber", "filling", "quick"), 5, 9),
    _meal("s6", "Protein Shake", "snacks", 160, 30, 6, 2,
          "12 oz", ("high-protein", "quick", "portable"), 2, 4),
    _meal("s7", "Almonds", "snacks", 170, 6, 6, 15,
          "1 oz", ("portable", "quick"), 0, 2),
    _meal("s8", "Cucumber Slices with Tzatziki", "snacks", 80, 4, 8, 3,
          "1 cup + 1/4 cup", ("low-fat", "quick"), 3, 8),
    _meal("s9", "Edamame", "snacks", 190, 17, 14, 8,
          "1 cup", ("high-protein", "fiber"), 5, 7),
    _meal("s10", "String Cheese and Grapes", "snacks", 130, 8, 14, 5,
          "1 stick + 1 cup grapes", ("portable", "quick"), 1, 4),
)
