"""Sample records for UI previews, demos, and tests."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

from recipekit.domain.models import Recipe, User

_SAMPLE_STAMP = datetime(2024, 1, 14, 10, 30, tzinfo=UTC)
_OWNER_ID = UUID("660e8400-e29b-41d4-a716-446655440000")

SAMPLE_USER = User(
    id=_OWNER_ID,
    google_id="123456789",
    email="john.doe@example.com",
    name="John Doe",
    picture="https://example.com/avatar.jpg",
    created_at=_SAMPLE_STAMP,
    updated_at=_SAMPLE_STAMP,
)

SAMPLE_RECIPE = Recipe(
    id=UUID("550e8400-e29b-41d4-a716-446655440000"),
    user_id=_OWNER_ID,
    name="Chocolate Chip Cookies",
    description=(
        "Classic homemade chocolate chip cookies that are crispy on the outside "
        "and chewy on the inside."
    ),
    ingredients=[
        "2 cups all-purpose flour",
        "1 tsp baking soda",
        "1 cup butter, softened",
        "3/4 cup granulated sugar",
        "3/4 cup packed brown sugar",
        "2 large eggs",
        "2 tsp vanilla extract",
        "2 cups chocolate chips",
    ],
    instructions=[
        "Preheat oven to 375°F (190°C)",
        "Mix flour and baking soda in a bowl",
        "In another bowl, cream butter and sugars until fluffy",
        "Beat in eggs and vanilla extract",
        "Gradually blend in the flour mixture",
        "Fold in chocolate chips",
        "Drop rounded tablespoons of dough onto ungreased cookie sheets",
        "Bake for 10-12 minutes or until golden brown",
        "Cool on baking sheet for 2 minutes before transferring to wire rack",
    ],
    prep_time=15,
    cook_time=12,
    servings=24,
    tags=["dessert", "cookies", "baking", "chocolate"],
    is_favorite=True,
    created_at=_SAMPLE_STAMP,
    updated_at=_SAMPLE_STAMP,
)

SAMPLE_RECIPES: tuple[Recipe, ...] = (
    SAMPLE_RECIPE,
    Recipe(
        id=UUID("550e8400-e29b-41d4-a716-446655440001"),
        user_id=_OWNER_ID,
        name="Spaghetti Carbonara",
        description="Traditional Italian pasta dish with eggs, cheese, and pancetta",
        ingredients=[
            "1 lb spaghetti",
            "4 large eggs",
            "1 cup grated Parmesan cheese",
            "8 oz pancetta or bacon, diced",
            "4 cloves garlic, minced",
            "Salt and black pepper to taste",
            "Fresh parsley for garnish",
        ],
        instructions=[
            "Cook spaghetti according to package directions",
            "Whisk eggs and Parmesan cheese together",
            "Cook pancetta until crispy",
            "Add garlic and cook for 1 minute",
            "Drain pasta, reserving 1 cup pasta water",
            "Toss hot pasta with pancetta",
            "Remove from heat and quickly stir in egg mixture",
            "Add pasta water as needed for creamy consistency",
            "Season with salt and pepper, garnish with parsley",
        ],
        prep_time=10,
        cook_time=20,
        servings=4,
        tags=["pasta", "italian", "dinner"],
        created_at=_SAMPLE_STAMP,
        updated_at=_SAMPLE_STAMP,
    ),
    Recipe(
        id=UUID("550e8400-e29b-41d4-a716-446655440002"),
        user_id=_OWNER_ID,
        name="Caesar Salad",
        description="Crisp romaine lettuce with homemade Caesar dressing",
        ingredients=[
            "1 head romaine lettuce, chopped",
            "1/2 cup Parmesan cheese, shaved",
            "1 cup croutons",
            "2 cloves garlic",
            "2 anchovy fillets",
            "1 egg yolk",
            "2 tbsp lemon juice",
            "1 tsp Dijon mustard",
            "1/2 cup olive oil",
        ],
        instructions=[
            "Make dressing: blend garlic, anchovies, egg yolk, lemon juice, and mustard",
            "Slowly drizzle in olive oil while blending",
            "Toss lettuce with dressing",
            "Top with Parmesan and croutons",
            "Serve immediately",
        ],
        prep_time=15,
        cook_time=0,
        servings=4,
        tags=["salad", "vegetarian", "side dish"],
        is_favorite=True,
        created_at=_SAMPLE_STAMP,
        updated_at=_SAMPLE_STAMP,
    ),
)
