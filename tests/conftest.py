import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def thai_recipe():
    from src.cuisine.models import CulturalRecipe

    return CulturalRecipe(
        name="Tom Kha Gai",
        authentic_ingredients=[
            "Galangal",
            "Lemongrass",
            "Kaffir Lime Leaves",
            "Fish Sauce",
            "Coconut Milk",
            "Chicken",
        ],
        region="southeast_asia",
    )


@pytest.fixture
def sample_pantry():
    from src.cuisine.models import PantryItem

    return [
        PantryItem(name="Fresh Ginger Root"),
        PantryItem(name="Light Soy Sauce"),
        PantryItem(name="Unsalted Butter"),
        PantryItem(name="Coconut Milk (canned)"),
    ]


@pytest.fixture
def mixed_substitutions():
    from src.cuisine.models import IngredientSubstitution

    return [
        IngredientSubstitution(
            original="tahini",
            substitute="smooth peanut butter",
            notes="Thin with sesame oil if available for closer flavor profile",
            flavor_impact="minimal",
        ),
        IngredientSubstitution(
            original="galangal",
            substitute="ginger",
            notes="True galangal has a sharper, citrusy flavor than ginger",
            flavor_impact="moderate",
        ),
        IngredientSubstitution(
            original="fish sauce",
            substitute="soy sauce with salt",
            notes="Add a pinch of salt and a drop of vinegar to better mimic umami flavor",
            flavor_impact="significant",
        ),
    ]
