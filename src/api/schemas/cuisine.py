from pydantic import BaseModel, Field, model_validator
from typing import Optional

from src.cuisine.models import (
    CulturalRecipe,
    IngredientSubstitution,
    PantryItem,
)


class SubstitutionRequest(BaseModel):
    """Ingredients to resolve, given directly or through a recipe."""

    authentic_ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredient names in recipe order"
    )
    recipe: Optional[CulturalRecipe] = Field(
        default=None,
        description="Recipe whose authentic ingredients are used instead"
    )
    pantry: list[PantryItem] = Field(
        default_factory=list,
        description="Items the user has available"
    )

    @model_validator(mode="after")
    def _use_recipe_ingredients(self):
        if self.recipe is not None and not self.authentic_ingredients:
            self.authentic_ingredients = list(self.recipe.authentic_ingredients)
        return self


class SubstitutionResponse(BaseModel):
    request_id: str
    substitutions: list[IngredientSubstitution]
    skipped_ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredients with no substitution rule"
    )


class AuthenticityRequest(BaseModel):
    substitutions: list[IngredientSubstitution] = Field(
        default_factory=list,
        description="Substitutions the user intends to apply"
    )


class GuideRequest(BaseModel):
    """Request for a combined cultural guide."""

    recipe: CulturalRecipe
    pantry: list[PantryItem] = Field(default_factory=list)
    region: Optional[str] = Field(
        default=None,
        description="Region code; defaults to the recipe's region"
    )
