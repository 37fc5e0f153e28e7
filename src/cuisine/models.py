from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FlavorImpact = Literal["minimal", "moderate", "significant"]


class PantryItem(BaseModel):
    """Free-text pantry entry supplied by the caller."""

    name: str = Field(..., description="Item name as the user typed it")


class CulturalRecipe(BaseModel):
    """Recipe fields the engine reads."""

    name: str = Field(default="", description="Recipe name")
    authentic_ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredients essential to the traditional preparation, in recipe order"
    )
    region: Optional[str] = Field(
        default=None,
        description="Region code of the recipe's cuisine"
    )


class CuisineDescriptor(BaseModel):
    """Cuisine context used for pairing queries."""

    region: str
    key_ingredients: list[str] = Field(default_factory=list)


class SubstitutionRule(BaseModel):
    """Static substitution entry for one canonical ingredient."""

    model_config = ConfigDict(frozen=True)

    substitutes: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Candidate substitutes, most recommended first"
    )
    notes: str
    flavor_impact: FlavorImpact


class IngredientSubstitution(BaseModel):
    """A chosen substitute for one authentic ingredient."""

    original: str
    substitute: str
    notes: str = ""
    flavor_impact: FlavorImpact


class AuthenticityAssessment(BaseModel):
    score: int = Field(..., ge=0, le=100)
    feedback: list[str] = Field(default_factory=list)


class RegionalPairings(BaseModel):
    main_dishes: list[str] = Field(default_factory=list)
    side_dishes: list[str] = Field(default_factory=list)
    desserts: list[str] = Field(default_factory=list)
    beverages: list[str] = Field(default_factory=list)


class RegionalEtiquette(BaseModel):
    presentation: list[str] = Field(default_factory=list)
    customs: list[str] = Field(default_factory=list)
    taboos: list[str] = Field(default_factory=list)
    serving_order: list[str] = Field(default_factory=list)


class RegionInfo(BaseModel):
    code: str
    has_pairings: bool
    has_etiquette: bool


class CulturalGuide(BaseModel):
    """Substitutions, authenticity and regional reference data for one recipe."""

    recipe_name: str = ""
    region: Optional[str] = None
    substitutions: list[IngredientSubstitution] = Field(default_factory=list)
    authenticity: AuthenticityAssessment
    pairings: RegionalPairings
    etiquette: RegionalEtiquette
