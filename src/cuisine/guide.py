import logging
from collections.abc import Iterable
from typing import Any, Optional

from langsmith import traceable

from src.cuisine.models import CulturalGuide, CulturalRecipe
from src.cuisine.tools import AuthenticityTool, RegionalTool, SubstitutionTool

logger = logging.getLogger(__name__)


@traceable(name="build_cultural_guide")
def build_cultural_guide(
    recipe: CulturalRecipe,
    pantry: Iterable[Any],
    region: Optional[str] = None,
    request_id: str = None
) -> CulturalGuide:
    """
    Assemble substitutions, authenticity and regional data for one recipe.

    The authenticity score is computed over the suggested substitutions.
    ``region`` overrides ``recipe.region``; with neither, the regional
    sections are empty.
    """
    region = region or recipe.region
    logger.info(
        f"[{request_id}] Building cultural guide for '{recipe.name}' (region={region})"
    )

    substitutions = SubstitutionTool.find_for_recipe(recipe, pantry, request_id=request_id)
    authenticity = AuthenticityTool.score(substitutions, request_id=request_id)

    return CulturalGuide(
        recipe_name=recipe.name,
        region=region,
        substitutions=substitutions,
        authenticity=authenticity,
        pairings=RegionalTool.get_pairings(region or "", request_id=request_id),
        etiquette=RegionalTool.get_etiquette(region or "", request_id=request_id)
    )
